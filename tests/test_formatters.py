"""Tests for the formatters package."""

import io

from rich.console import Console

from git_heat_map.formatters import (
    PlainRenderer,
    StyledRenderer,
    build_table_spec,
    get_renderer,
)
from git_heat_map.ranking import FrequencyEntry


def _entries(*pairs):
    return [FrequencyEntry(path=path, count=count) for path, count in pairs]


class TestBuildTableSpec:
    def test_minimum_widths(self):
        spec = build_table_spec(_entries(("a.txt", 2)))
        assert spec.changes_width == 7
        assert spec.max_label_width == 11

    def test_file_column_grows_with_longest_path(self):
        long_path = "src/package/deeply/nested/module.py"
        spec = build_table_spec(_entries(("a.py", 9), (long_path, 3)))
        assert spec.max_label_width == len(long_path)

    def test_changes_column_grows_with_large_counts(self):
        spec = build_table_spec(_entries(("a.py", 123456789)))
        assert spec.changes_width == 9

    def test_rows_follow_entry_order(self):
        spec = build_table_spec(_entries(("b.py", 5), ("a.py", 1)))
        assert spec.rows == (("5", "b.py"), ("1", "a.py"))


class TestPlainRenderer:
    def test_three_commit_scenario(self):
        text = PlainRenderer().render(build_table_spec(_entries(("a.txt", 2), ("b.txt", 2))))
        assert text.splitlines() == [
            "| Changes | File/Folder |",
            "|---------|-------------|",
            "| 2       | a.txt       |",
            "| 2       | b.txt       |",
        ]

    def test_empty_result_has_header_and_separator_only(self):
        lines = PlainRenderer().render(build_table_spec([])).splitlines()
        assert lines == ["| Changes | File/Folder |", "|---------|-------------|"]

    def test_all_rows_same_width(self):
        entries = _entries(
            ("src/app/very_long_module_name.py", 42),
            ("README.md", 7),
            ("x", 1),
        )
        lines = PlainRenderer().render(build_table_spec(entries)).splitlines()
        assert len({len(line) for line in lines}) == 1
        # "| " + 7 + " | " + 32 + " |"
        assert len(lines[0]) == 7 + len("src/app/very_long_module_name.py") + 7

    def test_long_path_widens_header(self):
        text = PlainRenderer().render(build_table_spec(_entries(("abcdefghijklmn.py", 1))))
        assert text.splitlines()[0] == "| Changes | File/Folder       |"

    def test_display_writes_exact_text(self):
        buf = io.StringIO()
        console = Console(file=buf, width=20)
        spec = build_table_spec(_entries(("a/very/long/path/that/exceeds/width.py", 3)))
        PlainRenderer().display(spec, console)
        assert buf.getvalue() == PlainRenderer().render(spec) + "\n"


class TestStyledRenderer:
    def test_markdown_document(self):
        spec = build_table_spec(_entries(("a.txt", 2)))
        text = StyledRenderer().render(spec)
        lines = text.splitlines()
        assert lines[0] == "## Git Heat Map Results"
        assert lines[1] == ""
        # Row/column computation is shared with plain mode
        assert lines[2:] == PlainRenderer().render(spec).splitlines()

    def test_display_renders_paths(self):
        buf = io.StringIO()
        console = Console(file=buf, width=80, force_terminal=False, _environ={})
        StyledRenderer().display(build_table_spec(_entries(("a.txt", 2))), console)
        output = buf.getvalue()
        assert "Git Heat Map Results" in output
        assert "a.txt" in output


class TestGetRenderer:
    def test_selects_by_flag(self):
        assert isinstance(get_renderer(True), StyledRenderer)
        assert isinstance(get_renderer(False), PlainRenderer)
