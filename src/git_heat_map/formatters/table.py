"""Row/column model shared by every renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..ranking import FrequencyEntry

CHANGES_HEADER = "Changes"
FILE_HEADER = "File/Folder"

# Columns are never narrower than their header labels
MIN_CHANGES_WIDTH = len(CHANGES_HEADER)
MIN_FILE_WIDTH = len(FILE_HEADER)


@dataclass(frozen=True)
class TableSpec:
    """Header labels, column widths and body rows for one heat map table."""

    rows: tuple[tuple[str, str], ...]
    changes_width: int = MIN_CHANGES_WIDTH
    max_label_width: int = MIN_FILE_WIDTH
    changes_header: str = CHANGES_HEADER
    file_header: str = FILE_HEADER

    def format_row(self, changes: str, path: str) -> str:
        return f"| {changes:<{self.changes_width}} | {path:<{self.max_label_width}} |"

    def header_line(self) -> str:
        return self.format_row(self.changes_header, self.file_header)

    def separator_line(self) -> str:
        return f"|-{'-' * self.changes_width}-|-{'-' * self.max_label_width}-|"

    def body_lines(self) -> list[str]:
        return [self.format_row(changes, path) for changes, path in self.rows]

    def lines(self) -> list[str]:
        return [self.header_line(), self.separator_line(), *self.body_lines()]


def build_table_spec(entries: Sequence[FrequencyEntry]) -> TableSpec:
    """Size both columns to fit their header and the widest value."""
    rows = tuple((str(e.count), e.path) for e in entries)
    changes_width = max([MIN_CHANGES_WIDTH, *(len(c) for c, _ in rows)])
    max_label_width = max([MIN_FILE_WIDTH, *(len(p) for _, p in rows)])
    return TableSpec(rows=rows, changes_width=changes_width, max_label_width=max_label_width)
