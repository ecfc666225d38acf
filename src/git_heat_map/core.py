"""Heat map pipeline: extract history, rank paths, render the table."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, Optional

from rich.console import Console

from .formatters import build_table_spec, get_renderer
from .history import GitHistoryExtractor
from .logging_config import get_logger
from .ranking import FrequencyEntry, sort_entries, tally_paths, validate_limit

logger = get_logger(__name__)


@dataclass
class HeatMapResult:
    """Ranked entries plus the bookkeeping of the run that produced them."""

    repo_root: Path
    limit: int
    entries: list[FrequencyEntry] = field(default_factory=list)
    total_records: int = 0
    distinct_paths: int = 0


class _Counted:
    """Iterate over records while counting them."""

    def __init__(self, records: Iterable[str]):
        self._records = records
        self.count = 0

    def __iter__(self) -> Iterator[str]:
        for record in self._records:
            self.count += 1
            yield record


def build_heat_map(
    repo_path: str | Path,
    limit: int,
    exclude_deleted: bool = False,
    extractor: Optional[GitHistoryExtractor] = None,
) -> HeatMapResult:
    """Rank the most frequently changed paths of a repository.

    Args:
        repo_path: Any directory inside the working tree
        limit: Number of entries to keep (>= 1)
        exclude_deleted: Drop paths that are gone at HEAD
        extractor: Override the history source (tests)

    Raises:
        InvalidLimitError: If limit is not a positive integer
        NotARepositoryError: If repo_path is not inside a git working tree
        HistoryReadError: If git fails while reading history
    """
    n = validate_limit(limit)
    extractor = extractor or GitHistoryExtractor(repo_path)

    root = extractor.toplevel()
    logger.info("Git repository detected at %s", root)

    logger.info("Fetching git commit data for %d results", n)
    records = _Counted(extractor.stream_paths(exclude_deleted=exclude_deleted))
    counts = tally_paths(records)
    logger.debug("Extracted %d path records, %d distinct paths", records.count, len(counts))

    return HeatMapResult(
        repo_root=root,
        limit=n,
        entries=sort_entries(counts)[:n],
        total_records=records.count,
        distinct_paths=len(counts),
    )


def render_heat_map(
    entries: list[FrequencyEntry],
    styled: bool = False,
    console: Optional[Console] = None,
) -> str:
    """Format ranked entries as a table string, printing it when a console is given."""
    logger.info("Formatting output")
    renderer = get_renderer(styled)
    spec = build_table_spec(entries)
    if console is not None:
        renderer.display(spec, console)
    return renderer.render(spec)
