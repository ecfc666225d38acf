"""Aggregate path mentions into change counts and rank them."""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass
from typing import Any, Iterable

from .exceptions import InvalidLimitError

_INTEGER_RE = re.compile(r"^[+-]?[0-9]+$")


@dataclass(frozen=True)
class FrequencyEntry:
    """A path and the number of commits that changed it."""

    path: str
    count: int


def validate_limit(value: Any) -> int:
    """Coerce a results count to a positive int.

    Accepts ints and decimal strings. Anything else, and anything below 1,
    raises InvalidLimitError.
    """
    if value is None:
        raise InvalidLimitError(value, "a number of results is required")

    # bool is an int subclass; True is not a result count
    if isinstance(value, bool):
        raise InvalidLimitError(value, "expected a positive integer")

    if isinstance(value, int):
        limit = value
    elif isinstance(value, str):
        text = value.strip()
        if not _INTEGER_RE.match(text):
            raise InvalidLimitError(value, "expected a positive integer")
        limit = int(text)
    else:
        raise InvalidLimitError(value, "expected a positive integer")

    if limit < 1:
        raise InvalidLimitError(value, "must be at least 1")
    return limit


def tally_paths(records: Iterable[str]) -> dict[str, int]:
    """Count how many times each path appears in the record stream."""
    return dict(Counter(records))


def sort_entries(counts: dict[str, int]) -> list[FrequencyEntry]:
    """Order entries by count descending, then by path ascending."""
    entries = [FrequencyEntry(path=path, count=count) for path, count in counts.items()]
    entries.sort(key=lambda e: (-e.count, e.path))
    return entries


def rank_paths(records: Iterable[str], limit: Any) -> list[FrequencyEntry]:
    """Return the ``limit`` most frequently changed paths.

    Ties on count are broken by ascending path so output is reproducible.
    Fewer than ``limit`` distinct paths simply yields all of them.

    Raises:
        InvalidLimitError: If limit is not a positive integer
    """
    n = validate_limit(limit)
    return sort_entries(tally_paths(records))[:n]
