"""Size ordering for listed entries."""

from __future__ import annotations

from collections.abc import Iterable

from .types import Entry, SortOrder


def sort_entries(entries: Iterable[Entry], order: SortOrder | str = SortOrder.ASC) -> list[Entry]:
    """Return entries ordered by size only.

    The sort is stable in both directions: equal sizes keep their input order.
    """
    resolved = SortOrder.parse(order)
    return sorted(entries, key=lambda entry: entry.size, reverse=resolved is SortOrder.DESC)


__all__ = ["sort_entries"]
