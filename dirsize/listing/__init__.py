"""Domain model for listing a directory's top-level entries by size.

This package contains non-UI listing primitives:
- entry and sort-order datatypes
- filesystem scanning and recursive size aggregation
- size ordering
"""

from __future__ import annotations

from .types import Entry, SortOrder
from .fs import directory_size, list_children
from .sorting import sort_entries

__all__ = [
    "Entry",
    "SortOrder",
    "directory_size",
    "list_children",
    "sort_entries",
]
