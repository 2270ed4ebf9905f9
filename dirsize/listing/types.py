"""Domain datatypes for top-level directory entries and sort order."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class SortOrder(str, Enum):
    """Size ordering requested for a listing."""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: "SortOrder | str") -> "SortOrder":
        """Return the order named by ``value`` or raise ``ValueError``."""
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        for order in cls:
            if order.value == normalized:
                return order
        raise ValueError(f"invalid sort order: {value!r} (expected 'asc' or 'desc')")


@dataclass(frozen=True)
class Entry:
    """One immediate child of the scanned root with its aggregated size."""

    path: Path
    is_dir: bool
    size: int

    @property
    def name(self) -> str:
        return self.path.name


__all__ = [
    "Entry",
    "SortOrder",
]
