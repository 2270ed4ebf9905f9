"""Error hierarchy for directory listing.

Every error is an ``OSError`` carrying the offending path in ``filename`` so
callers that already handle filesystem failures keep working.
"""

from __future__ import annotations

import errno
from pathlib import Path


class DirsizeError(OSError):
    """Base class for listing failures."""

    def __init__(self, message: str, path: Path | str | None = None, code: int = errno.EIO) -> None:
        super().__init__(code, message, None if path is None else str(path))

    def __str__(self) -> str:
        if self.filename is None:
            return self.strerror
        return f"{self.strerror}: {self.filename}"


class RootNotFoundError(DirsizeError):
    """Root path is missing or is not a directory."""


class ListingError(DirsizeError):
    """Scanning or stat failed somewhere beneath the root."""


class RenderError(DirsizeError):
    """An entry could not be re-read while rendering."""


__all__ = [
    "DirsizeError",
    "RootNotFoundError",
    "ListingError",
    "RenderError",
]
