"""Render sorted entries as one text line each.

Entries are re-classified from a fresh ``lstat`` at render time, so a path
that disappeared after scanning raises ``RenderError`` part way through. Lines
produced before the failure have already been yielded.
"""

from __future__ import annotations

import stat as stat_module
from collections.abc import Iterable, Iterator
from typing import TextIO

from pygments.console import ansiformat

from .errors import RenderError
from .listing.types import Entry
from .size_format import format_size

EMPTY_MESSAGE = "No files or directories found."
DIR_TAG = "[DIR] "
FILE_TAG = "[FILE]"
DIR_TAG_COLOR = "*blue*"
FILE_TAG_COLOR = "green"
SIZE_COLOR = "faint"


def _entry_is_dir(entry: Entry) -> bool:
    """Return current directory-ness of ``entry.path`` without following symlinks."""
    try:
        mode = entry.path.lstat().st_mode
    except OSError as exc:
        raise RenderError(exc.strerror or str(exc), entry.path) from exc
    return stat_module.S_ISDIR(mode)


def format_entry_line(entry: Entry, is_dir: bool, color: bool = False) -> str:
    """Build ``[DIR]  name (size)`` / ``[FILE] name (size)`` for one entry."""
    tag = DIR_TAG if is_dir else FILE_TAG
    size_label = format_size(entry.size)
    if not color:
        return f"{tag} {entry.name} ({size_label})"
    tag_text = ansiformat(DIR_TAG_COLOR if is_dir else FILE_TAG_COLOR, tag)
    return f"{tag_text} {entry.name} {ansiformat(SIZE_COLOR, f'({size_label})')}"


def iter_render_lines(entries: Iterable[Entry], color: bool = False) -> Iterator[str]:
    """Yield one formatted line per entry, or the empty-listing message."""
    emitted = False
    for entry in entries:
        emitted = True
        yield format_entry_line(entry, _entry_is_dir(entry), color=color)
    if not emitted:
        yield EMPTY_MESSAGE


def render(entries: Iterable[Entry], stream: TextIO, color: bool = False) -> None:
    """Write rendered lines to ``stream`` as they are produced."""
    for line in iter_render_lines(entries, color=color):
        stream.write(line + "\n")


__all__ = [
    "EMPTY_MESSAGE",
    "format_entry_line",
    "iter_render_lines",
    "render",
]
