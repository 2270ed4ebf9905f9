"""Filesystem scanning and size aggregation for top-level entries."""

from __future__ import annotations

import errno
import logging
import os
from pathlib import Path

from ..errors import ListingError, RootNotFoundError
from .types import Entry

logger = logging.getLogger(__name__)


def _validate_root(root: Path) -> Path:
    """Return ``root`` when it is an existing directory, else raise."""
    try:
        is_dir = root.is_dir()
        exists = is_dir or root.exists()
    except OSError as exc:
        raise ListingError(f"cannot access root ({exc.strerror or exc})", root) from exc
    if not exists:
        raise RootNotFoundError("directory does not exist", root, errno.ENOENT)
    if not is_dir:
        raise RootNotFoundError("not a directory", root, errno.ENOTDIR)
    return root


def directory_size(path: Path) -> int:
    """Return total bytes of every non-directory node beneath ``path``.

    Directories contribute nothing themselves. Symlinks are not followed and
    count with their own ``lstat`` size. Any scan or stat failure raises
    ``ListingError`` naming the path that failed.
    """
    total = 0
    pending: list[str] = [os.fspath(path)]
    while pending:
        current = pending.pop()
        try:
            with os.scandir(current) as entries:
                for child in entries:
                    try:
                        if child.is_dir(follow_symlinks=False):
                            pending.append(child.path)
                            continue
                        total += int(child.stat(follow_symlinks=False).st_size)
                    except OSError as exc:
                        raise ListingError(f"cannot stat ({exc.strerror or exc})", child.path) from exc
        except ListingError:
            raise
        except OSError as exc:
            raise ListingError(f"cannot scan ({exc.strerror or exc})", current) from exc
    return total


def list_children(root: Path | str) -> list[Entry]:
    """List immediate children of ``root`` with aggregated sizes.

    Files report their byte length; directories report ``directory_size``.
    Results are ordered by name so later stable sorts are deterministic. Any
    failure aborts the scan and no partial list is returned.
    """
    root_path = _validate_root(Path(root))
    logger.debug("scanning %s", root_path)

    entries: list[Entry] = []
    try:
        with os.scandir(root_path) as children:
            for child in children:
                child_path = Path(child.path)
                try:
                    is_dir = child.is_dir(follow_symlinks=False)
                    size = directory_size(child_path) if is_dir else int(child.stat(follow_symlinks=False).st_size)
                except ListingError:
                    raise
                except OSError as exc:
                    raise ListingError(f"cannot stat ({exc.strerror or exc})", child_path) from exc
                entries.append(Entry(path=child_path, is_dir=is_dir, size=size))
    except ListingError:
        raise
    except OSError as exc:
        raise ListingError(f"cannot scan ({exc.strerror or exc})", root_path) from exc

    entries.sort(key=lambda entry: entry.name)
    logger.debug("found %d entries under %s", len(entries), root_path)
    return entries


__all__ = [
    "directory_size",
    "list_children",
]
