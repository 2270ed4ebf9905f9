"""Command-line front door for dirsize.

Parses CLI options, scans the root, and prints the size-sorted listing.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from .errors import ListingError, RenderError, RootNotFoundError
from .listing import SortOrder, list_children, sort_entries
from .render import render

USAGE_MESSAGE = "Please specify a directory using the --root flag."

logger = logging.getLogger("dirsize")


@dataclass(frozen=True)
class ListingOptions:
    """Resolved options for one listing run."""

    root: Path
    sort: SortOrder
    color: bool


def _sort_order(value: str) -> SortOrder:
    """argparse type for ``asc``/``desc``."""
    try:
        return SortOrder.parse(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _configure_logging(verbose: bool) -> None:
    """Send package log records to stderr at WARNING, or DEBUG when verbose."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dirsize",
        description="List a directory's immediate children sorted by total size.",
    )
    parser.add_argument("--root", default=None, help="Directory to scan.")
    parser.add_argument(
        "--sort",
        type=_sort_order,
        default=SortOrder.ASC,
        metavar="{asc,desc}",
        help="Size sort order (default: asc).",
    )
    parser.add_argument("--color", action="store_true", help="Color the [DIR]/[FILE] tags and sizes with ANSI codes.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr.")
    return parser


def resolve_options(args: argparse.Namespace) -> ListingOptions:
    """Build run options from parsed flags. Output stays plain unless ``--color`` is given."""
    return ListingOptions(root=Path(args.root), sort=args.sort, color=args.color)


def run_listing(options: ListingOptions, stdout: TextIO) -> None:
    """Scan, sort, and print one listing, raising listing errors unchanged."""
    logger.debug("listing %s sorted %s", options.root, options.sort.value)
    entries = sort_entries(list_children(options.root), options.sort)
    render(entries, stdout, color=options.color)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and print the size listing for ``--root``.

    A missing ``--root`` prints a usage hint and returns normally. Scan and
    render failures exit with status 1 and a one-line message on stderr.
    """
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    if args.root is None:
        print(USAGE_MESSAGE)
        return

    stdout = sys.stdout
    options = resolve_options(args)
    try:
        run_listing(options, stdout)
    except RootNotFoundError as exc:
        raise SystemExit(f"{exc.strerror.capitalize()}: {exc.filename}") from exc
    except RenderError as exc:
        stdout.flush()
        raise SystemExit(f"Error getting info for {exc.filename}: {exc.strerror}") from exc
    except ListingError as exc:
        raise SystemExit(f"Error walking the directory: {exc}") from exc


if __name__ == "__main__":
    main()
