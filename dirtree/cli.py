"""Command-line front door for dirtree.

Parses CLI options, picks a color theme for the output stream, and prints
the tree for the requested directory.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import TextIO

from .tree_model import TraversalOptions, render_tree
from .ui_theme import available_theme_names, resolve_theme


def _stream_is_tty(stream: TextIO) -> bool:
    """Return whether ``stream`` is attached to a terminal."""
    try:
        return os.isatty(stream.fileno())
    except (AttributeError, OSError, ValueError):
        return False


def should_colorize(stream: TextIO, no_color: bool) -> bool:
    """Decide whether styled output should be written to ``stream``.

    Color is off when requested on the command line, when ``NO_COLOR`` is set
    to a non-empty value, or when the stream is not a terminal.
    """
    if no_color or os.environ.get("NO_COLOR"):
        return False
    return _stream_is_tty(stream)


def allow_undecodable_names(stream: TextIO) -> None:
    """Write filenames that are not valid in the stream encoding as their raw bytes.

    ``os.scandir`` decodes such names with ``surrogateescape``; the same error
    handler on the way out restores the original bytes.
    """
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="surrogateescape")


def _detach_closed_stream(stream: TextIO) -> None:
    """Point a stream whose reader went away at ``os.devnull``.

    This keeps the interpreter's final flush from raising ``BrokenPipeError`` again.
    """
    try:
        fd = stream.fileno()
    except (AttributeError, OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)
    os.close(devnull)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser; ``-h`` selects sizes, so help is ``--help``."""
    parser = argparse.ArgumentParser(
        prog="dirtree",
        description="List the contents of a directory as a tree.",
        add_help=False,
    )
    parser.add_argument("path", nargs="?", default=".", help="Directory to list. Defaults to current directory.")
    parser.add_argument("-f", dest="full_path", action="store_true", help="Print the full path prefix for each file.")
    parser.add_argument("-h", dest="human", action="store_true", help="Print the size in a more human readable way.")
    parser.add_argument("-d", dest="dirs_only", action="store_true", help="List directories only.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"Color theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--verbose", action="store_true", help="Log skipped directories to stderr.")
    parser.add_argument("--help", action="help", help="Show this help message and exit.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and print the tree for the requested directory.

    Exits with status 1 when the starting directory cannot be opened or the
    reader of stdout closes it before the listing is complete.
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    out = sys.stdout
    allow_undecodable_names(out)
    options = TraversalOptions(
        show_full_path=args.full_path,
        human_readable_sizes=args.human,
        directories_only=args.dirs_only,
    )
    theme = resolve_theme(args.theme, no_color=not should_colorize(out, args.no_color))

    def emit(line: str) -> None:
        out.write(line + "\n")

    try:
        counters = render_tree(args.path, options, emit, theme)
        out.flush()
    except BrokenPipeError:
        _detach_closed_stream(out)
        raise SystemExit(1)
    if counters is None:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
