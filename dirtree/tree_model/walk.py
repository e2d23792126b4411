"""Depth-first directory walk that emits tree rows and tallies counts.

Rows are produced pre-order: each entry's line is emitted before the walk
descends into it, and siblings are visited in sorted order, so the output for
an unchanged tree is identical across runs.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable

from ..ui_theme import UITheme
from .filtering import filter_entries, sort_entries
from .fs import list_entries, probe_directory
from .rendering import format_entry_line, format_error_lines, format_root_line
from .types import Counters, Entry, TraversalOptions

logger = logging.getLogger(__name__)

BRANCH_MIDDLE = "├── "
BRANCH_LAST = "└── "
INDENT_CONTINUE = "│   "
INDENT_LAST = "    "
ROOT_ERROR_MESSAGE = "error opening dir"


def _visible_entries(path: str, options: TraversalOptions) -> list[Entry]:
    """Return the sorted, filtered listing of ``path``; empty when unreadable."""
    try:
        entries = list_entries(path)
    except OSError as exc:
        logger.debug("Skipping unreadable directory %s: %s", path, exc)
        return []
    return filter_entries(sort_entries(entries), options)


def walk_directory(
    path: str,
    prefix: str,
    options: TraversalOptions,
    counters: Counters,
    emit: Callable[[str], None],
    theme: UITheme | None = None,
) -> None:
    """Emit rows for the contents of ``path`` and descend into subdirectories.

    A directory that cannot be listed contributes no rows and no counts;
    the error stops there so siblings and ancestors keep walking.

    Descent uses an explicit stack of ``(path, prefix, entries, next_index)``
    frames, so tree depth is not bounded by the interpreter recursion limit.
    A directory is listed only when the walk enters it.
    """
    stack: list[tuple[str, str, list[Entry], int]] = [(path, prefix, _visible_entries(path, options), 0)]
    while stack:
        dir_path, dir_prefix, visible, idx = stack.pop()
        if idx >= len(visible):
            continue
        stack.append((dir_path, dir_prefix, visible, idx + 1))

        entry = visible[idx]
        last = idx == len(visible) - 1
        branch = BRANCH_LAST if last else BRANCH_MIDDLE
        full_path = dir_path + os.sep + entry.name
        emit(format_entry_line(entry, dir_prefix + branch, full_path, options, theme))

        if entry.is_dir:
            counters.directories += 1
            child_prefix = dir_prefix + (INDENT_LAST if last else INDENT_CONTINUE)
            stack.append((full_path, child_prefix, _visible_entries(full_path, options), 0))
        else:
            counters.files += 1


def render_tree(
    root: str,
    options: TraversalOptions,
    emit: Callable[[str], None],
    theme: UITheme | None = None,
) -> Counters | None:
    """Emit the full listing for ``root`` including header and summary.

    Returns the final counters, or ``None`` after emitting the error block
    when ``root`` cannot be opened as a directory.
    """
    error = probe_directory(root)
    if error is not None:
        logger.debug("Cannot open %s: %s", root, error)
        for line in format_error_lines(root, ROOT_ERROR_MESSAGE, theme):
            emit(line)
        return None

    counters = Counters()
    emit(format_root_line(root, theme))
    walk_directory(root, "", options, counters, emit, theme)
    emit("")
    emit(counters.summary(options.directories_only))
    return counters


__all__ = [
    "BRANCH_MIDDLE",
    "BRANCH_LAST",
    "INDENT_CONTINUE",
    "INDENT_LAST",
    "ROOT_ERROR_MESSAGE",
    "walk_directory",
    "render_tree",
]
