"""Filesystem listing for the tree walk.

Entries are read with ``lstat`` semantics: symbolic links are reported as
links and never as the directories they may point to.
"""

from __future__ import annotations

import os
import stat

from .types import Entry

_EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def _entry_from_dir_entry(child: os.DirEntry) -> Entry:
    """Build an ``Entry`` from one ``os.scandir`` row."""
    info = child.stat(follow_symlinks=False)
    mode = info.st_mode
    return Entry(
        name=child.name,
        is_dir=stat.S_ISDIR(mode),
        size=int(info.st_size),
        is_symlink=stat.S_ISLNK(mode),
        is_executable=bool(stat.S_IMODE(mode) & _EXECUTE_BITS),
    )


def list_entries(path: str) -> list[Entry]:
    """Return the entries of ``path`` in the order the filesystem yields them.

    Children removed between the directory read and their ``lstat`` are
    skipped. Any other ``OSError`` propagates to the caller.
    """
    entries: list[Entry] = []
    with os.scandir(path) as children:
        for child in children:
            try:
                entries.append(_entry_from_dir_entry(child))
            except FileNotFoundError:
                continue
    return entries


def probe_directory(path: str) -> OSError | None:
    """Return the error raised when opening ``path`` as a directory, if any."""
    # A regular file fails here with NotADirectoryError, so it is a root-open failure.
    try:
        with os.scandir(path):
            pass
    except OSError as exc:
        return exc
    return None


__all__ = [
    "list_entries",
    "probe_directory",
]
