"""Ordering and directories-only filtering for one directory listing."""

from __future__ import annotations

from .types import Entry, TraversalOptions


def sort_entries(entries: list[Entry]) -> list[Entry]:
    """Return entries ordered by case-insensitive name.

    ``sorted`` is stable, so names equal after lowercasing keep the order the
    filesystem delivered them in.
    """
    return sorted(entries, key=lambda entry: entry.name.lower())


def filter_entries(entries: list[Entry], options: TraversalOptions) -> list[Entry]:
    """Drop non-directories when ``directories_only`` is set."""
    if not options.directories_only:
        return entries
    return [entry for entry in entries if entry.is_dir]


__all__ = [
    "sort_entries",
    "filter_entries",
]
