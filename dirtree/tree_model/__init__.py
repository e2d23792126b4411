"""Directory-tree listing model.

This package contains the non-CLI pieces of the tree printer:
- entry, option, and counter datatypes
- filesystem listing and root probing
- sorting and directories-only filtering
- size scaling and row formatting
- the recursive walk that ties them together
"""

from __future__ import annotations

from .types import Counters, Entry, TraversalOptions
from .fs import list_entries, probe_directory
from .filtering import filter_entries, sort_entries
from .sizes import format_size
from .rendering import EntryStyle, format_entry_line, format_error_lines, format_root_line, style_for_entry
from .walk import render_tree, walk_directory

__all__ = [
    "Counters",
    "Entry",
    "TraversalOptions",
    "list_entries",
    "probe_directory",
    "filter_entries",
    "sort_entries",
    "format_size",
    "EntryStyle",
    "format_entry_line",
    "format_error_lines",
    "format_root_line",
    "style_for_entry",
    "render_tree",
    "walk_directory",
]
