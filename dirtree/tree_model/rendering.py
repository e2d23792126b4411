"""Formatting helpers for tree rows, the header line, and error output."""

from __future__ import annotations

from ..ui_theme import DEFAULT_THEME, UITheme
from .sizes import format_size
from .types import Entry, TraversalOptions


class EntryStyle:
    """Style keys for displayed entry names, in selection priority order."""

    DIRECTORY = "directory"
    LINK = "link"
    EXECUTABLE = "executable"
    DEFAULT = "default"


def style_for_entry(entry: Entry) -> str:
    """Return the single style that applies to ``entry``.

    Directory beats link beats executable, so an executable symlink is
    styled as a link.
    """
    if entry.is_dir:
        return EntryStyle.DIRECTORY
    if entry.is_symlink:
        return EntryStyle.LINK
    if entry.is_executable:
        return EntryStyle.EXECUTABLE
    return EntryStyle.DEFAULT


def style_attr(style: str, theme: UITheme) -> str:
    """Map a style key to the theme's console attribute."""
    if style == EntryStyle.DIRECTORY:
        return theme.tree_dir
    if style == EntryStyle.LINK:
        return theme.tree_link
    if style == EntryStyle.EXECUTABLE:
        return theme.tree_executable
    return theme.tree_file_default


def format_entry_line(
    entry: Entry,
    branch_prefix: str,
    full_path: str,
    options: TraversalOptions,
    theme: UITheme | None = None,
) -> str:
    """Render one tree row (without line terminator)."""
    active_theme = theme or DEFAULT_THEME
    name = full_path if options.show_full_path else entry.name
    size_label = ""
    if options.human_readable_sizes:
        size_label = f"[{format_size(entry.size):>4}]  "
    styled_name = active_theme.paint(style_attr(style_for_entry(entry), active_theme), name)
    return f"{branch_prefix}{size_label}{styled_name}"


def format_root_line(path: str, theme: UITheme | None = None) -> str:
    """Render the starting directory header."""
    active_theme = theme or DEFAULT_THEME
    return active_theme.paint(active_theme.tree_dir, path)


def format_error_lines(path: str, message: str, theme: UITheme | None = None) -> list[str]:
    """Render the fatal root-open error block, ending with an empty summary."""
    return [
        f"{format_root_line(path, theme)} [{message}]",
        "",
        "0 directories, 0 files",
    ]


__all__ = [
    "EntryStyle",
    "style_for_entry",
    "style_attr",
    "format_entry_line",
    "format_root_line",
    "format_error_lines",
]
