"""Datatypes shared by the directory walk, listing, and rendering steps."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Entry:
    """One filesystem object observed while listing a directory."""

    name: str
    is_dir: bool
    size: int = 0
    is_symlink: bool = False
    is_executable: bool = False


@dataclass(frozen=True)
class TraversalOptions:
    """Display switches fixed for a whole run."""

    show_full_path: bool = False
    human_readable_sizes: bool = False
    directories_only: bool = False


@dataclass
class Counters:
    """Running totals of directories and files printed during one walk."""

    directories: int = 0
    files: int = 0

    def summary(self, directories_only: bool) -> str:
        if directories_only:
            return f"{self.directories} directories"
        return f"{self.directories} directories, {self.files} files"


__all__ = [
    "Entry",
    "TraversalOptions",
    "Counters",
]
