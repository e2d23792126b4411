"""Print a directory as an indented tree with optional sizes and full paths.

``main`` runs the ``dirtree`` command. The walk, listing, and row formatting
live in ``dirtree.tree_model``; color palettes live in ``dirtree.ui_theme``.
"""

from __future__ import annotations


def main(argv: list[str] | None = None) -> None:
    """Run the ``dirtree`` command; the CLI module loads on first call."""
    from .cli import main as cli_main

    cli_main(argv)


__all__ = ["main"]
