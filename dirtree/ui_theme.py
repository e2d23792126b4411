"""UI theme definitions and selection helpers.

Themes map each entry style to a ``pygments.console`` attribute string such as
``"*brightblue*"`` (bold bright blue). An empty attribute leaves text untouched,
so ``PLAIN_THEME`` is the no-op styler used for non-terminal output.
"""

from __future__ import annotations

from dataclasses import dataclass

from pygments.console import ansiformat


@dataclass(frozen=True)
class UITheme:
    """Named text styles used by tree renderers."""

    name: str
    tree_dir: str
    tree_link: str
    tree_executable: str
    tree_file_default: str

    def paint(self, attr: str, text: str) -> str:
        """Apply console attribute ``attr`` to ``text``."""
        if not attr:
            return text
        return ansiformat(attr, text)


DEFAULT_THEME = UITheme(
    name="default",
    tree_dir="*brightblue*",
    tree_link="*brightcyan*",
    tree_executable="*brightgreen*",
    tree_file_default="",
)

OCEAN_THEME = UITheme(
    name="ocean",
    tree_dir="*cyan*",
    tree_link="*brightmagenta*",
    tree_executable="*brightyellow*",
    tree_file_default="",
)

PLAIN_THEME = UITheme(
    name="plain",
    tree_dir="",
    tree_link="",
    tree_executable="",
    tree_file_default="",
)

_THEMES: dict[str, UITheme] = {theme.name: theme for theme in (DEFAULT_THEME, OCEAN_THEME)}


def available_theme_names() -> tuple[str, ...]:
    """Names accepted by ``--theme``; ``plain`` is chosen by color mode instead."""
    return tuple(sorted(_THEMES))


def normalize_theme_name(name: str | None) -> str:
    """Map a ``--theme`` value to a known palette name.

    Matching ignores case and surrounding whitespace. Unknown or missing names
    select ``default``; the tree output never fails over a bad theme name.
    """
    candidate = (name or "").strip().lower()
    return candidate if candidate in _THEMES else DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Pick the palette for a run; ``no_color`` forces the unstyled one."""
    return PLAIN_THEME if no_color else _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
