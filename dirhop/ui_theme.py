"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the directory list and the status line.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    directory: str
    selected: str
    file: str
    status: str
    status_message: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    directory="\033[34m",
    selected="\033[34;48;2;255;153;0m",
    file="\033[32m",
    status="\033[7m",
    status_message="\033[1;7;33m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    directory="\033[1;38;5;45m",
    selected="\033[1;38;5;16;48;5;45m",
    file="\033[38;5;252m",
    status="\033[38;5;16;48;5;31m",
    status_message="\033[1;38;5;215;48;5;31m",
)

# Selection falls back to reverse video so the cursor stays visible.
PLAIN_THEME = UITheme(
    name="plain",
    reset="\033[0m",
    directory="",
    selected="\033[7m",
    file="",
    status="\033[7m",
    status_message="\033[7m",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
