"""Window and widget color themes.

Themes are SGR attribute strings stored on screen cells; an empty string
draws with the terminal's default colors.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Semantic SGR palette used by widget drawing."""

    name: str
    desktop: str
    window_border: str
    window_border_active: str
    window_title: str
    window_title_active: str
    window_background: str
    scroller: str
    scroller_thumb: str
    table_cell: str
    table_cell_selected: str
    table_label: str


DEFAULT_THEME = Theme(
    name="default",
    desktop="\033[34;44m",
    window_border="\033[37;44m",
    window_border_active="\033[1;37;44m",
    window_title="\033[37;44m",
    window_title_active="\033[1;33;44m",
    window_background="\033[37;44m",
    scroller="\033[36;44m",
    scroller_thumb="\033[1;36;44m",
    table_cell="\033[37;44m",
    table_cell_selected="\033[30;46m",
    table_label="\033[1;33;44m",
)

OCEAN_THEME = Theme(
    name="ocean",
    desktop="\033[38;5;24;48;5;17m",
    window_border="\033[38;5;110;48;5;17m",
    window_border_active="\033[1;38;5;45;48;5;17m",
    window_title="\033[38;5;110;48;5;17m",
    window_title_active="\033[1;38;5;81;48;5;17m",
    window_background="\033[38;5;252;48;5;17m",
    scroller="\033[38;5;31;48;5;17m",
    scroller_thumb="\033[1;38;5;39;48;5;17m",
    table_cell="\033[38;5;252;48;5;17m",
    table_cell_selected="\033[38;5;17;48;5;81m",
    table_label="\033[1;38;5;153;48;5;17m",
)

MONO_THEME = Theme(
    name="mono",
    desktop="",
    window_border="",
    window_border_active="\033[1m",
    window_title="",
    window_title_active="\033[1m",
    window_background="",
    scroller="\033[2m",
    scroller_thumb="\033[7m",
    table_cell="",
    table_cell_selected="\033[7m",
    table_label="\033[1m",
)

_THEMES: dict[str, Theme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
    MONO_THEME.name: MONO_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    return tuple(sorted(_THEMES.keys()))


def resolve_theme(name: str | None) -> Theme:
    """Return the theme for ``name``, falling back to default."""
    if not name:
        return DEFAULT_THEME
    return _THEMES.get(str(name).strip().lower(), DEFAULT_THEME)


__all__ = [
    "DEFAULT_THEME",
    "MONO_THEME",
    "OCEAN_THEME",
    "Theme",
    "available_theme_names",
    "resolve_theme",
]
