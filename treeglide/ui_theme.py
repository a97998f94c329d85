"""UI theme definitions and selection helpers.

Themes are ANSI palettes for tree connectors, selection blocks and the help
line. Geometry never depends on the theme.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    shapes: str
    selected_shapes: str
    selected_value: str
    selected_desc: str
    unselected: str
    help_key: str
    help_desc: str
    help_separator: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    shapes="\033[38;2;189;147;249m",
    selected_shapes="\033[1;38;2;189;147;249m",
    selected_value="\033[48;2;189;147;249m",
    selected_desc="\033[48;2;0;17;0m",
    unselected="\033[39m",
    help_key="\033[38;5;250m",
    help_desc="\033[38;5;243m",
    help_separator="\033[38;5;238m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    shapes="\033[38;5;39m",
    selected_shapes="\033[1;38;5;45m",
    selected_value="\033[30;48;5;45m",
    selected_desc="\033[48;5;24m",
    unselected="\033[38;5;252m",
    help_key="\033[38;5;153m",
    help_desc="\033[2;38;5;110m",
    help_separator="\033[2;38;5;31m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    shapes="",
    selected_shapes="",
    selected_value="",
    selected_desc="",
    unselected="",
    help_key="",
    help_desc="",
    help_separator="",
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
