"""ANSI styling for flattened tree lines."""

from __future__ import annotations

from ..ui_theme import DEFAULT_THEME, UITheme
from .flatten import VALUE_LINE, DisplayLine


def style_display_line(line: DisplayLine, theme: UITheme | None = None) -> str:
    """Color the connector prefix and the label/description body of one line."""
    active_theme = theme or DEFAULT_THEME
    reset = active_theme.reset
    out: list[str] = []
    if line.prefix:
        shape_color = active_theme.selected_shapes if line.selected else active_theme.shapes
        out.append(f"{shape_color}{line.prefix}{reset}")
    if line.selected:
        body_color = active_theme.selected_value if line.kind == VALUE_LINE else active_theme.selected_desc
    else:
        body_color = active_theme.unselected
    if line.body:
        out.append(f"{body_color}{line.body}{reset}")
    return "".join(out)
