"""Help line rendering for the tree widget.

The short form is a single row of bindings; the full form lays binding
groups out in columns. Rendering here is presentation-only.
"""

from __future__ import annotations

from ..input.keymap import KeyBinding, KeyMap
from ..ui_theme import DEFAULT_THEME, UITheme
from .ansi import clip_ansi_line, display_width, fit_to_width

SHORT_SEPARATOR = " • "
COLUMN_GAP = "    "


def _binding_text(binding: KeyBinding, theme: UITheme) -> str:
    return f"{theme.help_key}{binding.help_key}{theme.reset} {theme.help_desc}{binding.help_desc}{theme.reset}"


def short_help_line(keymap: KeyMap, width: int, theme: UITheme | None = None) -> str:
    active_theme = theme or DEFAULT_THEME
    separator = f"{active_theme.help_separator}{SHORT_SEPARATOR}{active_theme.reset}"
    text = separator.join(_binding_text(binding, active_theme) for binding in keymap.short_help())
    return clip_ansi_line(text, width)


def full_help_lines(keymap: KeyMap, width: int, theme: UITheme | None = None) -> list[str]:
    """Render binding groups side by side, one binding per row per column."""
    active_theme = theme or DEFAULT_THEME
    columns = [
        [_binding_text(binding, active_theme) for binding in group]
        for group in keymap.full_help()
        if group
    ]
    if not columns:
        return []
    column_widths = [max(display_width(cell) for cell in column) for column in columns]
    row_count = max(len(column) for column in columns)
    lines: list[str] = []
    for row in range(row_count):
        cells: list[str] = []
        for column, column_width in zip(columns, column_widths):
            cell = column[row] if row < len(column) else ""
            cells.append(fit_to_width(cell, column_width))
        lines.append(clip_ansi_line(COLUMN_GAP.join(cells).rstrip(), width))
    return lines


def help_lines(
    keymap: KeyMap,
    show_all: bool,
    width: int,
    theme: UITheme | None = None,
) -> list[str]:
    """Return the help rows for the current help mode."""
    if show_all:
        return full_help_lines(keymap, width, theme)
    return [short_help_line(keymap, width, theme)]


def help_row_count(keymap: KeyMap, show_help: bool, show_all: bool, max_lines: int) -> int:
    """Rows the help takes out of a ``max_lines`` tall frame.

    At least one row is always left for the tree itself.
    """
    if not show_help or max_lines <= 1:
        return 0
    if show_all:
        required_rows = max((len(group) for group in keymap.full_help()), default=0)
    else:
        required_rows = 1
    return min(required_rows, max_lines - 1)
