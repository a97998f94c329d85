"""Text shaping and help rendering shared by the tree pane and the host.

``ansi`` measures and clips styled text, ``wrap`` packs descriptions into
lines, and ``help`` renders the key-binding rows under the tree.
"""

from __future__ import annotations

from .ansi import ANSI_ESCAPE_RE, clip_ansi_line, display_width, fit_to_width, strip_ansi
from .help import help_lines, help_row_count
from .wrap import wrap_words

__all__ = [
    "ANSI_ESCAPE_RE",
    "clip_ansi_line",
    "display_width",
    "fit_to_width",
    "strip_ansi",
    "help_lines",
    "help_row_count",
    "wrap_words",
]
