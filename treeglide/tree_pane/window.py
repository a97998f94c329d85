"""Scroll window that keeps the cursor span on screen.

The window is carried across renders and changes through exactly two
transitions:

``KEEP``
    The span already fits inside the (height-clamped) window, so the window
    stays where it is. This keeps the view steady while the cursor moves
    within it.
``RECENTER``
    The span left the window. The window is rebuilt so it ends at
    ``min(cursor_start + height, total_lines)`` and is ``height`` lines tall,
    which puts the cursor's first line at the top unless the content runs
    out first.

After either transition ``start <= cursor_start``, the window is at most
``height`` lines, and it ends no later than ``total_lines``. A span taller
than the window shows its first ``height`` lines.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


class WindowTransition(enum.Enum):
    KEEP = "keep"
    RECENTER = "recenter"


@dataclass(frozen=True)
class WindowState:
    """Visible line range ``[start, end)``."""

    start: int = 0
    end: int = 0

    @property
    def size(self) -> int:
        return self.end - self.start

    def contains(self, span_start: int, span_end: int) -> bool:
        return self.start <= span_start and span_end <= self.end


def _clamped(window: WindowState, total_lines: int, height: int) -> WindowState:
    """Resize ``window`` to the current height and content length.

    The start only moves back when the content below it is shorter than the
    window, so a tree that fits on screen is always shown from its first line.
    """
    start = max(0, min(window.start, total_lines - height))
    end = min(start + height, total_lines)
    return WindowState(start, end)


def _recentered(cursor_start: int, total_lines: int, height: int) -> WindowState:
    end = min(cursor_start + height, total_lines)
    start = max(0, end - height)
    return WindowState(start, end)


class ScrollWindow:
    """Incremental scroll state for one viewport session."""

    def __init__(self) -> None:
        self.state = WindowState()
        self.last_transition: WindowTransition | None = None

    @property
    def start(self) -> int:
        return self.state.start

    @property
    def end(self) -> int:
        return self.state.end

    def reset(self) -> None:
        self.state = WindowState()
        self.last_transition = None

    def update(self, cursor_start: int, cursor_end: int, total_lines: int, height: int) -> WindowState:
        """Apply one render pass and return the window to draw."""
        height = max(1, height)
        candidate = _clamped(self.state, total_lines, height)
        visible_span_end = min(cursor_end, cursor_start + height)
        if candidate.contains(cursor_start, visible_span_end):
            transition = WindowTransition.KEEP
            self.state = candidate
        else:
            transition = WindowTransition.RECENTER
            self.state = _recentered(cursor_start, total_lines, height)
            logger.debug(
                "window recentered to [%d, %d) for cursor span [%d, %d)",
                self.state.start,
                self.state.end,
                cursor_start,
                cursor_end,
            )
        self.last_transition = transition
        return self.state
