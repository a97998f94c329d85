"""Main interactive event loop for the terminal demo.

Each iteration syncs the terminal size into the viewport, redraws when the
frame changed, then reads and dispatches one key. The loop only wires input
to the widget; all tree behavior lives in ``TreeViewport``.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable
from dataclasses import dataclass
from functools import partial

from ..input import KeyComboBinding, KeyComboRegistry, read_key
from ..tree_model import NavCommand
from ..tree_pane import Resize, TreeViewport
from .terminal import TerminalController

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    key_poll_ms: int = 200


def build_key_registry(viewport: TreeViewport) -> KeyComboRegistry:
    """Bind the viewport's key map to its command handler."""
    keymap = viewport.keymap
    return KeyComboRegistry().register_bindings(
        KeyComboBinding(keymap.up.keys, partial(viewport.handle, NavCommand.UP)),
        KeyComboBinding(keymap.down.keys, partial(viewport.handle, NavCommand.DOWN)),
        KeyComboBinding(keymap.left.keys, partial(viewport.handle, NavCommand.LEFT)),
        KeyComboBinding(keymap.right.keys, partial(viewport.handle, NavCommand.RIGHT)),
        KeyComboBinding(keymap.show_full_help.keys, partial(viewport.handle, NavCommand.TOGGLE_HELP)),
    )


def run_main_loop(
    viewport: TreeViewport,
    terminal: TerminalController,
    stdin_fd: int,
    timing: RuntimeLoopTiming | None = None,
    terminal_size: Callable[[], tuple[int, int]] | None = None,
) -> None:
    """Run the interactive loop until a quit key is read."""
    timing = timing or RuntimeLoopTiming()
    if terminal_size is None:

        def terminal_size() -> tuple[int, int]:
            size = shutil.get_terminal_size((80, 24))
            return size.columns, size.lines

    registry = build_key_registry(viewport)
    dirty = True
    with terminal.raw_mode():
        while True:
            columns, lines = terminal_size()
            if viewport.handle(Resize(columns, lines)):
                dirty = True
            if dirty:
                terminal.draw_frame(viewport.view())
                dirty = False

            key = read_key(stdin_fd, timeout_ms=timing.key_poll_ms)
            if not key:
                continue
            if viewport.keymap.is_quit(key):
                logger.info("quit requested with %r", key)
                return
            if registry.dispatch(key):
                dirty = True
