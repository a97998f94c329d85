"""Terminal runtime for the interactive demo.

``run_viewer`` owns the tty session; the loop and terminal helpers live in
submodules so tests can drive them with fakes.
"""

from __future__ import annotations

import sys

from ..tree_pane import TreeViewport
from .loop import RuntimeLoopTiming, build_key_registry, run_main_loop
from .terminal import TerminalController


def run_viewer(viewport: TreeViewport) -> None:
    """Run ``viewport`` interactively on the process's controlling terminal."""
    stdin_fd = sys.stdin.fileno()
    terminal = TerminalController(stdin_fd, sys.stdout.fileno())
    run_main_loop(viewport, terminal, stdin_fd)


__all__ = [
    "RuntimeLoopTiming",
    "TerminalController",
    "build_key_registry",
    "run_main_loop",
    "run_viewer",
]
