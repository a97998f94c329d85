"""Embeddable tree-navigation widget for terminal hosts.

Exports the node/cursor model, the ``TreeViewport`` widget and its command
types. ``main`` lazily imports the demo CLI.
"""

from __future__ import annotations

from .errors import EmptyTreeError, TreeFormatError
from .tree_model import Cursor, NavCommand, Node, TreeCursor, new_node
from .tree_pane import RenderedLine, RenderResult, Resize, TreeViewport


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "Node",
    "Cursor",
    "new_node",
    "NavCommand",
    "TreeCursor",
    "Resize",
    "RenderedLine",
    "RenderResult",
    "TreeViewport",
    "EmptyTreeError",
    "TreeFormatError",
    "main",
]
