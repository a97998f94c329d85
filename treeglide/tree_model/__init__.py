"""Tree hierarchy, cursor state, and tree construction helpers.

Defines ``Node``/``Cursor`` and the ``TreeCursor`` navigation model.
Also builds trees from decoded JSON and ships the demo tree.
"""

from __future__ import annotations

from .build import demo_thread_tree, load_tree_file, tree_from_data, tree_from_mapping
from .navigation import NavCommand, TreeCursor
from .types import Cursor, Node, new_node

__all__ = [
    "Node",
    "Cursor",
    "new_node",
    "NavCommand",
    "TreeCursor",
    "tree_from_mapping",
    "tree_from_data",
    "load_tree_file",
    "demo_thread_tree",
]
