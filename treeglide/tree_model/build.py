"""Tree construction from plain data and the bundled demo tree.

JSON trees are objects with ``label``, optional ``description`` and optional
``children``. A top-level list is wrapped in an unlabeled root.
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from pathlib import Path

from ..errors import TreeFormatError
from .types import Node, new_node


def tree_from_mapping(data: Mapping[str, object], parent: Node | None = None) -> Node:
    """Build a node (and its subtree) from a decoded JSON object."""
    if not isinstance(data, Mapping):
        raise TreeFormatError(f"expected an object for a tree node, got {type(data).__name__}")
    label = data.get("label")
    if not isinstance(label, str):
        raise TreeFormatError("tree node is missing a string 'label'")
    description = data.get("description", "")
    if description is None:
        description = ""
    if not isinstance(description, str):
        raise TreeFormatError(f"node {label!r}: 'description' must be a string")
    children = data.get("children", [])
    if children is None:
        children = []
    if isinstance(children, (str, bytes)) or not isinstance(children, Sequence):
        raise TreeFormatError(f"node {label!r}: 'children' must be a list")

    node = new_node(label, description, parent)
    for child in children:
        tree_from_mapping(child, node)
    return node


def tree_from_data(data: object) -> Node:
    """Build a root from either a node object or a list of top-level nodes."""
    if isinstance(data, list):
        root = Node("root")
        for child in data:
            tree_from_mapping(child, root)
        return root
    if isinstance(data, Mapping):
        return tree_from_mapping(data)
    raise TreeFormatError(f"expected an object or a list at the top level, got {type(data).__name__}")


def load_tree_file(path: Path) -> Node:
    """Read and decode a JSON tree file.

    Every way the file can be unusable surfaces as ``TreeFormatError``.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise TreeFormatError(f"{path}: invalid JSON ({exc.msg} at line {exc.lineno})") from exc
    except UnicodeDecodeError as exc:
        raise TreeFormatError(f"{path}: not valid UTF-8 ({exc.reason} at byte {exc.start})") from exc
    except OSError as exc:
        raise TreeFormatError(f"{path}: cannot read file ({exc.strerror or exc})") from exc
    except RecursionError as exc:
        raise TreeFormatError(f"{path}: tree is nested too deeply") from exc
    try:
        return tree_from_data(data)
    except RecursionError as exc:
        raise TreeFormatError(f"{path}: tree is nested too deeply") from exc


def demo_thread_tree() -> Node:
    """Return the comment-thread tree shown when no file is given."""
    root = new_node("admin", "Welcome to the thread!")

    user1 = new_node("user1", "I totally agree with this post!", root)
    user2 = new_node("user2", "I think there's another perspective to consider.", root)
    user3 = new_node("user3", "This is hilarious! 😂", root)

    user4 = new_node("user4", "Yeah, I was thinking the same thing!", user1)
    new_node("user5", "Not sure if I agree, but interesting take.", user4)
    new_node("user6", "I see your point, but have you considered XYZ?", user4)
    new_node("user10", "Can you please elaborate?", user1)

    user7 = new_node("user7", "What do you mean by that?", user2)
    new_node("user8", "I think user2 has a good argument.", user7)

    new_node("user9", "LOL, right? This made my day. 😂", user3)
    return root
