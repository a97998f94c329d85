"""Node and cursor datatypes shared by the model and the tree pane."""

from __future__ import annotations

import weakref
from dataclasses import dataclass


class Node:
    """One labeled element of the hierarchy.

    Children are owned by their parent list. The parent link is a weak
    reference used only for walking upward, so a subtree never keeps its
    ancestors alive.
    """

    __slots__ = ("label", "description", "children", "_parent_ref", "__weakref__")

    def __init__(self, label: str, description: str = "") -> None:
        self.label = label
        self.description = description
        self.children: list[Node] = []
        self._parent_ref: weakref.ReferenceType[Node] | None = None

    @property
    def parent(self) -> Node | None:
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    def add_child(self, child: Node) -> Node:
        """Append a detached ``child`` and return it."""
        if child is self:
            raise ValueError("a node cannot be its own child")
        if child.parent is not None:
            raise ValueError(f"node {child.label!r} already has a parent")
        child._parent_ref = weakref.ref(self)
        self.children.append(child)
        return child

    def iter_subtree(self):
        """Yield descendants in pre-order, excluding ``self``."""
        stack = list(reversed(self.children))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def __repr__(self) -> str:
        return f"Node({self.label!r}, children={len(self.children)})"


@dataclass(frozen=True)
class Cursor:
    """Selected node plus its parent and sibling index.

    ``parent.children[index] is current`` holds for every cursor the model
    produces.
    """

    current: Node
    parent: Node
    index: int


def new_node(label: str, description: str = "", parent: Node | None = None) -> Node:
    """Create a node, attaching it to ``parent`` when one is given."""
    node = Node(label, description)
    if parent is not None:
        parent.add_child(node)
    return node
