"""Single-cursor navigation over a node hierarchy.

Moves are local: up/down/right are O(1) and left is a linear scan of the
grandparent's children. Every move is a total function; boundary moves
leave the cursor untouched and report ``False``.
"""

from __future__ import annotations

import enum
import logging

from ..errors import EmptyTreeError
from .types import Cursor, Node

logger = logging.getLogger(__name__)


class NavCommand(enum.Enum):
    """Decoded commands the widget accepts from its host."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    TOGGLE_HELP = "toggle_help"


class TreeCursor:
    """Own the selection pointer for one tree."""

    def __init__(self, root: Node) -> None:
        if not root.children:
            raise EmptyTreeError(f"root {root.label!r} has no children to select")
        self.root = root
        self.cursor = Cursor(current=root.children[0], parent=root, index=0)

    @property
    def current(self) -> Node:
        return self.cursor.current

    @property
    def depth(self) -> int:
        """Levels between the root and the selected node (0 for top level)."""
        depth = 0
        node = self.cursor.parent
        while node is not self.root and node is not None:
            depth += 1
            node = node.parent
        return depth

    def path(self) -> list[str]:
        """Labels from the top-level ancestor down to the selected node."""
        labels: list[str] = []
        node: Node | None = self.cursor.current
        while node is not None and node is not self.root:
            labels.append(node.label)
            node = node.parent
        labels.reverse()
        return labels

    def navigate_up(self) -> bool:
        cursor = self.cursor
        if cursor.index <= 0:
            return False
        index = cursor.index - 1
        self.cursor = Cursor(cursor.parent.children[index], cursor.parent, index)
        return True

    def navigate_down(self) -> bool:
        cursor = self.cursor
        if cursor.index >= len(cursor.parent.children) - 1:
            return False
        index = cursor.index + 1
        self.cursor = Cursor(cursor.parent.children[index], cursor.parent, index)
        return True

    def navigate_left(self) -> bool:
        """Select the parent, unless the parent is the root."""
        cursor = self.cursor
        grandparent = cursor.parent.parent
        if grandparent is None:
            return False
        current = cursor.parent
        for index, child in enumerate(grandparent.children):
            if child is current:
                self.cursor = Cursor(current, grandparent, index)
                return True
        logger.warning("node %r is missing from its parent's children", current.label)
        return False

    def navigate_right(self) -> bool:
        """Select the first child of the current node, if it has any."""
        current = self.cursor.current
        if not current.children:
            return False
        self.cursor = Cursor(current.children[0], current, 0)
        return True

    def apply(self, command: NavCommand) -> bool:
        """Dispatch one directional command; other commands are ignored."""
        handler = {
            NavCommand.UP: self.navigate_up,
            NavCommand.DOWN: self.navigate_down,
            NavCommand.LEFT: self.navigate_left,
            NavCommand.RIGHT: self.navigate_right,
        }.get(command)
        if handler is None:
            return False
        moved = handler()
        if moved:
            logger.debug("cursor moved %s to %r", command.value, self.cursor.current.label)
        return moved
