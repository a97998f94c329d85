"""Flatten a node hierarchy into indented, word-wrapped display lines.

Nodes are emitted depth-first in pre-order. Each node contributes one value
line (its label) followed by the wrapped lines of its description, then its
children one level deeper. The selected node's block is recorded as the
cursor span.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..render.ansi import fit_to_width
from ..render.wrap import wrap_words
from ..tree_model import Node

DEFAULT_LABEL_WIDTH = 20

ANCESTOR_GLYPH = " │  "
CONNECTOR_GLYPH = " └── "
SELECTED_CONNECTOR_GLYPH = " ┗━━ "
DESCRIPTION_GAP = " " * len(CONNECTOR_GLYPH)

VALUE_LINE = "value"
DESCRIPTION_LINE = "description"


def indent_cost(depth: int) -> int:
    """Columns taken by the connector prefix at ``depth``."""
    if depth <= 0:
        return 0
    return len(ANCESTOR_GLYPH) * (depth - 1) + len(CONNECTOR_GLYPH)


@dataclass(frozen=True)
class DisplayLine:
    """One flattened row: connector prefix plus label or description text."""

    node: Node
    depth: int
    kind: str
    prefix: str
    body: str
    selected: bool

    @property
    def text(self) -> str:
        return self.prefix + self.body


@dataclass(frozen=True)
class FlatTree:
    """Flattened lines and the ``[cursor_start, cursor_end)`` span."""

    lines: list[DisplayLine]
    cursor_start: int
    cursor_end: int

    @property
    def total_lines(self) -> int:
        return len(self.lines)

    def value_lines(self) -> list[DisplayLine]:
        return [line for line in self.lines if line.kind == VALUE_LINE]


def _prefixes(depth: int, selected: bool) -> tuple[str, str]:
    if depth <= 0:
        return "", ""
    ancestors = ANCESTOR_GLYPH * (depth - 1)
    connector = SELECTED_CONNECTOR_GLYPH if selected else CONNECTOR_GLYPH
    return ancestors + connector, ancestors + DESCRIPTION_GAP


def node_lines(
    node: Node,
    depth: int,
    width: int,
    selected: bool,
    label_width: int = DEFAULT_LABEL_WIDTH,
) -> list[DisplayLine]:
    """Render the value line and description lines for one node."""
    available = width - indent_cost(depth)
    max_cols = available if available > 0 else None
    value_prefix, description_prefix = _prefixes(depth, selected)

    lines = [
        DisplayLine(
            node=node,
            depth=depth,
            kind=VALUE_LINE,
            prefix=value_prefix,
            body=fit_to_width(node.label, label_width, max_cols),
            selected=selected,
        )
    ]
    for chunk in wrap_words(node.description, available):
        lines.append(
            DisplayLine(
                node=node,
                depth=depth,
                kind=DESCRIPTION_LINE,
                prefix=description_prefix,
                body=fit_to_width(chunk, label_width, max_cols),
                selected=selected,
            )
        )
    return lines


def flatten_tree(
    root: Node,
    selected: Node,
    width: int,
    label_width: int = DEFAULT_LABEL_WIDTH,
) -> FlatTree:
    """Flatten everything under ``root`` (the root itself is not shown)."""
    lines: list[DisplayLine] = []
    cursor_start = 0
    cursor_end = 0
    stack: list[tuple[Node, int]] = [(child, 0) for child in reversed(root.children)]
    while stack:
        node, depth = stack.pop()
        is_selected = node is selected
        if is_selected:
            cursor_start = len(lines)
        lines.extend(node_lines(node, depth, width, is_selected, label_width))
        if is_selected:
            cursor_end = len(lines)
        stack.extend((child, depth + 1) for child in reversed(node.children))
    return FlatTree(lines=lines, cursor_start=cursor_start, cursor_end=cursor_end)
