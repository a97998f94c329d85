"""Tree viewport: cursor model, flattening, scrolling and help in one widget.

The host feeds decoded commands into :meth:`TreeViewport.handle` and asks
for a frame with :meth:`TreeViewport.render` (plain lines plus selection
flags) or :meth:`TreeViewport.view` (one ANSI-styled string).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..input.keymap import KeyMap, default_keymap
from ..render.ansi import clip_ansi_line, display_width
from ..render.help import help_lines, help_row_count
from ..tree_model import Cursor, NavCommand, Node, TreeCursor
from ..ui_theme import DEFAULT_THEME, UITheme
from .flatten import DEFAULT_LABEL_WIDTH, FlatTree, flatten_tree
from .rendering import style_display_line
from .window import ScrollWindow

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resize:
    """Host command carrying the new outer size of the widget."""

    width: int
    height: int


@dataclass(frozen=True)
class RenderedLine:
    text: str
    selected: bool


@dataclass(frozen=True)
class RenderResult:
    """One frame: visible tree lines, scroll bookkeeping and help rows."""

    lines: list[RenderedLine]
    scroll_start: int
    scroll_end: int
    total_lines: int
    cursor_span: tuple[int, int]
    help_lines: list[str]


class TreeViewport:
    """Scrollable tree view with a single navigable cursor.

    Construction raises :class:`~treeglide.errors.EmptyTreeError` when
    ``root`` has no children. Navigation never raises.
    """

    def __init__(
        self,
        root: Node,
        width: int,
        height: int,
        *,
        label_width: int = DEFAULT_LABEL_WIDTH,
        show_help: bool = True,
        keymap: KeyMap | None = None,
        theme: UITheme | None = None,
    ) -> None:
        self.model = TreeCursor(root)
        self.width = width
        self.height = height
        self.label_width = label_width
        self.show_help = show_help
        self.show_full_help = False
        self.keymap = keymap or default_keymap()
        self.theme = theme or DEFAULT_THEME
        self.window = ScrollWindow()
        self._flat_key: tuple[int, int, int] | None = None
        self._flat: FlatTree | None = None
        logger.debug(
            "viewport created for %r with %d top-level nodes at %dx%d",
            root.label,
            len(root.children),
            width,
            height,
        )

    @property
    def root(self) -> Node:
        return self.model.root

    @property
    def cursor(self) -> Cursor:
        return self.model.cursor

    def help_rows(self) -> int:
        return help_row_count(self.keymap, self.show_help, self.show_full_help, self.height)

    def tree_height(self) -> int:
        """Rows left for tree lines once the help rows are taken out."""
        return max(1, self.height - self.help_rows())

    def handle(self, command: NavCommand | Resize) -> bool:
        """Apply one host command and report whether the frame changed."""
        if isinstance(command, Resize):
            return self.resize(command.width, command.height)
        if command is NavCommand.TOGGLE_HELP:
            self.show_full_help = not self.show_full_help
            return self.show_help
        return self.model.apply(command)

    def resize(self, width: int, height: int) -> bool:
        if width == self.width and height == self.height:
            return False
        logger.debug("viewport resized from %dx%d to %dx%d", self.width, self.height, width, height)
        self.width = width
        self.height = height
        return True

    def flatten(self) -> FlatTree:
        """Flatten the tree for the current selection and width.

        The result is reused until the selection, width or label width
        changes; the tree itself is not mutated while a viewport is live.
        """
        key = (id(self.model.current), self.width, self.label_width)
        if self._flat is None or key != self._flat_key:
            self._flat = flatten_tree(self.root, self.model.current, self.width, self.label_width)
            self._flat_key = key
        return self._flat

    def render(self) -> RenderResult:
        flat = self.flatten()
        window = self.window.update(flat.cursor_start, flat.cursor_end, flat.total_lines, self.tree_height())
        visible = [
            RenderedLine(text=line.text, selected=line.selected)
            for line in flat.lines[window.start:window.end]
        ]
        rendered_help: list[str] = []
        if self.help_rows():
            rendered_help = help_lines(self.keymap, self.show_full_help, max(0, self.width), self.theme)
            rendered_help = rendered_help[: self.help_rows()]
        return RenderResult(
            lines=visible,
            scroll_start=window.start,
            scroll_end=window.end,
            total_lines=flat.total_lines,
            cursor_span=(flat.cursor_start, flat.cursor_end),
            help_lines=rendered_help,
        )

    def _clip_row(self, row: str) -> str:
        if display_width(row) <= self.width:
            return row
        return clip_ansi_line(row, self.width) + self.theme.reset

    def view(self) -> str:
        """Render a full ANSI-styled frame, help rows pinned to the bottom."""
        result = self.render()
        flat = self.flatten()
        rows = [
            style_display_line(line, self.theme)
            for line in flat.lines[result.scroll_start:result.scroll_end]
        ]
        if self.width > 0:
            rows = [self._clip_row(row) for row in rows]
        if result.help_lines:
            rows.extend([""] * (self.tree_height() - len(rows)))
            rows.extend(result.help_lines)
        return "\n".join(rows)
