"""Tree-pane components: flattening, scroll window, styling, viewport."""

from .flatten import DisplayLine, FlatTree, flatten_tree, indent_cost
from .pane import RenderedLine, RenderResult, Resize, TreeViewport
from .window import ScrollWindow, WindowState, WindowTransition

__all__ = [
    "DisplayLine",
    "FlatTree",
    "flatten_tree",
    "indent_cost",
    "RenderedLine",
    "RenderResult",
    "Resize",
    "TreeViewport",
    "ScrollWindow",
    "WindowState",
    "WindowTransition",
]
