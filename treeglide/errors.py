"""Exception types raised at the widget boundary."""

from __future__ import annotations


class EmptyTreeError(ValueError):
    """Raised when a widget is built over a root with no selectable children."""


class TreeFormatError(ValueError):
    """Raised when serialized tree data does not describe a valid hierarchy."""
