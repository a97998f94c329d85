"""Key bindings for the tree widget and their help text."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from ..tree_model import NavCommand


@dataclass(frozen=True)
class KeyBinding:
    """Key tokens that trigger one action, plus the label shown in help."""

    keys: tuple[str, ...]
    help_key: str
    help_desc: str

    def matches(self, token: str) -> bool:
        return token in self.keys


@dataclass
class KeyMap:
    """Bindings used by the tree widget.

    ``show_full_help`` and ``close_full_help`` share a key; help rendering
    shows whichever one applies to the current help mode.
    """

    up: KeyBinding = field(default_factory=lambda: KeyBinding(("UP", "k"), "↑/k", "up"))
    down: KeyBinding = field(default_factory=lambda: KeyBinding(("DOWN", "j"), "↓/j", "down"))
    left: KeyBinding = field(default_factory=lambda: KeyBinding(("LEFT", "h"), "←/h", "parent"))
    right: KeyBinding = field(default_factory=lambda: KeyBinding(("RIGHT", "l"), "→/l", "children"))
    show_full_help: KeyBinding = field(default_factory=lambda: KeyBinding(("?",), "?", "more"))
    close_full_help: KeyBinding = field(default_factory=lambda: KeyBinding(("?",), "?", "close help"))
    quit: KeyBinding = field(default_factory=lambda: KeyBinding(("q", "ESC", "CTRL_C"), "q", "quit"))
    additional_short_help_keys: Callable[[], list[KeyBinding]] | None = None

    def short_help(self) -> list[KeyBinding]:
        """Bindings for the one-line help: movement, extras, then quit."""
        bindings = [self.up, self.down, self.left, self.right]
        if self.additional_short_help_keys is not None:
            bindings.extend(self.additional_short_help_keys())
        bindings.append(self.show_full_help)
        bindings.append(self.quit)
        return bindings

    def full_help(self) -> list[list[KeyBinding]]:
        """Binding columns for the expanded help view."""
        return [
            [self.up, self.down],
            [self.left, self.right],
            [self.quit, self.close_full_help],
        ]

    def command_for_key(self, token: str) -> NavCommand | None:
        """Translate a decoded key token into a widget command."""
        for binding, command in (
            (self.up, NavCommand.UP),
            (self.down, NavCommand.DOWN),
            (self.left, NavCommand.LEFT),
            (self.right, NavCommand.RIGHT),
            (self.show_full_help, NavCommand.TOGGLE_HELP),
            (self.close_full_help, NavCommand.TOGGLE_HELP),
        ):
            if binding.matches(token):
                return command
        return None

    def is_quit(self, token: str) -> bool:
        return self.quit.matches(token)


def default_keymap() -> KeyMap:
    return KeyMap()
