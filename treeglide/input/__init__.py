"""Input-layer public API: key decoding, key bindings, and dispatch tables."""

from .key_registry import KeyComboBinding, KeyComboRegistry
from .keymap import KeyBinding, KeyMap, default_keymap
from .reader import ESC_SEQUENCE_TIMEOUT_MS, UNKNOWN_KEY, read_key

__all__ = [
    "read_key",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "UNKNOWN_KEY",
    "KeyBinding",
    "KeyMap",
    "default_keymap",
    "KeyComboBinding",
    "KeyComboRegistry",
]
