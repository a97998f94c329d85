"""User JSON config readers.

Reads the UI theme, help visibility and label column width. The file is
written by hand; malformed or missing config falls back to defaults.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

APP_NAME = "treeglide"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.debug("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def load_theme_name() -> str | None:
    """Load the configured UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_show_help() -> bool:
    """Return configured help visibility; only explicit booleans count."""
    value = load_config().get("show_help")
    return value if isinstance(value, bool) else True


def load_label_width() -> int | None:
    """Load the label column width; booleans and non-positive values are dropped."""
    value = load_config().get("label_width")
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return None
    return value
