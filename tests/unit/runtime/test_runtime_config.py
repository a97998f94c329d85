"""Tests for config loading and input sanitization.

Ensures malformed config data is safely normalized on load.
"""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from treeglide.runtime import config


def _write_config(path: Path, data: object) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")


class ConfigBehaviorTests(unittest.TestCase):
    def test_missing_config_yields_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "missing" / "config.json"
            with mock.patch("treeglide.runtime.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})
                self.assertIsNone(config.load_theme_name())
                self.assertTrue(config.load_show_help())
                self.assertIsNone(config.load_label_width())

    def test_valid_settings_are_read(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "config.json"
            _write_config(config_path, {"theme": " ocean ", "show_help": False, "label_width": 28})
            with mock.patch("treeglide.runtime.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_theme_name(), "ocean")
                self.assertFalse(config.load_show_help())
                self.assertEqual(config.load_label_width(), 28)

    def test_malformed_json_is_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text("{broken", encoding="utf-8")
            with mock.patch("treeglide.runtime.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})

    def test_non_object_json_is_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            _write_config(config_path, [1, 2])
            with mock.patch("treeglide.runtime.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})

    def test_wrongly_typed_values_fall_back(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("treeglide.runtime.config.CONFIG_PATH", config_path):
                _write_config(config_path, {"theme": 7, "show_help": "no", "label_width": True})
                self.assertIsNone(config.load_theme_name())
                self.assertTrue(config.load_show_help())
                self.assertIsNone(config.load_label_width())

                _write_config(config_path, {"theme": "   ", "label_width": -4})
                self.assertIsNone(config.load_theme_name())
                self.assertIsNone(config.load_label_width())

    def test_unreadable_location_yields_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            blocker = Path(tmp) / "file"
            blocker.write_text("x", encoding="utf-8")
            with mock.patch("treeglide.runtime.config.CONFIG_PATH", blocker / "config.json"):
                self.assertEqual(config.load_config(), {})
                self.assertTrue(config.load_show_help())


if __name__ == "__main__":
    unittest.main()
