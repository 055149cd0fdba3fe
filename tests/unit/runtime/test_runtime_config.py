"""Tests for config persistence and input sanitization."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dirhop.input import DEFAULT_KEY_BINDINGS
from dirhop.runtime import config


class ConfigBehaviorTests(unittest.TestCase):
    def test_theme_name_round_trip(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "nested" / "config.json"
            with mock.patch("dirhop.runtime.config.CONFIG_PATH", config_path):
                self.assertIsNone(config.load_theme_name())
                config.save_theme_name("  ocean ")
                self.assertEqual(config.load_theme_name(), "ocean")
                self.assertTrue(config_path.exists())

    def test_blank_theme_name_is_not_saved(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("dirhop.runtime.config.CONFIG_PATH", config_path):
                config.save_theme_name("   ")
                self.assertFalse(config_path.exists())

    def test_malformed_json_falls_back_to_empty_config(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text("{not json", encoding="utf-8")
            with mock.patch("dirhop.runtime.config.CONFIG_PATH", config_path):
                with self.assertLogs("dirhop.runtime.config", level="WARNING"):
                    self.assertEqual(config.load_config(), {})
                self.assertEqual(config.load_key_bindings(), DEFAULT_KEY_BINDINGS)

    def test_non_object_config_is_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text("[1, 2]", encoding="utf-8")
            with mock.patch("dirhop.runtime.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})

    def test_key_bindings_and_log_level_are_read_from_config(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text(
                '{"keys": {"quit": ["x"], "up": "bad"}, "log_level": " debug ", "theme": 3}',
                encoding="utf-8",
            )
            with mock.patch("dirhop.runtime.config.CONFIG_PATH", config_path):
                bindings = config.load_key_bindings()
                self.assertEqual(bindings["quit"], ("x",))
                self.assertEqual(bindings["up"], DEFAULT_KEY_BINDINGS["up"])
                self.assertEqual(config.load_log_level(), "debug")
                self.assertIsNone(config.load_theme_name())

    def test_save_config_failure_is_not_fatal(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            blocker = Path(tmp) / "file"
            blocker.write_text("", encoding="utf-8")
            config_path = blocker / "config.json"
            with mock.patch("dirhop.runtime.config.CONFIG_PATH", config_path):
                with self.assertLogs("dirhop.runtime.config", level="WARNING"):
                    config.save_config({"theme": "ocean"})


if __name__ == "__main__":
    unittest.main()
