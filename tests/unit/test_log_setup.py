"""Tests for entrypoint logging configuration."""

from __future__ import annotations

import logging
import tempfile
import unittest
from pathlib import Path

from dirhop import log


class ConfigureLoggingTests(unittest.TestCase):
    def setUp(self) -> None:
        self.logger = logging.getLogger(log.APP_NAME)
        self.saved_level = self.logger.level
        self.saved_propagate = self.logger.propagate
        self.saved_handlers = list(self.logger.handlers)

    def tearDown(self) -> None:
        for handler in list(self.logger.handlers):
            if handler not in self.saved_handlers:
                self.logger.removeHandler(handler)
                handler.close()
        self.logger.setLevel(self.saved_level)
        self.logger.propagate = self.saved_propagate

    def _our_handlers(self) -> list[logging.Handler]:
        return [handler for handler in self.logger.handlers if getattr(handler, "_dirhop_handler", False)]

    def test_writes_records_to_log_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            log_path = Path(tmp) / "logs" / "dirhop.log"
            self.assertEqual(log.configure_logging("info", log_path), log_path)

            logging.getLogger("dirhop.runtime.loop").info("hello from the loop")
            for handler in self._our_handlers():
                handler.flush()

            contents = log_path.read_text(encoding="utf-8")
            self.assertIn("INFO | dirhop.runtime.loop | hello from the loop", contents)
            for handler in self._our_handlers():
                self.logger.removeHandler(handler)
                handler.close()

    def test_repeated_configuration_keeps_single_handler(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            log_path = Path(tmp) / "dirhop.log"
            log.configure_logging(None, log_path)
            log.configure_logging("error", log_path)

            self.assertEqual(len(self._our_handlers()), 1)
            self.assertEqual(self.logger.level, logging.ERROR)
            for handler in self._our_handlers():
                self.logger.removeHandler(handler)
                handler.close()

    def test_unwritable_log_location_is_not_fatal(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            blocker = Path(tmp) / "file"
            blocker.write_text("", encoding="utf-8")

            self.assertIsNone(log.configure_logging(None, blocker / "dirhop.log"))
            self.assertEqual(len(self._our_handlers()), 1)

    def test_parse_level_falls_back_to_warning(self) -> None:
        self.assertEqual(log.parse_level("debug"), logging.DEBUG)
        self.assertEqual(log.parse_level("nonsense"), logging.WARNING)
        self.assertEqual(log.parse_level(None), logging.WARNING)


if __name__ == "__main__":
    unittest.main()
