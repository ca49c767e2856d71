"""core/tests/test_log_setup.py – root logger configuration."""

from __future__ import annotations

import logging
import tempfile
import unittest
from pathlib import Path

from core.logging.logic.log_setup import configure_logging, reset_logging


class TestLogSetup(unittest.TestCase):
    def setUp(self) -> None:
        reset_logging()
        self._level = logging.getLogger().level

    def tearDown(self) -> None:
        reset_logging()
        logging.getLogger().setLevel(self._level)

    def test_idempotent(self) -> None:
        root = logging.getLogger()
        before = len(root.handlers)
        configure_logging("DEBUG")
        configure_logging("DEBUG")
        self.assertEqual(len(root.handlers), before + 1)
        self.assertEqual(root.level, logging.DEBUG)

    def test_unknown_level_falls_back_to_info(self) -> None:
        configure_logging("chatty")
        self.assertEqual(logging.getLogger().level, logging.INFO)

    def test_file_handler_writes(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "logs" / "contacts.log"
            configure_logging("INFO", str(path))
            logging.getLogger("contacts.test").info("hello file")
            reset_logging()
            self.assertIn("hello file", path.read_text(encoding="utf-8"))

    def test_reset_keeps_foreign_handlers(self) -> None:
        root = logging.getLogger()
        foreign = logging.NullHandler()
        root.addHandler(foreign)
        try:
            configure_logging("INFO")
            reset_logging()
            self.assertIn(foreign, root.handlers)
        finally:
            root.removeHandler(foreign)


if __name__ == "__main__":
    unittest.main()
