from __future__ import annotations

import json
import logging
import tempfile
import unittest
from pathlib import Path

from termwin.logging_setup import LOGGER_NAME, configure_logging


class LoggingSetupTests(unittest.TestCase):
    def setUp(self) -> None:
        self.logger = logging.getLogger(LOGGER_NAME)
        self.saved_handlers = list(self.logger.handlers)
        self.saved_level = self.logger.level
        self.saved_propagate = self.logger.propagate
        self.logger.handlers = []

    def tearDown(self) -> None:
        for handler in self.logger.handlers:
            handler.close()
        self.logger.handlers = self.saved_handlers
        self.logger.setLevel(self.saved_level)
        self.logger.propagate = self.saved_propagate

    def test_records_are_written_as_json_lines(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "session.log"
            configure_logging("debug", path)
            logging.getLogger("termwin.backend.ecma48").warning("queue %s", "stalled")
            for handler in self.logger.handlers:
                handler.flush()

            records = [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]

            for handler in self.logger.handlers:
                handler.close()
            self.logger.handlers = []

        self.assertEqual(records[-1]["level"], "WARNING")
        self.assertEqual(records[-1]["logger"], "termwin.backend.ecma48")
        self.assertEqual(records[-1]["msg"], "queue stalled")
        self.assertIn("ts_utc", records[-1])

    def test_handler_is_attached_once(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "session.log"
            configure_logging("INFO", path)
            configure_logging("WARNING", path)

            self.assertEqual(len(self.logger.handlers), 1)
            self.assertEqual(self.logger.level, logging.WARNING)
            self.assertFalse(self.logger.propagate)

            for handler in self.logger.handlers:
                handler.close()
            self.logger.handlers = []


if __name__ == "__main__":
    unittest.main()
