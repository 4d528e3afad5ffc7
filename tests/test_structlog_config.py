import logging
import os
from unittest import TestCase
from unittest.mock import patch

import structlog

from event_dispatch.adapters.config.structlog_config import configure_logging


class ConfigureLoggingTests(TestCase):
    def setUp(self):
        self._root = logging.getLogger()
        self._handlers = list(self._root.handlers)
        self._level = self._root.level

    def tearDown(self):
        structlog.reset_defaults()
        self._root.handlers[:] = self._handlers
        self._root.setLevel(self._level)

    def test_explicit_arguments(self):
        configure_logging("warning", json_logs=True)

        self.assertEqual(self._root.level, logging.WARNING)
        self.assertEqual(len(self._root.handlers), 1)
        formatter = self._root.handlers[0].formatter
        self.assertIsInstance(formatter, structlog.stdlib.ProcessorFormatter)

    def test_values_from_environment(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "error", "JSON_LOGS": "false"}, clear=True):
            configure_logging()

        self.assertEqual(self._root.level, logging.ERROR)
        self.assertTrue(structlog.is_configured())
