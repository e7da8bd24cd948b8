"""Unit tests for settings loading and logging setup."""

import json
import logging
import shutil
import tempfile
import unittest
from pathlib import Path

from naivedit.settings import Settings, configure_logging


class TestSettings(unittest.TestCase):
    """Test loading settings from the user's config file."""

    def setUp(self):
        self.temp_dir = Path(tempfile.mkdtemp())
        self.settings_file = self.temp_dir / "settings.json"

    def tearDown(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def write_settings(self, data):
        self.settings_file.write_text(json.dumps(data), encoding='utf-8')

    def test_defaults_when_file_missing(self):
        settings = Settings.load(self.settings_file, environ={})
        self.assertEqual(settings, Settings())
        self.assertFalse(settings.log_enabled)
        self.assertEqual(settings.log_level, "WARNING")
        self.assertTrue(settings.atomic_save)

    def test_values_from_file(self):
        self.write_settings({"log_enabled": True, "log_level": "debug", "atomic_save": False})
        settings = Settings.load(self.settings_file, environ={})
        self.assertTrue(settings.log_enabled)
        self.assertEqual(settings.log_level, "DEBUG")
        self.assertFalse(settings.atomic_save)

    def test_invalid_json_is_ignored(self):
        self.settings_file.write_text("{not json", encoding='utf-8')
        with self.assertLogs("naivedit.settings", level="WARNING"):
            settings = Settings.load(self.settings_file, environ={})
        self.assertEqual(settings, Settings())

    def test_non_dict_file_is_ignored(self):
        self.write_settings(["log_enabled"])
        with self.assertLogs("naivedit.settings", level="WARNING"):
            settings = Settings.load(self.settings_file, environ={})
        self.assertEqual(settings, Settings())

    def test_bad_values_are_ignored(self):
        self.write_settings({"log_enabled": "yes", "log_level": "LOUD", "atomic_save": 0})
        with self.assertLogs("naivedit.settings", level="WARNING") as logs:
            settings = Settings.load(self.settings_file, environ={})
        self.assertEqual(settings, Settings())
        self.assertEqual(len(logs.records), 3)

    def test_environment_enables_logging(self):
        self.write_settings({"log_level": "ERROR"})
        settings = Settings.load(self.settings_file, environ={"NAIVEDIT_LOG_LEVEL": "info"})
        self.assertTrue(settings.log_enabled)
        self.assertEqual(settings.log_level, "INFO")


class TestConfigureLogging(unittest.TestCase):
    """Test where log records go."""

    def setUp(self):
        self.temp_dir = Path(tempfile.mkdtemp())
        self.logger = logging.getLogger("naivedit")
        self.saved_handlers = list(self.logger.handlers)
        self.saved_level = self.logger.level
        self.saved_propagate = self.logger.propagate

    def tearDown(self):
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()
        for handler in self.saved_handlers:
            self.logger.addHandler(handler)
        self.logger.setLevel(self.saved_level)
        self.logger.propagate = self.saved_propagate
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_disabled_logging_uses_null_handler(self):
        logger = configure_logging(Settings(log_enabled=False), log_dir=self.temp_dir)
        self.assertEqual(len(logger.handlers), 1)
        self.assertIsInstance(logger.handlers[0], logging.NullHandler)
        self.assertFalse((self.temp_dir / "naivedit.log").exists())

    def test_enabled_logging_writes_file(self):
        logger = configure_logging(Settings(log_enabled=True, log_level="INFO"), log_dir=self.temp_dir)
        logging.getLogger("naivedit.editor").info("hello from the editor")
        logging.getLogger("naivedit.editor").debug("too chatty")
        for handler in logger.handlers:
            handler.flush()
        content = (self.temp_dir / "naivedit.log").read_text(encoding='utf-8')
        self.assertIn("hello from the editor", content)
        self.assertNotIn("too chatty", content)

    def test_reconfiguring_replaces_handlers(self):
        configure_logging(Settings(log_enabled=True), log_dir=self.temp_dir)
        logger = configure_logging(Settings(log_enabled=True), log_dir=self.temp_dir)
        self.assertEqual(len(logger.handlers), 1)
        self.assertFalse(logger.propagate)


if __name__ == '__main__':
    unittest.main()
