"""Tests for config loading and value sanitization."""

from __future__ import annotations

import logging
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from kilo import config


class ConfigBehaviorTests(unittest.TestCase):
    def test_missing_or_malformed_config_loads_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "kilo.json"
            with mock.patch("kilo.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})
                config_path.write_text("{not json", encoding="utf-8")
                self.assertEqual(config.load_config(), {})
                config_path.write_text("[1, 2]", encoding="utf-8")
                self.assertEqual(config.load_config(), {})
                config_path.write_text('{"read_timeout_ms": 300}', encoding="utf-8")
                self.assertEqual(config.load_config(), {"read_timeout_ms": 300})

    def test_read_timeout_is_sanitized(self) -> None:
        self.assertEqual(config.load_read_timeout_ms({}), 100)
        self.assertEqual(config.load_read_timeout_ms({"read_timeout_ms": True}), 100)
        self.assertEqual(config.load_read_timeout_ms({"read_timeout_ms": "200"}), 100)
        self.assertEqual(config.load_read_timeout_ms({"read_timeout_ms": 5}), 100)
        self.assertEqual(config.load_read_timeout_ms({"read_timeout_ms": 349}), 300)
        self.assertEqual(config.load_read_timeout_ms({"read_timeout_ms": 10**6}), 25500)

    def test_log_file_env_var_overrides_config(self) -> None:
        with mock.patch.dict("kilo.config.os.environ", {"KILO_LOG": "/tmp/env.log"}, clear=True):
            self.assertEqual(config.load_log_file({"log_file": "/tmp/cfg.log"}), Path("/tmp/env.log"))
        with mock.patch.dict("kilo.config.os.environ", {}, clear=True):
            self.assertEqual(config.load_log_file({"log_file": "/tmp/cfg.log"}), Path("/tmp/cfg.log"))
            self.assertIsNone(config.load_log_file({"log_file": 7}))
            self.assertIsNone(config.load_log_file({}))

    def test_log_level_falls_back_to_info(self) -> None:
        self.assertEqual(config.load_log_level({"log_level": "warning"}), logging.WARNING)
        self.assertEqual(config.load_log_level({"log_level": "nonsense"}), logging.INFO)
        self.assertEqual(config.load_log_level({"log_level": 10}), logging.INFO)
        self.assertEqual(config.load_log_level({}), logging.INFO)


if __name__ == "__main__":
    unittest.main()
