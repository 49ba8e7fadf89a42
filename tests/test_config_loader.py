#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Unit tests for ConfigLoader."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from steamid.utils.ConfigLoader import CONFIG_ENV_VAR, DEFAULTS, ConfigLoader, _merge_dicts


class ConfigLoaderTest(unittest.TestCase):
    """Tests for ConfigLoader helpers."""

    def setUp(self) -> None:
        """Work inside a scratch directory."""
        self.tmp = tempfile.TemporaryDirectory()
        self.root = Path(self.tmp.name)

    def tearDown(self) -> None:
        """Restore the regular configuration for other tests."""
        self.tmp.cleanup()
        ConfigLoader.reload_config()

    def _write(self, name: str, text: str) -> str:
        path = self.root / name
        path.write_text(text, encoding="utf-8")
        return str(path)

    def test_merge_dicts_is_recursive(self) -> None:
        """Nested values are merged, overrides win, inputs are not modified."""
        base = {"a": 1, "nested": {"x": 1, "y": 2}}
        override = {"nested": {"y": 3}, "b": 2}

        result = _merge_dicts(base, override)

        self.assertEqual(result, {"a": 1, "b": 2, "nested": {"x": 1, "y": 3}})
        self.assertEqual(base["nested"]["y"], 2)

    def test_missing_file_yields_defaults(self) -> None:
        """The library works without a configuration file."""
        config = ConfigLoader.reload_config(str(self.root / "absent.yaml"))
        self.assertEqual(config, DEFAULTS)
        self.assertIsNot(config, DEFAULTS)

    def test_file_overrides_defaults(self) -> None:
        """Keys from the file are merged over the defaults."""
        path = self._write("config.yaml", "default_format: Default\nLogging:\n  logging_levels: All\n")

        config = ConfigLoader.reload_config(path)

        self.assertEqual(config["default_format"], "Default")
        self.assertEqual(config["Logging"]["logging_levels"], "All")
        self.assertEqual(config["Logging"]["log_file"], DEFAULTS["Logging"]["log_file"])
        self.assertIs(ConfigLoader.get_config(), config)

    def test_environment_variable_selects_file(self) -> None:
        """$STEAMID_CONFIG is used when no path is given."""
        path = self._write("env.yaml", "tool_name: from-env\n")

        with patch.dict(os.environ, {CONFIG_ENV_VAR: path}):
            config = ConfigLoader.reload_config()

        self.assertEqual(config["tool_name"], "from-env")

    def test_malformed_yaml_raises(self) -> None:
        """Parse errors surface as RuntimeError."""
        path = self._write("broken.yaml", "Logging: [unclosed\n")
        with self.assertRaises(RuntimeError):
            ConfigLoader.reload_config(path)

    def test_non_mapping_raises(self) -> None:
        """The top level has to be a mapping."""
        path = self._write("list.yaml", "- one\n- two\n")
        with self.assertRaises(RuntimeError):
            ConfigLoader.reload_config(path)


if __name__ == "__main__":
    unittest.main()
