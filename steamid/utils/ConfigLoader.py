#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import os
import yaml
from pathlib import Path
from copy import deepcopy

# GLOBALS
_config = None

DEFAULT_CONFIG_PATH = "etc/config.yaml"
CONFIG_ENV_VAR = "STEAMID_CONFIG"

DEFAULTS = {
    "tool_name": "steamid",
    "default_format": "Community64",
    "Logging": {
        "logging_levels": "Success, Information, Warning, Error",
        "logging_file_levels": "None",
        "date_format": "[%Y-%m-%d %H:%M:%S]",
        "log_dir": "logs",
        "log_file": "steamid.log",
    },
}


def _merge_dicts(base: dict, override: dict) -> dict:
    """
    Shallow+nested merge: values in override win; dict values are merged recursively.
    """
    result = deepcopy(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = _merge_dicts(result[k], v)
        else:
            result[k] = deepcopy(v)
    return result


def _resolve_path(filepath: str | None) -> Path:
    return Path(filepath or os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH)


class ConfigLoader:
    @staticmethod
    def get_config() -> dict:
        """
        Returns the cached configuration, loading it on first use.
        """
        global _config
        if _config is None:
            _config = ConfigLoader.load_config()
        return _config

    @staticmethod
    def load_config(filepath: str | None = None) -> dict:
        """
        Loads the configuration file if not already cached.
        The file is merged over DEFAULTS; a missing file yields the defaults alone.
        The path is taken from the argument, then $STEAMID_CONFIG, then etc/config.yaml.
        """
        global _config

        if _config is None:
            path = _resolve_path(filepath)
            file_cfg = {}
            if path.is_file():
                try:
                    file_cfg = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
                except yaml.YAMLError as e:
                    raise RuntimeError(f"Error parsing YAML file: {e}")
                if not isinstance(file_cfg, dict):
                    raise RuntimeError(f"Configuration at {path} must be a mapping.")
            _config = _merge_dicts(DEFAULTS, file_cfg)

        return _config

    @staticmethod
    def reload_config(filepath: str | None = None) -> dict:
        """
        Reload the configuration from disk.

        Returns:
            dict: The reloaded configuration dictionary.
        """

        global _config
        _config = None

        return ConfigLoader.load_config(filepath)
