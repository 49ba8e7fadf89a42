#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from colorama import init, Fore, Style
from datetime import datetime
from enum import Enum, IntEnum
from pathlib import Path

from steamid.utils.ConfigLoader import ConfigLoader

init()


class DebugColorLevel(Enum):
    SUCCESS = Fore.GREEN + Style.BRIGHT
    INFO = Fore.BLUE + Style.BRIGHT
    WARNING = Fore.YELLOW + Style.BRIGHT
    ERROR = Fore.RED + Style.BRIGHT
    DEBUG = Fore.CYAN + Style.BRIGHT


class DebugLevel(IntEnum):
    NONE = 0x00
    SUCCESS = 0x01
    INFO = 0x02
    WARNING = 0x08
    ERROR = 0x10
    DEBUG = 0x20
    ALL = 0xff


LEVEL_MAP = {
    'None': DebugLevel.NONE,
    'Success': DebugLevel.SUCCESS,
    'Information': DebugLevel.INFO,
    'Warning': DebugLevel.WARNING,
    'Error': DebugLevel.ERROR,
    'Debug': DebugLevel.DEBUG,
    'All': DebugLevel.ALL
}


class Logger:
    """Colored console logger + optional file logger, driven by the Logging config section."""

    # set_level() override for the console mask; None means "use config"
    _console_levels = None

    @staticmethod
    def _settings() -> dict:
        return ConfigLoader.get_config().get('Logging', {})

    @staticmethod
    def _get_logging_mask(levels):
        if isinstance(levels, str):
            levels = [level.strip() for level in levels.split(',')]

        mask = DebugLevel.NONE
        for level in levels:
            if level in LEVEL_MAP:
                mask |= LEVEL_MAP[level]

        return mask

    @staticmethod
    def _should_log(level: DebugLevel):
        levels = Logger._console_levels
        if levels is None:
            levels = Logger._settings().get('logging_levels', 'All')
        return (Logger._get_logging_mask(levels) & level) != 0

    @staticmethod
    def _should_log_file(level: DebugLevel):
        levels = Logger._settings().get('logging_file_levels', 'None')
        return (Logger._get_logging_mask(levels) & level) != 0

    @staticmethod
    def _date():
        return datetime.now().strftime(Logger._settings().get('date_format', '[%H:%M:%S]'))

    @staticmethod
    def _colorize(label, color, msg):
        if label:
            return f"{color.value}{label}{Style.RESET_ALL}{Logger._date()} {msg}"
        return msg

    @staticmethod
    def _log_path() -> Path:
        settings = Logger._settings()
        return Path(settings.get('log_dir', 'logs')) / settings.get('log_file', 'steamid.log')

    @staticmethod
    def add_to_log(msg, level_tag):
        if level_tag:
            line = f"[{level_tag}] {Logger._date()} {msg}"
        else:
            line = msg

        path = Logger._log_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "a", encoding='utf-8', errors='replace') as log:
            log.write(line + "\n")

    @staticmethod
    def reset_log():
        path = Logger._log_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        open(path, "w").close()

    @staticmethod
    def set_level(levels):
        """Override the console levels, e.g. "All" or "Error, Success". None restores config."""
        Logger._console_levels = levels

    # ===================================================================
    # Console + File logging methods
    # ===================================================================

    @staticmethod
    def _emit(level: DebugLevel, color: DebugColorLevel, tag: str, msg):
        if Logger._should_log(level):
            print(Logger._colorize(f"[{tag}]", color, msg))
        if Logger._should_log_file(level):
            Logger.add_to_log(msg, tag)

    @staticmethod
    def debug(msg):
        Logger._emit(DebugLevel.DEBUG, DebugColorLevel.DEBUG, "DEBUG", msg)

    @staticmethod
    def info(msg):
        Logger._emit(DebugLevel.INFO, DebugColorLevel.INFO, "INFO", msg)

    @staticmethod
    def warning(msg):
        Logger._emit(DebugLevel.WARNING, DebugColorLevel.WARNING, "WARNING", msg)

    @staticmethod
    def error(msg):
        Logger._emit(DebugLevel.ERROR, DebugColorLevel.ERROR, "ERROR", msg)

    @staticmethod
    def success(msg):
        Logger._emit(DebugLevel.SUCCESS, DebugColorLevel.SUCCESS, "SUCCESS", msg)
