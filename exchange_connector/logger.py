"""Process-wide levelled logging to stdout and stderr."""

from __future__ import annotations

import os
import re
import sys
from datetime import datetime
from enum import IntEnum


class LogLevel(IntEnum):
    """Logging levels, lowest first."""

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3


_PREFIXES = {
    LogLevel.DEBUG: "[DEBUG] ",
    LogLevel.INFO: "[INFO] ",
    LogLevel.WARN: "[WARN] ",
    LogLevel.ERROR: "[ERROR] ",
}

_VALUE_VERB = re.compile(r"(?<!%)%[+#]?v")

_current_level = LogLevel.INFO


def set_log_level(level):
    """Set the global log level."""
    global _current_level
    _current_level = LogLevel(level)


def set_log_level_from_string(level_str):
    """Set the global log level by name; unknown names select INFO."""
    try:
        level = LogLevel[level_str.upper()]
    except KeyError:
        level = LogLevel.INFO
    set_log_level(level)


def get_log_level():
    """Return the current global log level."""
    return _current_level


def _format(fmt: str, args: tuple) -> str:
    if not args:
        return fmt
    return _VALUE_VERB.sub("%s", fmt) % args


def _emit(level: LogLevel, fmt: str, args: tuple) -> None:
    if _current_level > level:
        return
    stream = sys.stderr if level is LogLevel.ERROR else sys.stdout
    stamp = datetime.now().strftime("%Y/%m/%d %H:%M:%S")
    message = _format(fmt, args)
    if not message.endswith("\n"):
        message += "\n"
    stream.write(f"{_PREFIXES[level]}{stamp} {message}")
    stream.flush()


def debug(fmt, *args):
    """Log a printf-style message at DEBUG level."""
    _emit(LogLevel.DEBUG, fmt, args)


def info(fmt, *args):
    """Log a printf-style message at INFO level."""
    _emit(LogLevel.INFO, fmt, args)


def warn(fmt, *args):
    """Log a printf-style message at WARN level."""
    _emit(LogLevel.WARN, fmt, args)


def error(fmt, *args):
    """Log a printf-style message at ERROR level, to stderr."""
    _emit(LogLevel.ERROR, fmt, args)


def init():
    """Set the level from the LOG_LEVEL environment variable, else INFO."""
    level_str = os.environ.get("LOG_LEVEL", "")
    if level_str:
        set_log_level_from_string(level_str)
    else:
        set_log_level(LogLevel.INFO)


def init_with_level(level):
    """Set the level explicitly."""
    set_log_level(level)


def init_with_string(level_str):
    """Set the level by name."""
    set_log_level_from_string(level_str)


def is_debug_enabled():
    """Whether DEBUG messages are written."""
    return _current_level <= LogLevel.DEBUG


def is_info_enabled():
    """Whether INFO messages are written."""
    return _current_level <= LogLevel.INFO


def is_warn_enabled():
    """Whether WARN messages are written."""
    return _current_level <= LogLevel.WARN


def is_error_enabled():
    """Whether ERROR messages are written."""
    return _current_level <= LogLevel.ERROR