"""Process-wide logger with a pluggable output function and optional prefix."""

from collections.abc import Callable
from enum import IntEnum


class LogLevel(IntEnum):
    ERROR = 0
    INFO = 1
    DEBUG = 2
    TRACE = 3


LoggerImplementation = Callable[[LogLevel, str], None]


def _discard(level: LogLevel, message: str) -> None:
    """Default output: drop every message."""


class Logger:
    """Formats messages and hands them to the configured implementation."""

    def __init__(self) -> None:
        self._implementation: LoggerImplementation = _discard
        self._prefix = ""

    def log(self, level: LogLevel, message: str, *args: object) -> None:
        """Log a printf-style message; the prefix is part of the format string."""
        text = f"{self._prefix} - {message}" if self._prefix else message
        if args:
            text = text % args
        self._implementation(level, text)

    def set_implementation(self, implementation: LoggerImplementation) -> None:
        self._implementation = implementation

    def set_prefix(self, prefix: str) -> None:
        self._prefix = prefix


_instance = Logger()


def get_logger() -> Logger:
    """Return the shared logger."""
    return _instance


def log(level: LogLevel, message: str, *args: object) -> None:
    """Log through the shared logger."""
    _instance.log(level, message, *args)