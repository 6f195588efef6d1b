"""A small levelled logger writing timestamped lines to a stream."""

from __future__ import annotations

import sys
import time
from enum import IntEnum
from typing import Any, TextIO


class LogLevel(IntEnum):
    """Logging verbosity, from silent to most verbose."""

    SILENT = 0
    ERROR = 1
    WARN = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5


_ALIASES = {"WARNING": LogLevel.WARN}


class Logger:
    """Writes messages at or below the configured level to an output stream.

    When ``output`` is None, messages go to standard error.
    """

    def __init__(self, level: LogLevel = LogLevel.INFO, output: TextIO | None = None) -> None:
        self.level = LogLevel(level)
        self.output = output

    def _log(self, level: LogLevel, fmt: str, args: tuple[Any, ...]) -> None:
        if self.level < level:
            return
        message = fmt % args if args else fmt
        stamp = time.strftime("%Y/%m/%d %H:%M:%S")
        stream = self.output if self.output is not None else sys.stderr
        line = f"{stamp} [{level.name}] {message}"
        stream.write(line if line.endswith("\n") else line + "\n")

    def error(self, fmt: str, *args: Any) -> None:
        self._log(LogLevel.ERROR, fmt, args)

    def warn(self, fmt: str, *args: Any) -> None:
        self._log(LogLevel.WARN, fmt, args)

    def info(self, fmt: str, *args: Any) -> None:
        self._log(LogLevel.INFO, fmt, args)

    def debug(self, fmt: str, *args: Any) -> None:
        self._log(LogLevel.DEBUG, fmt, args)

    def trace(self, fmt: str, *args: Any) -> None:
        self._log(LogLevel.TRACE, fmt, args)


def parse_log_level(level: str) -> LogLevel:
    """Convert a level name, in any case, to a LogLevel."""
    name = level.upper()
    if name in _ALIASES:
        return _ALIASES[name]
    try:
        return LogLevel[name]
    except KeyError:
        raise ValueError(f"unknown log level: {level}") from None