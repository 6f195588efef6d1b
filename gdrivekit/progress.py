"""Progress tracking for streamed reads, with a console status-line printer."""

from __future__ import annotations

import sys
import time
from collections.abc import Callable
from typing import BinaryIO, TextIO

ProgressCallback = Callable[[int, int, float, float], None]
"""Called with (bytes_read, total, percentage, speed in bytes per second)."""

_UPDATE_EVERY = 0.25

_KB = 1024
_MB = 1024 * 1024
_GB = 1024 * 1024 * 1024


class ProgressReader:
    """Wraps a binary reader and reports progress as data is read.

    The callback fires on the first read that returns data and then at most
    once every quarter of a second.
    """

    def __init__(self, reader: BinaryIO, total: int, callback: ProgressCallback) -> None:
        self._reader = reader
        self.total = total
        self.bytes_read = 0
        self._callback = callback
        self._last_update: float | None = None
        self._last_reported = 0

    def readable(self) -> bool:
        return True

    def read(self, size: int = -1) -> bytes:
        """Read up to size bytes from the wrapped reader."""
        data = self._reader.read(size)
        if not data:
            return data
        self.bytes_read += len(data)
        now = time.monotonic()
        last = self._last_update
        if last is None or now - last >= _UPDATE_EVERY:
            percentage = self.bytes_read / self.total * 100.0 if self.total > 0 else 0.0
            speed = 0.0
            if last is not None and now > last:
                speed = (self.bytes_read - self._last_reported) / (now - last)
            self._callback(self.bytes_read, self.total, percentage, speed)
            self._last_update = now
            self._last_reported = self.bytes_read
        return data


def _format_speed(speed: float) -> str:
    if speed < _KB:
        return f"{speed:.0f} B/s"
    if speed < _MB:
        return f"{speed / _KB:.2f} KB/s"
    return f"{speed / _MB:.2f} MB/s"


def _format_eta(seconds_left: float) -> str:
    if seconds_left < 60:
        return f"{seconds_left:.0f}s"
    if seconds_left < 3600:
        return f"{seconds_left / 60:.1f}m"
    return f"{seconds_left / 3600:.1f}h"


def _format_amounts(completed: int, total: int) -> tuple[str, str]:
    if total < _KB:
        return f"{completed} B", f"{total} B"
    if total < _MB:
        return f"{completed / _KB:.1f} KB", f"{total / _KB:.1f} KB"
    if total < _GB:
        return f"{completed / _MB:.2f} MB", f"{total / _MB:.2f} MB"
    return f"{completed / _GB:.2f} GB", f"{total / _GB:.2f} GB"


def default_progress_printer(prefix: str, out: TextIO | None = None) -> ProgressCallback:
    """Return a callback that rewrites a single status line on out (stdout by default)."""
    start = time.monotonic()

    def report(bytes_read: int, total: int, percentage: float, speed: float) -> None:
        elapsed = time.monotonic() - start
        avg_speed = bytes_read / elapsed if elapsed > 0 else 0.0

        eta = "Unknown"
        if avg_speed > 0 and total > 0:
            eta = _format_eta((total - bytes_read) / avg_speed)

        completed_str, total_str = _format_amounts(bytes_read, total)
        stream = out if out is not None else sys.stdout
        stream.write(
            f"\r{prefix}: {completed_str}/{total_str} {percentage:.1f}% "
            f"[{_format_speed(avg_speed)}, {_format_speed(speed)} current, ETA {eta}]      "
        )
        stream.flush()

    return report


def finish_progress(out: TextIO | None = None) -> None:
    """End the status line with a newline."""
    stream = out if out is not None else sys.stdout
    stream.write("\n")
    stream.flush()