"""Timing statistics and a periodic progress timer."""

from __future__ import annotations

import time
from typing import Callable


_NS_PER_S = 1_000_000_000


def format_ns(ns: int) -> str:
    """Format nanoseconds as ``seconds.nanoseconds`` with nine digits."""
    secs, nanos = divmod(int(ns), _NS_PER_S)
    return f"{secs}.{nanos:09d}"


class Timing:
    """
    Collects min, max, total and count of elapsed durations (nanoseconds).

    ``str(timing)`` shows min/max/avg/tot, or only the total when a single
    duration was recorded.
    """

    def __init__(self) -> None:
        self.min_ns: int | None = None
        self.max_ns: int = 0
        self.total_ns: int = 0
        self.count: int = 0

    def update(self, elapsed_ns: int) -> None:
        elapsed_ns = int(elapsed_ns)
        if self.min_ns is None or elapsed_ns < self.min_ns:
            self.min_ns = elapsed_ns
        if elapsed_ns > self.max_ns:
            self.max_ns = elapsed_ns
        self.total_ns += elapsed_ns
        self.count += 1

    @property
    def average_ns(self) -> int:
        if self.count == 0:
            return 0
        return self.total_ns // self.count

    def __str__(self) -> str:
        if self.count > 1:
            return (
                f"min: {format_ns(self.min_ns)}\n"
                f"max: {format_ns(self.max_ns)}\n"
                f"avg: {format_ns(self.average_ns)}\n"
                f"tot: {format_ns(self.total_ns)}"
            )
        return f"total: {format_ns(self.total_ns)}"


class ProgressTimer:
    """Signals once more than ``interval_s`` seconds passed since the last signal."""

    def __init__(
        self,
        interval_s: float = 10.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.interval_s = float(interval_s)
        self._clock = clock
        self._last = clock()

    def update(self) -> bool:
        now = self._clock()
        if now - self._last > self.interval_s:
            self._last = now
            return True
        return False


__all__ = ["Timing", "ProgressTimer", "format_ns"]
