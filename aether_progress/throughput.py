"""Throughput tracking and rate formatting."""

from __future__ import annotations

import time
from datetime import timedelta
from typing import Callable

from aether_progress.eta import format_duration

_KB = 1024
_MB = 1024 * _KB
_GB = 1024 * _MB
_TB = 1024 * _GB


class ThroughputCalculator:
    """Track item and byte totals and derive average and instantaneous rates."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self.reset()

    def reset(self) -> None:
        """Start measuring afresh from now."""
        now = self._clock()
        self._start = now
        self._total_items = 0
        self._total_bytes = 0
        self._last_time = now
        self._last_items = 0
        self._last_bytes = 0
        self._instant_items_rate = 0.0
        self._instant_bytes_rate = 0.0

    def update(self, items: int, bytes_: int) -> None:
        """Record cumulative totals and recompute the instantaneous rates."""
        now = self._clock()
        since_last = now - self._last_time
        if since_last > 0:
            self._instant_items_rate = (items - self._last_items) / since_last
            self._instant_bytes_rate = (bytes_ - self._last_bytes) / since_last
        self._total_items = items
        self._total_bytes = bytes_
        self._last_time = now
        self._last_items = items
        self._last_bytes = bytes_

    def _elapsed_seconds(self) -> float:
        return self._clock() - self._start

    def average_items_per_second(self) -> float:
        elapsed = self._elapsed_seconds()
        return self._total_items / elapsed if elapsed > 0 else 0.0

    def average_bytes_per_second(self) -> float:
        elapsed = self._elapsed_seconds()
        return self._total_bytes / elapsed if elapsed > 0 else 0.0

    def instant_items_per_second(self) -> float:
        return self._instant_items_rate

    def instant_bytes_per_second(self) -> float:
        return self._instant_bytes_rate

    def elapsed_time(self) -> timedelta:
        """Time since creation or the last reset."""
        return timedelta(seconds=self._elapsed_seconds())

    def summary(self) -> str:
        """One-line summary of totals and average rates."""
        return (
            f"{self._total_items} items ({format_bytes(self._total_bytes)}) "
            f"in {format_duration(self.elapsed_time())} | "
            f"Avg: {format_items_per_second(self.average_items_per_second())}, "
            f"{format_bytes_per_second(self.average_bytes_per_second())}"
        )


def format_items_per_second(items_per_sec: float) -> str:
    if items_per_sec < 0.01:
        return "< 0.01 items/sec"
    return f"{items_per_sec:.2f} items/sec"


def format_bytes_per_second(bytes_per_sec: float) -> str:
    if bytes_per_sec >= _GB:
        return f"{bytes_per_sec / _GB:.2f} GB/sec"
    if bytes_per_sec >= _MB:
        return f"{bytes_per_sec / _MB:.2f} MB/sec"
    if bytes_per_sec >= _KB:
        return f"{bytes_per_sec / _KB:.2f} KB/sec"
    return f"{bytes_per_sec:.0f} B/sec"


def format_bytes(num_bytes: int) -> str:
    if num_bytes >= _TB:
        return f"{num_bytes / _TB:.2f} TB"
    if num_bytes >= _GB:
        return f"{num_bytes / _GB:.2f} GB"
    if num_bytes >= _MB:
        return f"{num_bytes / _MB:.2f} MB"
    if num_bytes >= _KB:
        return f"{num_bytes / _KB:.2f} KB"
    return f"{num_bytes} B"