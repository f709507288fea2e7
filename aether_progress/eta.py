"""Estimated time of arrival computed from recent progress samples."""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import timedelta
from typing import Callable, Optional

_US_PER_MS = 1_000
_US_PER_SECOND = 1_000_000
_US_PER_MINUTE = 60 * _US_PER_SECOND
_US_PER_HOUR = 60 * _US_PER_MINUTE


def _microseconds(duration: timedelta) -> int:
    return (duration.days * 86_400 + duration.seconds) * _US_PER_SECOND + duration.microseconds


def _round_half_away(value: int, unit: int) -> int:
    quotient, remainder = divmod(abs(value), unit)
    if 2 * remainder >= unit:
        quotient += 1
    return quotient * unit if value >= 0 else -quotient * unit


def _trim(value: int, unit: int) -> str:
    whole, fraction = divmod(value, unit)
    if not fraction:
        return str(whole)
    digits = len(str(unit)) - 1
    return f"{whole}.{fraction:0{digits}d}".rstrip("0")


def _duration_text(us: int) -> str:
    """Render a microsecond count in the compact h/m/s style."""
    if us == 0:
        return "0s"
    sign = "-" if us < 0 else ""
    us = abs(us)
    if us < _US_PER_SECOND:
        if us >= _US_PER_MS:
            return f"{sign}{_trim(us, _US_PER_MS)}ms"
        return f"{sign}{us}µs"
    hours, rest = divmod(us, _US_PER_HOUR)
    minutes, rest = divmod(rest, _US_PER_MINUTE)
    seconds = _trim(rest, _US_PER_SECOND) + "s"
    if hours:
        return f"{sign}{hours}h{minutes}m{seconds}"
    if minutes:
        return f"{sign}{minutes}m{seconds}"
    return sign + seconds


def _rounded_text(duration: timedelta, resolution: timedelta) -> str:
    """Round ``duration`` to ``resolution`` (half away from zero) and render it."""
    rounded = _round_half_away(_microseconds(duration), _microseconds(resolution))
    return _duration_text(rounded)


@dataclass(frozen=True)
class TimestampedProgress:
    """A progress measurement taken at a clock reading (in seconds)."""

    timestamp: float
    items: int


class ETACalculator:
    """Estimate remaining time from the most recent progress samples.

    The average time per item is taken over at most ``max_samples`` samples
    that also lie within ``max_time_window`` of the newest one.
    """

    def __init__(
        self,
        max_samples: int = 10,
        max_time_window: timedelta = timedelta(seconds=30),
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._max_samples = max_samples
        self._max_window = max_time_window.total_seconds()
        self._clock = clock
        self._samples: list[TimestampedProgress] = []

    def record_progress(self, items_processed: int) -> None:
        """Record the number of items processed so far."""
        now = self._clock()
        self._samples.append(TimestampedProgress(now, items_processed))
        if len(self._samples) > self._max_samples:
            self._samples = self._samples[-self._max_samples:]
        self._prune(now)

    def _prune(self, now: float) -> None:
        cutoff = now - self._max_window
        first_valid = next(
            (index for index, sample in enumerate(self._samples) if sample.timestamp > cutoff),
            0,
        )
        if first_valid > 0:
            self._samples = self._samples[first_valid:]

    def _seconds_per_item(self) -> Optional[float]:
        if len(self._samples) < 2:
            return None
        first, last = self._samples[0], self._samples[-1]
        time_delta = last.timestamp - first.timestamp
        items_delta = last.items - first.items
        if items_delta <= 0 or time_delta <= 0:
            return None
        return time_delta / items_delta

    def calculate_eta(self, total_items: int, current_items: int) -> Optional[timedelta]:
        """Return the estimated time remaining, or None if it cannot be computed.

        At least two samples with forward progress are needed; a finished task
        (``current_items >= total_items``) yields a zero duration.
        """
        if len(self._samples) < 2:
            return None
        if current_items >= total_items:
            return timedelta(0)
        per_item = self._seconds_per_item()
        if per_item is None:
            return None
        return timedelta(seconds=(total_items - current_items) * per_item)

    def throughput(self) -> Optional[float]:
        """Return items per second over the sample window, or None."""
        per_item = self._seconds_per_item()
        if per_item is None:
            return None
        return 1.0 / per_item

    def reset(self) -> None:
        """Discard all recorded samples."""
        self._samples = []


def format_eta(eta: timedelta) -> str:
    """Format an ETA as e.g. ``"< 1s"``, ``"45s"``, ``"2m30s"`` or ``"2h15m"``."""
    us = _microseconds(eta)
    if us < _US_PER_SECOND:
        return "< 1s"
    if us < _US_PER_MINUTE:
        return _rounded_text(eta, timedelta(seconds=1))
    if us < _US_PER_HOUR:
        return f"{us // _US_PER_MINUTE}m{(us // _US_PER_SECOND) % 60}s"
    return f"{us // _US_PER_HOUR}h{(us // _US_PER_MINUTE) % 60}m"


def format_duration(duration: timedelta) -> str:
    """Format a duration, rounded to milliseconds below one second, else to seconds."""
    if _microseconds(duration) < _US_PER_SECOND:
        return _rounded_text(duration, timedelta(milliseconds=1))
    return _rounded_text(duration, timedelta(seconds=1))