"""Text progress bar for known-size work and a spinner for open-ended work."""

from __future__ import annotations

import sys
import time
from datetime import timedelta
from typing import Callable, Optional, TextIO

from aether_progress.eta import _rounded_text

_BAR_WIDTH = 40
_THROTTLE_SECONDS = 0.5


class ProgressBar:
    """Progress bar showing description, percentage, count and items per second.

    Output goes to ``stream`` (standard error by default) and is redrawn at
    most every half second, except on :meth:`finish`. Without an explicit
    stream the empty bar is drawn at once.
    """

    def __init__(
        self,
        total: int,
        description: str,
        stream: Optional[TextIO] = None,
        *,
        render_blank_state: Optional[bool] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._total = total
        self._description = description
        self._stream = stream
        self._clock = clock
        self._current = 0
        self._start = clock()
        self._last_render: Optional[float] = None
        self._last_width = 0
        if render_blank_state is None:
            render_blank_state = stream is None
        if render_blank_state:
            self._render(0)

    @property
    def total(self) -> int:
        return self._total

    @property
    def description(self) -> str:
        return self._description

    def _write(self, text: str) -> None:
        stream = self._stream if self._stream is not None else sys.stderr
        stream.write(text)
        stream.flush()

    def _render(self, shown: int) -> None:
        now = self._clock()
        if self._total > 0:
            percent = int(shown * 100 / self._total)
            filled = max(0, min(_BAR_WIDTH, _BAR_WIDTH * shown // self._total))
        else:
            percent = 0
            filled = 0
        elapsed = now - self._start
        rate = shown / elapsed if elapsed > 0 else 0.0
        line = (
            f"{self._description} {percent:3d}% "
            f"|{'█' * filled}{' ' * (_BAR_WIDTH - filled)}| "
            f"({shown}/{self._total}, {rate:.0f} it/s)"
        )
        self._write("\r" + line)
        self._last_width = len(line)
        self._last_render = now

    def _update(self) -> None:
        now = self._clock()
        if self._last_render is None or now - self._last_render >= _THROTTLE_SECONDS:
            self._render(self._current)
        if self._total > 0 and self._current > self._total:
            raise ValueError("current number exceeds max")

    def add(self, amount: int) -> None:
        """Advance by ``amount``; raises ValueError once past the total."""
        self._current += amount
        self._update()

    def set(self, value: int) -> None:
        """Move to ``value``; raises ValueError if it is past the total."""
        self._current = value
        self._update()

    def finish(self) -> None:
        """Draw the bar in its completed state."""
        self._render(self._total)

    def clear(self) -> None:
        """Erase the bar from the terminal line."""
        self._write("\r" + " " * self._last_width + "\r")

    def percentage(self) -> float:
        """Completion percentage based on the recorded progress."""
        if self._total == 0:
            return 0.0
        return self._current / self._total * 100

    def elapsed_time(self) -> timedelta:
        return timedelta(seconds=self._clock() - self._start)


class Spinner:
    """Status line for work of unknown duration, written to standard output."""

    def __init__(
        self,
        description: str,
        stream: Optional[TextIO] = None,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.description = description
        self._stream = stream
        self._clock = clock
        self._start = clock()
        self._active = False

    def _write(self, text: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(text)
        stream.flush()

    def _elapsed(self) -> timedelta:
        return timedelta(seconds=self._clock() - self._start)

    def start(self) -> None:
        self._active = True
        self._start = self._clock()
        self._write(f"{self.description}...\n")

    def stop(self, success: bool) -> None:
        self._active = False
        elapsed = _rounded_text(self._elapsed(), timedelta(milliseconds=1))
        if success:
            self._write(f"✓ {self.description} (completed in {elapsed})\n")
        else:
            self._write(f"✗ {self.description} (failed after {elapsed})\n")

    def update_message(self, message: str) -> None:
        """Change the description, redrawing it if the spinner is running."""
        self.description = message
        if self._active:
            elapsed = _rounded_text(self._elapsed(), timedelta(seconds=1))
            self._write(f"\r{message}... ({elapsed} elapsed)")

    def is_active(self) -> bool:
        return self._active