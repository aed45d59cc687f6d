"""Capacitive touch button with hold detection."""

from __future__ import annotations

import time
from collections.abc import Callable

DEFAULT_HOLD_TIME_MS = 2000


def _millis() -> float:
    return time.monotonic() * 1000.0


class TouchSensor:
    """Reports whether a touch input is pressed and whether it is held long enough.

    ``read`` returns the current input level; ``clock`` returns milliseconds.
    """

    def __init__(
        self,
        read: Callable[[], bool],
        hold_time_ms: float = DEFAULT_HOLD_TIME_MS,
        clock: Callable[[], float] = _millis,
    ) -> None:
        self._read = read
        self.hold_time_ms = hold_time_ms
        self._clock = clock
        self._start: float | None = None
        self.touch = False

    def is_touched(self) -> bool:
        """True while the input reads high."""
        return bool(self._read())

    def is_touch_held(self) -> bool:
        """True once the touch has lasted at least the hold time."""
        if self.is_touched():
            now = self._clock()
            if self._start is None:
                self._start = now
            if now - self._start >= self.hold_time_ms:
                self.touch = True
                return True
        else:
            self._start = None
            self.touch = False
        return False