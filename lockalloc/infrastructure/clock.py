from __future__ import annotations

import threading
import time


class SystemClock:
    """Wall-clock milliseconds, clamped so a backwards NTP step never shows up as time travel."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._last = 0

    def now(self) -> int:
        current = time.time_ns() // 1_000_000
        with self._lock:
            self._last = max(self._last, current)
            return self._last


class ManualClock:
    """Clock that only moves when told to. Used to simulate elapsed days in tests."""

    def __init__(self, start: int = 1000) -> None:
        if start < 0:
            raise ValueError("start must not be negative")
        self._lock = threading.Lock()
        self._time = start

    def now(self) -> int:
        with self._lock:
            return self._time

    def set(self, instant: int) -> None:
        with self._lock:
            if instant < self._time:
                raise ValueError(f"Clock cannot move backwards ({instant} < {self._time})")
            self._time = instant

    def advance(self, millis: int) -> int:
        if millis < 0:
            raise ValueError("millis must not be negative")
        with self._lock:
            self._time += millis
            return self._time
