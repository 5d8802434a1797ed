"""
Clock implementations.

RunningClock keeps time from the moment it is set, like a time-of-day
register; FixedClock always reports what it was last set to.
"""

import time
from typing import Callable, Optional

from retrochat.protocols.clock import ClockReading

MINUTES_PER_DAY = 24 * 60


def _validate(hour: int, minute: int) -> None:
    if not 1 <= hour <= 12:
        raise ValueError(f"hour must be 1-12, got {hour}")
    if not 0 <= minute <= 59:
        raise ValueError(f"minute must be 0-59, got {minute}")


def to_minutes_of_day(hour: int, minute: int, is_pm: bool) -> int:
    """Convert a 12-hour reading to minutes since midnight."""
    hour24 = hour % 12 + (12 if is_pm else 0)
    return hour24 * 60 + minute


def from_minutes_of_day(total: int) -> ClockReading:
    """Convert minutes since midnight to a 12-hour reading."""
    total %= MINUTES_PER_DAY
    hour24, minute = divmod(total, 60)
    return ClockReading(hour=hour24 % 12 or 12, minute=minute, is_pm=hour24 >= 12)


class RunningClock:
    """
    Clock that advances from the moment it is set.

    Attributes:
        _time_source: Monotonic seconds source
        _base_minutes: Minutes since midnight at the moment of ``set``
        _set_at: Time-source value at the moment of ``set``

    Example:
        >>> clock = RunningClock()
        >>> clock.read() is None
        True
        >>> clock.set(7, 44, True)
        >>> clock.read()
        ClockReading(7:44 PM)
    """

    def __init__(self, time_source: Callable[[], float] = time.monotonic):
        self._time_source = time_source
        self._base_minutes: Optional[int] = None
        self._set_at = 0.0

    def set(self, hour: int, minute: int, is_pm: bool) -> None:
        _validate(hour, minute)
        self._base_minutes = to_minutes_of_day(hour, minute, is_pm)
        self._set_at = self._time_source()

    def read(self) -> Optional[ClockReading]:
        if self._base_minutes is None:
            return None
        elapsed = int(self._time_source() - self._set_at) // 60
        return from_minutes_of_day(self._base_minutes + elapsed)

    def __repr__(self) -> str:
        return f"RunningClock(reading={self.read()!r})"


class FixedClock:
    """Clock that never moves. Useful in tests."""

    def __init__(self, reading: Optional[ClockReading] = None):
        self._reading = reading

    def set(self, hour: int, minute: int, is_pm: bool) -> None:
        _validate(hour, minute)
        self._reading = ClockReading(hour=hour, minute=minute, is_pm=is_pm)

    def read(self) -> Optional[ClockReading]:
        return self._reading

    def __repr__(self) -> str:
        return f"FixedClock(reading={self._reading!r})"
