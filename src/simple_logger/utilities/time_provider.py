"""Clock abstraction for deterministic timestamps.

``SystemClock`` is used at runtime; ``FakeClock`` lets tests pin the time
that ends up in a logger's timestamp prefix.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Protocol, runtime_checkable

from simple_logger.utilities.datetime_helpers import normalize_to_utc, utc_now


@runtime_checkable
class Clock(Protocol):
    """Protocol for retrieving current time."""

    def now(self) -> datetime:
        """Return the current time (timezone-aware UTC)."""


class SystemClock:
    """Clock backed by the system time source."""

    def now(self) -> datetime:
        return utc_now()


class FakeClock:
    """Deterministic clock for tests that can be advanced or reset."""

    def __init__(self, initial: datetime | None = None, *, start_time: float | None = None) -> None:
        if initial is not None:
            self._now = normalize_to_utc(initial)
        elif start_time is not None:
            self._now = datetime.fromtimestamp(float(start_time), UTC)
        else:
            self._now = utc_now()

    def now(self) -> datetime:
        return self._now

    def set_time(self, current: datetime | float) -> None:
        if isinstance(current, datetime):
            self._now = normalize_to_utc(current)
            return
        self._now = datetime.fromtimestamp(float(current), UTC)

    def advance(self, seconds: float) -> None:
        if seconds < 0:
            raise ValueError("advance() requires a non-negative duration")
        self._now = self._now + timedelta(seconds=float(seconds))


_default_clock = SystemClock()
_clock: Clock = _default_clock


def get_clock() -> Clock:
    """Return the current active clock implementation."""

    return _clock


def set_clock(clock: Clock) -> None:
    """Override the active clock (useful for deterministic tests)."""

    global _clock
    _clock = clock


def reset_clock() -> None:
    """Reset the active clock to the system clock."""

    global _clock
    _clock = _default_clock


__all__ = [
    "Clock",
    "SystemClock",
    "FakeClock",
    "get_clock",
    "set_clock",
    "reset_clock",
]
