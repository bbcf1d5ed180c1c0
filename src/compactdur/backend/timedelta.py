"""``datetime.timedelta`` backend."""

from __future__ import annotations

from datetime import timedelta
from typing import Any

from compactdur._types import Unit
from compactdur.backend._base import BackendName, DurationBackend, truncate

_MICROSECONDS_PER_MILLISECOND = 1000
_MICROSECONDS_PER_DAY = 86_400 * 1_000_000


def _total_microseconds(duration: timedelta) -> int:
    return (
        duration.days * _MICROSECONDS_PER_DAY
        + duration.seconds * 1_000_000
        + duration.microseconds
    )


class TimedeltaBackend(DurationBackend[timedelta]):
    """Durations as ``datetime.timedelta``.

    Range is bounded by ``timedelta.max`` (999999999 days); resolution is
    a microsecond, so only whole-millisecond values can be rendered.
    """

    name = BackendName.TIMEDELTA

    def from_count(self, count: int, unit: Unit) -> timedelta:
        # Integer milliseconds keep the conversion exact.
        return timedelta(milliseconds=count * unit.length)

    def zero(self) -> timedelta:
        return timedelta(0)

    def add(self, a: timedelta, b: timedelta) -> timedelta:
        return a + b

    def subtract(self, a: timedelta, b: timedelta) -> timedelta:
        return a - b

    def whole(self, duration: timedelta, unit: Unit) -> int:
        return truncate(
            _total_microseconds(duration),
            unit.length * _MICROSECONDS_PER_MILLISECOND,
        )

    def accepts(self, value: Any) -> bool:
        return isinstance(value, timedelta)

    def is_negative(self, duration: timedelta) -> bool:
        return duration < timedelta(0)

    def has_sub_millisecond(self, duration: timedelta) -> bool:
        return duration.microseconds % _MICROSECONDS_PER_MILLISECOND != 0
