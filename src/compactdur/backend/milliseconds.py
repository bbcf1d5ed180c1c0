"""Integer millisecond backend."""

from __future__ import annotations

from typing import Any

from compactdur._types import Unit
from compactdur.backend._base import BackendName, DurationBackend, truncate


class MillisecondsBackend(DurationBackend[int]):
    """Durations as plain ``int`` millisecond counts.

    Python integers are unbounded, so aggregation never overflows.
    """

    name = BackendName.MILLISECONDS

    def from_count(self, count: int, unit: Unit) -> int:
        return count * unit.length

    def zero(self) -> int:
        return 0

    def add(self, a: int, b: int) -> int:
        return a + b

    def subtract(self, a: int, b: int) -> int:
        return a - b

    def whole(self, duration: int, unit: Unit) -> int:
        return truncate(duration, unit.length)

    def accepts(self, value: Any) -> bool:
        return isinstance(value, int) and not isinstance(value, bool)

    def is_negative(self, duration: int) -> bool:
        return duration < 0

    def has_sub_millisecond(self, duration: int) -> bool:
        return False
