"""Abstract base class for scalar duration backends."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from compactdur._types import Unit

D = TypeVar("D")


class BackendName(enum.StrEnum):
    TIMEDELTA = "timedelta"
    MILLISECONDS = "milliseconds"


class DurationBackend(ABC, Generic[D]):
    """Abstract base class defining the scalar duration interface.

    The codec never touches duration values directly; every construction,
    arithmetic step and unit extraction goes through a backend.
    """

    name: BackendName

    # --- Construction ---

    @abstractmethod
    def from_count(self, count: int, unit: Unit) -> D:
        """Duration of ``count`` whole ``unit``s.

        Raises:
            OverflowError: If the result is outside the backend's range.
        """

    @abstractmethod
    def zero(self) -> D: ...

    # --- Arithmetic ---

    @abstractmethod
    def add(self, a: D, b: D) -> D: ...

    @abstractmethod
    def subtract(self, a: D, b: D) -> D: ...

    @abstractmethod
    def whole(self, duration: D, unit: Unit) -> int:
        """Number of whole ``unit``s in ``duration``, truncated toward zero."""

    # --- Inspection ---

    @abstractmethod
    def accepts(self, value: Any) -> bool:
        """Whether ``value`` is a duration of this backend's type."""

    @abstractmethod
    def is_negative(self, duration: D) -> bool: ...

    @abstractmethod
    def has_sub_millisecond(self, duration: D) -> bool: ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def truncate(total: int, length: int) -> int:
    """Divide ``total`` by ``length``, rounding toward zero."""
    quotient = abs(total) // length
    return quotient if total >= 0 else -quotient
