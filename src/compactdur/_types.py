"""Domain types for compact durations."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from compactdur._constants import (
    DAYS_PER_MONTH,
    DAYS_PER_WEEK,
    DAYS_PER_YEAR,
    HOURS_PER_DAY,
    MILLISECONDS_PER_SECOND,
    MINUTES_PER_HOUR,
    SECONDS_PER_MINUTE,
)


class Unit(enum.StrEnum):
    """Time granularity of a term.

    The value is the canonical spelling used when rendering. Parsing
    also accepts the alternative spellings in ``spellings``.
    """

    MILLISECONDS = "MS"
    SECONDS = "S"
    MINUTES = "m"
    HOURS = "H"
    DAYS = "D"
    MONTHS = "M"
    WEEK = "W"
    YEAR = "Y"

    @property
    def spellings(self) -> tuple[str, ...]:
        """Spellings accepted for this unit when parsing."""
        return UNIT_SPELLINGS[self]

    @property
    def length(self) -> int:
        """Fixed length of one unit in milliseconds."""
        return UNIT_LENGTHS[self]

    @property
    def rank(self) -> int:
        """Position from coarsest (0) to finest."""
        return _RANKS[self]

    @classmethod
    def from_spelling(cls, spelling: str) -> Unit:
        try:
            return _BY_SPELLING[spelling]
        except KeyError:
            raise ValueError(f"unknown unit spelling: {spelling!r}") from None


# Case matters per token: "M" is months, "m" is minutes, "MS"/"ms" are milliseconds.
UNIT_SPELLINGS: dict[Unit, tuple[str, ...]] = {
    Unit.MILLISECONDS: ("MS", "ms"),
    Unit.SECONDS: ("S",),
    Unit.MINUTES: ("m",),
    Unit.HOURS: ("H",),
    Unit.DAYS: ("D",),
    Unit.MONTHS: ("M",),
    Unit.WEEK: ("W",),
    Unit.YEAR: ("Y",),
}

_SECOND = MILLISECONDS_PER_SECOND
_MINUTE = _SECOND * SECONDS_PER_MINUTE
_HOUR = _MINUTE * MINUTES_PER_HOUR
_DAY = _HOUR * HOURS_PER_DAY

UNIT_LENGTHS: dict[Unit, int] = {
    Unit.MILLISECONDS: 1,
    Unit.SECONDS: _SECOND,
    Unit.MINUTES: _MINUTE,
    Unit.HOURS: _HOUR,
    Unit.DAYS: _DAY,
    Unit.MONTHS: _DAY * DAYS_PER_MONTH,
    Unit.WEEK: _DAY * DAYS_PER_WEEK,
    Unit.YEAR: _DAY * DAYS_PER_YEAR,
}

COARSEST_FIRST: tuple[Unit, ...] = tuple(
    sorted(Unit, key=lambda unit: UNIT_LENGTHS[unit], reverse=True)
)

# Months and years are accepted when parsing but never emitted.
DECOMPOSITION_UNITS: tuple[Unit, ...] = (
    Unit.WEEK,
    Unit.DAYS,
    Unit.HOURS,
    Unit.MINUTES,
    Unit.SECONDS,
    Unit.MILLISECONDS,
)

_RANKS: dict[Unit, int] = {unit: i for i, unit in enumerate(COARSEST_FIRST)}

_BY_SPELLING: dict[str, Unit] = {
    spelling: unit
    for unit, spellings in UNIT_SPELLINGS.items()
    for spelling in spellings
}


@dataclass(frozen=True)
class Term:
    """A count of one unit, e.g. ``3H``.

    Parsing only produces non-negative values; the type itself does not
    forbid negative ones.
    """

    value: int
    unit: Unit

    def __str__(self) -> str:
        return f"{self.value}{self.unit}"

    @property
    def milliseconds(self) -> int:
        return self.value * self.unit.length
