"""Conversion between term lists, scalar durations and duration text."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from compactdur._constants import DEFAULT_MAX_INPUT_LENGTH
from compactdur._errors import (
    ERR_MSG_DECOMPOSITION_FAILED,
    ERR_MSG_DURATION_OVERFLOW,
    ERR_MSG_INPUT_TOO_LONG,
    ERR_MSG_NEGATIVE_DURATION,
    ERR_MSG_SUB_MILLISECOND,
    ERR_MSG_TRAILING_INPUT,
    ERR_MSG_UNSUPPORTED_VALUE,
    DecompositionInvariantError,
    DurationOverflowError,
    DurationParseError,
    InvalidDurationError,
    SequenceError,
)
from compactdur._parser import parse_sequence
from compactdur._types import DECOMPOSITION_UNITS, Term
from compactdur.backend import DurationBackend, backend_for, get_backend

logger = logging.getLogger(__name__)


def aggregate(terms: Iterable[Term], backend: DurationBackend | None = None) -> Any:
    """Sum terms into one scalar duration.

    Terms may come in any order and repeat units. Months count as 30
    days and years as 365 days.

    Args:
        terms: Terms to sum.
        backend: Duration backend to build the result with. Defaults to
            ``datetime.timedelta``.

    Raises:
        DurationOverflowError: If the sum is outside the backend's range.
    """
    if backend is None:
        backend = get_backend()

    total = backend.zero()
    for term in terms:
        try:
            total = backend.add(total, backend.from_count(term.value, term.unit))
        except OverflowError as exc:
            raise DurationOverflowError(
                ERR_MSG_DURATION_OVERFLOW,
                f"adding {term} exceeds the range of {backend!r}",
                wrapped=exc,
            ) from exc
    return total


def _resolve_backend(duration: Any, backend: DurationBackend | None) -> DurationBackend:
    resolved = backend if backend is not None else backend_for(duration)
    if resolved is None or not resolved.accepts(duration):
        raise InvalidDurationError(
            ERR_MSG_UNSUPPORTED_VALUE,
            f"no backend for {type(duration).__name__} value {duration!r}",
        )
    return resolved


def decompose(duration: Any, backend: DurationBackend | None = None) -> list[Term]:
    """Split a duration into its canonical terms, coarsest unit first.

    Only weeks, days, hours, minutes, seconds and milliseconds are
    emitted; units with a zero count are left out, so the zero duration
    decomposes to an empty list.

    Args:
        duration: A non-negative duration with whole-millisecond precision.
        backend: Duration backend. Inferred from the value's type if omitted.

    Raises:
        InvalidDurationError: If the value is negative, finer than a
            millisecond, or of an unsupported type.
        DecompositionInvariantError: If a remainder survives the last unit.
    """
    backend = _resolve_backend(duration, backend)
    if backend.is_negative(duration):
        raise InvalidDurationError(
            ERR_MSG_NEGATIVE_DURATION,
            f"cannot decompose negative duration {duration!r}",
        )
    if backend.has_sub_millisecond(duration):
        raise InvalidDurationError(
            ERR_MSG_SUB_MILLISECOND,
            f"cannot decompose {duration!r} without losing precision",
        )

    terms: list[Term] = []
    remainder = duration
    for unit in DECOMPOSITION_UNITS:
        count = backend.whole(remainder, unit)
        if count > 0:
            terms.append(Term(count, unit))
            remainder = backend.subtract(remainder, backend.from_count(count, unit))

    if remainder != backend.zero():
        logger.error(
            "decomposition of %r with %r left remainder %r", duration, backend, remainder
        )
        raise DecompositionInvariantError(
            ERR_MSG_DECOMPOSITION_FAILED,
            f"remainder {remainder!r} after decomposing {duration!r} with {backend!r}",
        )
    return terms


def render(terms: Iterable[Term]) -> str:
    """Concatenate terms as ``<value><unit>`` with no separators."""
    return "".join(str(term) for term in terms)


def parse_terms(text: str) -> list[Term]:
    """Parse a complete duration text into its terms.

    The empty text is how the zero duration renders, so it parses to no
    terms instead of failing.

    Raises:
        DurationParseError: If the text is not a term sequence, or if
            anything is left over after the last term.
    """
    if not text:
        return []
    result = parse_sequence(text)
    if result.end != len(text):
        raise SequenceError(
            ERR_MSG_TRAILING_INPUT,
            f"unexpected input {text[result.end:]!r} at offset {result.end} in {text!r}",
            wrapped=result.error,
            position=result.end,
        )
    return result.value


def serialize(duration: Any, backend: DurationBackend | None = None) -> str:
    """Render a duration in canonical compact form, e.g. ``3H2S1MS``.

    The zero duration renders as the empty string.
    """
    return render(decompose(duration, backend))


def deserialize(
    text: str,
    *,
    backend: DurationBackend | None = None,
    max_length: int | None = None,
) -> Any:
    """Parse a complete duration text into a scalar duration.

    Args:
        text: Compact duration text, e.g. ``1ms2S3H`` or ``1MS 2S``.
        backend: Duration backend for the result. Defaults to
            ``datetime.timedelta``.
        max_length: Maximum accepted text length. Defaults to 256.

    Raises:
        DurationParseError: If the text is malformed or too long.
        DurationOverflowError: If the duration is outside the backend's range.
    """
    limit = DEFAULT_MAX_INPUT_LENGTH if max_length is None else max_length
    if len(text) > limit:
        raise SequenceError(
            ERR_MSG_INPUT_TOO_LONG,
            f"duration text length {len(text)} exceeds limit {limit}",
            position=limit,
        )
    try:
        terms = parse_terms(text)
    except DurationParseError as exc:
        logger.debug("rejected duration text: %s", exc.internal())
        raise
    return aggregate(terms, backend)
