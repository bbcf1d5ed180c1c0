"""Prefix parsers for units, terms and term sequences.

Each parser starts at ``pos`` and consumes the longest prefix of the
input that its grammar rule accepts. A failed parse consumes nothing
and raises a ``DurationParseError`` carrying the failing offset.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

from lark.exceptions import UnexpectedCharacters, UnexpectedToken

from compactdur._errors import (
    ERR_MSG_EMPTY_SEQUENCE,
    ERR_MSG_EXPECTED_NUMBER,
    ERR_MSG_EXPECTED_UNIT,
    ERR_MSG_TRAILING_INPUT,
    DurationParseError,
    NumberError,
    SequenceError,
    UnitError,
)
from compactdur._grammar import (
    DIGITS,
    END,
    START_SEQUENCE,
    START_TERM,
    START_UNIT,
    UNIT_TERMINALS,
    TermBuilder,
    parser,
)
from compactdur._types import UNIT_SPELLINGS, Term, Unit

T = TypeVar("T")

_ALL_SPELLINGS = ", ".join(
    spelling for spellings in UNIT_SPELLINGS.values() for spelling in spellings
)


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Outcome of a prefix parse.

    ``end`` is the offset just past the consumed input. ``error`` is the
    failure that stopped the parser before the end of the input, or None
    when the whole input was consumed.
    """

    value: T
    start: int
    end: int
    error: DurationParseError | None = None

    @property
    def consumed(self) -> int:
        return self.end - self.start


def _failure(expected: Iterable[str], position: int, text: str) -> DurationParseError:
    terminals = set(expected)
    if DIGITS in terminals:
        return NumberError(
            ERR_MSG_EXPECTED_NUMBER,
            f"expected digits at offset {position} in {text!r}",
            position=position,
        )
    if terminals & UNIT_TERMINALS:
        return UnitError(
            ERR_MSG_EXPECTED_UNIT,
            f"expected one of {_ALL_SPELLINGS} at offset {position} in {text!r}",
            position=position,
        )
    return SequenceError(
        ERR_MSG_TRAILING_INPUT,
        f"unexpected input {text[position:]!r} at offset {position}",
        position=position,
    )


def _scan(text: str, pos: int, start: str) -> tuple[int, DurationParseError | None]:
    """Find the longest prefix of ``text[pos:]`` accepted by rule ``start``.

    Returns the absolute end offset of that prefix and the failure that
    ended the scan (None if the input was exhausted exactly at the end of
    an accepted prefix).

    Raises:
        DurationParseError: If no prefix is accepted at all.
    """
    remaining = text[pos:]
    interactive = parser.parse_interactive(start=start)
    end: int | None = None
    try:
        for token in parser.lex(remaining):
            interactive.feed_token(token)
            if END in interactive.accepts():
                end = pos + token.end_pos
    except UnexpectedCharacters as exc:
        error = _failure(interactive.accepts(), pos + exc.pos_in_stream, text)
    except UnexpectedToken as exc:
        error = _failure(exc.expected, pos + exc.token.start_pos, text)
    else:
        if end == len(text):
            return end, None
        error = _failure(interactive.accepts(), len(text), text)

    if end is None:
        raise error
    return end, error


def _check_position(text: str, pos: int) -> None:
    if not 0 <= pos <= len(text):
        raise ValueError(f"position {pos} outside of text of length {len(text)}")


def parse_unit(text: str, pos: int = 0) -> ParseResult[Unit]:
    """Lex one unit token at ``pos``.

    Raises:
        UnitError: If no unit spelling starts at ``pos``.
    """
    _check_position(text, pos)
    end, error = _scan(text, pos, START_UNIT)
    tree = parser.parse(text[pos:end], start=START_UNIT)
    return ParseResult(TermBuilder(offset=pos).visit(tree), pos, end, error)


def parse_term(text: str, pos: int = 0) -> ParseResult[Term]:
    """Parse a digit run followed immediately by a unit token.

    Raises:
        NumberError: If no digits start at ``pos`` or the value exceeds
            the signed 64-bit range.
        UnitError: If the digits are not followed by a unit token.
    """
    _check_position(text, pos)
    end, error = _scan(text, pos, START_TERM)
    tree = parser.parse(text[pos:end], start=START_TERM)
    return ParseResult(TermBuilder(offset=pos).visit(tree), pos, end, error)


def parse_sequence(text: str, pos: int = 0) -> ParseResult[list[Term]]:
    """Parse one or more terms, each optionally followed by a single space.

    Parsing stops at the first position where no further term can be
    read; the remaining input is left for the caller. Two consecutive
    spaces are not a separator, so the second one ends the sequence.

    Raises:
        SequenceError: If not even one term could be parsed. The failure
            of that first term is available as ``wrapped``.
    """
    _check_position(text, pos)
    try:
        end, error = _scan(text, pos, START_SEQUENCE)
    except DurationParseError as exc:
        raise SequenceError(
            ERR_MSG_EMPTY_SEQUENCE,
            f"no duration term at offset {pos} in {text!r}: {exc.internal()}",
            wrapped=exc,
            position=exc.position,
        ) from exc

    tree = parser.parse(text[pos:end], start=START_SEQUENCE)
    builder = TermBuilder(offset=pos)
    terms: list[Term] = []
    for child in tree.children:
        try:
            terms.append(builder.visit(child))
        except NumberError as exc:
            # An out-of-range term ends the sequence like any other bad term.
            if not terms:
                raise SequenceError(
                    ERR_MSG_EMPTY_SEQUENCE,
                    f"no duration term at offset {pos} in {text!r}: {exc.internal()}",
                    wrapped=exc,
                    position=exc.position,
                ) from exc
            return ParseResult(terms, pos, exc.position, exc)
    return ParseResult(terms, pos, end, error)
