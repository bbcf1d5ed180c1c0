"""compactdur - Parse and render compact duration text such as ``1ms2S3H``."""

from __future__ import annotations

__version__ = "0.1.0"

from compactdur._codec import (
    aggregate,
    decompose,
    deserialize,
    parse_terms,
    render,
    serialize,
)
from compactdur._errors import (
    DecompositionInvariantError,
    DurationError,
    DurationOverflowError,
    DurationParseError,
    InvalidDurationError,
    NumberError,
    SequenceError,
    UnitError,
)
from compactdur._parser import ParseResult, parse_sequence, parse_term, parse_unit
from compactdur._types import Term, Unit
from compactdur.backend import (
    DurationBackend,
    MillisecondsBackend,
    TimedeltaBackend,
    get_backend,
)
from compactdur.fields import CompactDuration, CompactMilliseconds

__all__ = [
    "aggregate",
    "decompose",
    "deserialize",
    "get_backend",
    "parse_sequence",
    "parse_term",
    "parse_terms",
    "parse_unit",
    "render",
    "serialize",
    "ParseResult",
    "Term",
    "Unit",
    "CompactDuration",
    "CompactMilliseconds",
    "DurationBackend",
    "MillisecondsBackend",
    "TimedeltaBackend",
    "DecompositionInvariantError",
    "DurationError",
    "DurationOverflowError",
    "DurationParseError",
    "InvalidDurationError",
    "NumberError",
    "SequenceError",
    "UnitError",
]
