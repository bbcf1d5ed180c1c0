"""Pydantic field types that store durations as compact duration text.

Use them as annotations on model fields::

    class Job(BaseModel):
        timeout: CompactDuration

    Job.model_validate_json('{"timeout": "1m30S"}').timeout
    # datetime.timedelta(seconds=90)

Values are accepted as duration text (or as an already-typed value) and
always serialize back to canonical text, in both python and JSON modes.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import timedelta
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer, WithJsonSchema
from pydantic_core import PydanticCustomError

from compactdur._codec import decompose, deserialize, serialize
from compactdur._errors import DurationError, DurationParseError
from compactdur._types import UNIT_SPELLINGS
from compactdur.backend import DurationBackend, MillisecondsBackend, TimedeltaBackend

__all__ = ["CompactDuration", "CompactMilliseconds", "compact_duration_field"]

_UNIT_PATTERN = "|".join(
    re.escape(spelling)
    for spellings in UNIT_SPELLINGS.values()
    for spelling in sorted(spellings, key=len, reverse=True)
)

DURATION_TEXT_PATTERN = rf"^(([0-9]+({_UNIT_PATTERN}) ?)+)?$"
"""JSON Schema pattern matching a complete compact duration text.

The empty string is included: it is how the zero duration renders.
"""

_JSON_SCHEMA = {
    "type": "string",
    "pattern": DURATION_TEXT_PATTERN,
    "examples": ["1H30m", "2W3D", "500MS"],
}


def _reason(exc: DurationError) -> str:
    if isinstance(exc, DurationParseError):
        return f"{exc.user_message} at offset {exc.position}"
    return exc.user_message


def _invalid(text: str, exc: DurationError) -> PydanticCustomError:
    return PydanticCustomError(
        "compact_duration",
        "invalid compact duration '{text}': {reason}",
        {"text": text, "reason": _reason(exc)},
    )


def _make_validator(backend: DurationBackend) -> Callable[[Any], Any]:
    def validate(value: Any) -> Any:
        if backend.accepts(value):
            # Typed values must still be renderable, or dumping the model fails.
            try:
                decompose(value, backend)
            except DurationError as exc:
                raise _invalid(str(value), exc) from exc
            return value
        if not isinstance(value, str):
            raise PydanticCustomError(
                "compact_duration_type",
                "compact duration must be a string",
            )
        try:
            return deserialize(value, backend=backend)
        except DurationError as exc:
            raise _invalid(value, exc) from exc

    return validate


def _make_serializer(backend: DurationBackend) -> Callable[[Any], str]:
    def serialize_value(value: Any) -> str:
        return serialize(value, backend)

    return serialize_value


def compact_duration_field(python_type: type, backend: DurationBackend) -> Any:
    """Build an ``Annotated`` field type backed by ``backend``."""
    return Annotated[
        python_type,
        BeforeValidator(_make_validator(backend)),
        PlainSerializer(_make_serializer(backend), return_type=str),
        WithJsonSchema(_JSON_SCHEMA),
    ]


CompactDuration = compact_duration_field(timedelta, TimedeltaBackend())
"""``datetime.timedelta`` stored as compact duration text."""

CompactMilliseconds = compact_duration_field(int, MillisecondsBackend())
"""Integer millisecond count stored as compact duration text."""
