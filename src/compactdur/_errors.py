"""Exception hierarchy for compact duration parsing and rendering."""

from __future__ import annotations


class DurationError(Exception):
    """Base exception for compact duration errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class DurationParseError(DurationError):
    """Raised when duration text does not match the grammar.

    ``position`` is the offset into the input at which parsing failed.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
        *,
        position: int = 0,
    ) -> None:
        super().__init__(user_message, internal_details, wrapped)
        self.position = position


class UnitError(DurationParseError):
    """Raised when no unit token matches at the current position."""


class NumberError(DurationParseError):
    """Raised when a digit run is missing or exceeds the 64-bit range."""


class SequenceError(DurationParseError):
    """Raised when no term was parsed or input remains after a full parse."""


class InvalidDurationError(DurationError):
    """Raised when a duration value cannot be rendered."""


class DurationOverflowError(DurationError):
    """Raised when aggregated terms exceed the backend's range."""


class DecompositionInvariantError(DurationError):
    """Raised when decomposition leaves a non-zero remainder.

    Indicates a defect in a backend, never bad user input.
    """


# Sanitized user-facing error message constants
ERR_MSG_EXPECTED_UNIT = "expected a duration unit"
ERR_MSG_EXPECTED_NUMBER = "expected a number"
ERR_MSG_NUMBER_TOO_LARGE = "number too large"
ERR_MSG_EMPTY_SEQUENCE = "expected at least one duration term"
ERR_MSG_TRAILING_INPUT = "unexpected trailing input"
ERR_MSG_INPUT_TOO_LONG = "duration text too long"
ERR_MSG_NEGATIVE_DURATION = "negative durations cannot be rendered"
ERR_MSG_SUB_MILLISECOND = "durations finer than a millisecond cannot be rendered"
ERR_MSG_UNSUPPORTED_VALUE = "unsupported duration value"
ERR_MSG_DURATION_OVERFLOW = "duration out of range"
ERR_MSG_DECOMPOSITION_FAILED = "duration decomposition failed"
