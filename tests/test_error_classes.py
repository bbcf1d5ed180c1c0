"""Error class hierarchy tests."""

import pytest

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


class TestDurationErrorBase:
    def test_str_returns_user_message(self):
        err = DurationError("user msg", "internal detail")
        assert str(err) == "user msg"

    def test_internal_returns_details(self):
        err = DurationError("user msg", "internal detail")
        assert err.internal() == "internal detail"

    def test_internal_defaults_to_user_message(self):
        err = DurationError("same message")
        assert err.internal() == "same message"

    def test_wrapped_exception(self):
        cause = ValueError("root cause")
        err = DurationError("user msg", wrapped=cause)
        assert err.wrapped is cause

    def test_is_exception(self):
        assert isinstance(DurationError("test"), Exception)


class TestParseErrors:
    PARSE_ERROR_CLASSES = [UnitError, NumberError, SequenceError]

    @pytest.mark.parametrize("cls", PARSE_ERROR_CLASSES)
    def test_is_parse_error(self, cls):
        assert issubclass(cls, DurationParseError)

    @pytest.mark.parametrize("cls", PARSE_ERROR_CLASSES)
    def test_carries_position(self, cls):
        err = cls("bad input", "detail", position=7)
        assert err.position == 7
        assert str(err) == "bad input"

    def test_position_defaults_to_zero(self):
        assert DurationParseError("bad input").position == 0


class TestErrorHierarchy:
    ALL_ERROR_CLASSES = [
        DurationParseError,
        UnitError,
        NumberError,
        SequenceError,
        InvalidDurationError,
        DurationOverflowError,
        DecompositionInvariantError,
    ]

    @pytest.mark.parametrize("cls", ALL_ERROR_CLASSES)
    def test_is_subclass_of_duration_error(self, cls):
        assert issubclass(cls, DurationError)

    @pytest.mark.parametrize("cls", ALL_ERROR_CLASSES)
    def test_instantiation(self, cls):
        err = cls("test message", "internal detail")
        assert str(err) == "test message"
        assert err.internal() == "internal detail"

    @pytest.mark.parametrize("cls", ALL_ERROR_CLASSES)
    def test_is_catchable_as_duration_error(self, cls):
        with pytest.raises(DurationError):
            raise cls("test")

    def test_defect_is_not_a_parse_error(self):
        assert not issubclass(DecompositionInvariantError, DurationParseError)
