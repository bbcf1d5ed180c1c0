"""Term and sequence parser tests."""

import pytest

from compactdur import (
    NumberError,
    SequenceError,
    Term,
    Unit,
    UnitError,
    parse_sequence,
    parse_term,
)
from compactdur._constants import INT64_MAX


def _pairs(terms):
    return [(term.value, term.unit) for term in terms]


class TestParseTerm:
    @pytest.mark.parametrize(
        "text, unit",
        [
            ("1MS", Unit.MILLISECONDS),
            ("1ms", Unit.MILLISECONDS),
            ("1S", Unit.SECONDS),
            ("1m", Unit.MINUTES),
            ("1H", Unit.HOURS),
            ("1D", Unit.DAYS),
            ("1M", Unit.MONTHS),
            ("1W", Unit.WEEK),
            ("1Y", Unit.YEAR),
        ],
    )
    def test_each_unit(self, text, unit):
        result = parse_term(text)
        assert result.value == Term(1, unit)
        assert result.end == len(text)

    def test_multi_digit(self):
        assert parse_term("250ms").value == Term(250, Unit.MILLISECONDS)

    def test_leading_zeros(self):
        assert parse_term("007S").value == Term(7, Unit.SECONDS)

    def test_zero(self):
        assert parse_term("0S").value == Term(0, Unit.SECONDS)

    def test_does_not_consume_separator(self):
        result = parse_term("1MS 2S")
        assert result.value == Term(1, Unit.MILLISECONDS)
        assert result.end == 3
        assert isinstance(result.error, SequenceError)

    def test_from_position(self):
        result = parse_term("1MS2S", 3)
        assert result.value == Term(2, Unit.SECONDS)
        assert (result.start, result.end) == (3, 5)

    def test_int64_max(self):
        assert parse_term(f"{INT64_MAX}S").value == Term(INT64_MAX, Unit.SECONDS)

    def test_overflow(self):
        with pytest.raises(NumberError, match="number too large") as exc_info:
            parse_term(f"{INT64_MAX + 1}S")
        assert exc_info.value.position == 0

    def test_overflow_position_is_absolute(self):
        with pytest.raises(NumberError) as exc_info:
            parse_term(f"1S{INT64_MAX + 1}S", 2)
        assert exc_info.value.position == 2

    def test_missing_digits(self):
        with pytest.raises(NumberError) as exc_info:
            parse_term("MS")
        assert exc_info.value.position == 0

    def test_sign_rejected(self):
        with pytest.raises(NumberError) as exc_info:
            parse_term("-1S")
        assert exc_info.value.position == 0

    def test_missing_unit(self):
        with pytest.raises(UnitError) as exc_info:
            parse_term("12")
        assert exc_info.value.position == 2

    def test_unknown_unit(self):
        with pytest.raises(UnitError) as exc_info:
            parse_term("12X")
        assert exc_info.value.position == 2

    def test_space_before_unit(self):
        with pytest.raises(UnitError) as exc_info:
            parse_term("1 S")
        assert exc_info.value.position == 1


class TestParseSequence:
    def test_single_term(self):
        assert _pairs(parse_sequence("1MS").value) == [(1, Unit.MILLISECONDS)]

    def test_no_separators(self):
        result = parse_sequence("1ms2S3H")
        assert _pairs(result.value) == [
            (1, Unit.MILLISECONDS),
            (2, Unit.SECONDS),
            (3, Unit.HOURS),
        ]
        assert result.end == 7
        assert result.error is None

    def test_single_space_separators(self):
        result = parse_sequence("1MS 2S")
        assert _pairs(result.value) == [(1, Unit.MILLISECONDS), (2, Unit.SECONDS)]
        assert result.end == 6

    def test_mixed_separators(self):
        result = parse_sequence("1W 2D3H 4m")
        assert _pairs(result.value) == [
            (1, Unit.WEEK),
            (2, Unit.DAYS),
            (3, Unit.HOURS),
            (4, Unit.MINUTES),
        ]

    def test_duplicate_units_kept(self):
        result = parse_sequence("1S1S")
        assert _pairs(result.value) == [(1, Unit.SECONDS), (1, Unit.SECONDS)]

    def test_trailing_single_space_consumed(self):
        result = parse_sequence("1MS ")
        assert result.end == 4
        assert result.error is None

    def test_double_space_stops_sequence(self):
        result = parse_sequence("1MS  2S")
        assert _pairs(result.value) == [(1, Unit.MILLISECONDS)]
        assert result.end == 4
        assert isinstance(result.error, NumberError)
        assert result.error.position == 4

    def test_stops_at_garbage(self):
        result = parse_sequence("1S2Sabc")
        assert _pairs(result.value) == [(1, Unit.SECONDS), (2, Unit.SECONDS)]
        assert result.end == 4
        assert result.error.position == 4

    def test_stops_at_digits_without_unit(self):
        result = parse_sequence("1S23")
        assert _pairs(result.value) == [(1, Unit.SECONDS)]
        assert result.end == 2
        assert isinstance(result.error, UnitError)
        assert result.error.position == 4

    def test_overflowing_term_ends_sequence(self):
        result = parse_sequence(f"1S {INT64_MAX + 1}MS")
        assert _pairs(result.value) == [(1, Unit.SECONDS)]
        assert result.end == 3
        assert isinstance(result.error, NumberError)

    def test_from_position(self):
        result = parse_sequence("xx1S2m", 2)
        assert _pairs(result.value) == [(1, Unit.SECONDS), (2, Unit.MINUTES)]
        assert (result.start, result.end) == (2, 6)

    def test_empty_input(self):
        with pytest.raises(SequenceError) as exc_info:
            parse_sequence("")
        assert isinstance(exc_info.value.wrapped, NumberError)
        assert exc_info.value.position == 0

    def test_leading_space(self):
        with pytest.raises(SequenceError) as exc_info:
            parse_sequence(" 1S")
        assert exc_info.value.position == 0

    def test_no_term(self):
        with pytest.raises(SequenceError, match="at least one"):
            parse_sequence("abc")

    def test_first_term_overflows(self):
        with pytest.raises(SequenceError) as exc_info:
            parse_sequence(f"{INT64_MAX + 1}S")
        assert isinstance(exc_info.value.wrapped, NumberError)
