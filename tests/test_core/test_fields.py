"""Tests for intervalle.core.fields."""

from datetime import datetime, time

import pytest

from intervalle.core.exceptions import ParseErrorKind, TimeSpecParseError
from intervalle.core.fields import (
    Backtrack,
    Cursor,
    read_date,
    read_fixed_digits,
    read_time,
)


class TestCursor:
    """Tests for Cursor.fail()."""

    def test_fail_backtracks_by_default(self):
        cursor = Cursor("15:28")
        cursor.pos = 2
        failure = cursor.fail("expected ':'", ParseErrorKind.MISSING_DELIMITER)
        assert isinstance(failure, Backtrack)
        assert failure.error.offset == 2

    def test_fail_committed_is_parse_error(self):
        cursor = Cursor("2024-13")
        failure = cursor.fail(
            "invalid month 13", ParseErrorKind.CALENDAR_RANGE, at=5, committed=True
        )
        assert isinstance(failure, TimeSpecParseError)
        assert failure.offset == 5
        assert failure.kind is ParseErrorKind.CALENDAR_RANGE


class TestReadFixedDigits:
    """Tests for read_fixed_digits()."""

    def test_exact_count(self):
        cursor = Cursor("2024-")
        assert read_fixed_digits(cursor, 4) == 2024
        assert cursor.pos == 4

    def test_leading_zeros(self):
        cursor = Cursor("08")
        assert read_fixed_digits(cursor, 2) == 8

    @pytest.mark.parametrize("text", ["1", "123", "", "ab"])
    def test_wrong_count_backtracks(self, text):
        cursor = Cursor(text)
        with pytest.raises(Backtrack) as exc_info:
            read_fixed_digits(cursor, 2)

        error = exc_info.value.error
        assert error.kind is ParseErrorKind.DIGIT_COUNT
        assert error.description == "expected 2 digits"
        assert error.offset == 0
        assert cursor.pos == 0

    def test_committed_failure_is_hard(self):
        cursor = Cursor("12:3", pos=3)
        with pytest.raises(TimeSpecParseError) as exc_info:
            read_fixed_digits(cursor, 2, committed=True)
        assert exc_info.value.offset == 3


class TestReadDate:
    """Tests for read_date()."""

    def test_valid_date_at_midnight(self):
        cursor = Cursor("2024-08-08 14:10")
        assert read_date(cursor) == datetime(2024, 8, 8)
        assert cursor.pos == 10

    def test_short_year_backtracks(self):
        with pytest.raises(Backtrack):
            read_date(Cursor("15:28"))

    def test_missing_first_delimiter_backtracks(self):
        with pytest.raises(Backtrack) as exc_info:
            read_date(Cursor("2024/08/08"))
        assert exc_info.value.error.offset == 4
        assert exc_info.value.error.kind is ParseErrorKind.MISSING_DELIMITER

    def test_commits_after_first_delimiter(self):
        with pytest.raises(TimeSpecParseError) as exc_info:
            read_date(Cursor("2024-0808"))
        assert exc_info.value.offset == 5
        assert exc_info.value.kind is ParseErrorKind.DIGIT_COUNT

    @pytest.mark.parametrize(
        "text,offset",
        [
            ("2024-00-10", 5),
            ("2024-13-10", 5),
            ("2024-04-31", 8),
            ("2024-01-00", 8),
            ("1900-02-29", 8),
        ],
    )
    def test_calendar_range(self, text, offset):
        with pytest.raises(TimeSpecParseError) as exc_info:
            read_date(Cursor(text))
        assert exc_info.value.kind is ParseErrorKind.CALENDAR_RANGE
        assert exc_info.value.offset == offset

    def test_invalid_month_message(self):
        with pytest.raises(TimeSpecParseError) as exc_info:
            read_date(Cursor("2024-13-01"))
        assert exc_info.value.description == "invalid month 13 (expected 01-12)"

    def test_century_leap_year(self):
        assert read_date(Cursor("2000-02-29")) == datetime(2000, 2, 29)


class TestReadTime:
    """Tests for read_time()."""

    def test_hours_minutes(self):
        cursor = Cursor("15:28")
        assert read_time(cursor) == time(15, 28, 0)
        assert cursor.at_end()

    def test_hours_minutes_seconds(self):
        assert read_time(Cursor("15:27:59")) == time(15, 27, 59)

    def test_stops_before_unrelated_text(self):
        cursor = Cursor("15:28 x")
        assert read_time(cursor) == time(15, 28)
        assert cursor.pos == 5

    def test_wrong_width_backtracks(self):
        with pytest.raises(Backtrack) as exc_info:
            read_time(Cursor("1528"))
        assert exc_info.value.error.offset == 0

    def test_missing_delimiter_backtracks(self):
        with pytest.raises(Backtrack) as exc_info:
            read_time(Cursor("15-28"))
        assert exc_info.value.error.offset == 2
        assert exc_info.value.error.kind is ParseErrorKind.MISSING_DELIMITER

    def test_committed_from_start(self):
        with pytest.raises(TimeSpecParseError) as exc_info:
            read_time(Cursor("x"), committed=True)
        assert exc_info.value.kind is ParseErrorKind.DIGIT_COUNT

    @pytest.mark.parametrize(
        "text,offset",
        [("24:00", 0), ("23:60", 3), ("23:59:60", 6)],
    )
    def test_out_of_range(self, text, offset):
        with pytest.raises(TimeSpecParseError) as exc_info:
            read_time(Cursor(text))
        assert exc_info.value.kind is ParseErrorKind.CALENDAR_RANGE
        assert exc_info.value.offset == offset
