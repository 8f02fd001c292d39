"""Tests for intervalle.core.diagnostic."""

from datetime import datetime

import pytest

from intervalle.core.diagnostic import format_diagnostic
from intervalle.core.exceptions import TimeSpecParseError
from intervalle.core.grammar import parse_with_anchor


class TestFormatDiagnostic:
    """Tests for format_diagnostic()."""

    def test_caret_under_offset(self):
        message = format_diagnostic("2024-13-01", 5, "invalid month 13 (expected 01-12)")
        assert message.splitlines() == [
            "    |",
            "  5 | 2024-13-01",
            "    |      ^ invalid month 13 (expected 01-12)",
        ]

    def test_offset_zero(self):
        lines = format_diagnostic("abc", 0, "expected something").splitlines()
        assert lines[1] == "  0 | abc"
        assert lines[2] == "    | ^ expected something"

    def test_offset_at_end(self):
        lines = format_diagnostic("15:28:", 6, "expected 2 digits").splitlines()
        assert lines[2] == "    |       ^ expected 2 digits"
        assert lines[2].index("^") == lines[1].index("15:28:") + 6

    def test_offset_past_end_clamped(self):
        lines = format_diagnostic("ab", 10, "expected more").splitlines()
        assert lines[1] == " 10 | ab"
        assert lines[2].index("^") == lines[1].index("ab") + 2

    def test_empty_input(self):
        lines = format_diagnostic("", 0, "expected input").splitlines()
        assert lines[2] == "    | ^ expected input"

    def test_multiline_description_flattened(self):
        message = format_diagnostic("x", 0, "first\nsecond")
        assert "^ first, second" in message
        assert len(message.splitlines()) == 3


class TestParseErrorRendering:
    """str() of a parse failure is the caret diagnostic."""

    def test_str_is_diagnostic(self):
        with pytest.raises(TimeSpecParseError) as exc_info:
            parse_with_anchor("-2024-08-08 25:00", datetime(2023, 11, 11))

        error = exc_info.value
        lines = str(error).splitlines()
        assert lines[1] == " 12 | -2024-08-08 25:00"
        assert lines[2].index("^") == lines[1].index("-2024") + 12
        assert lines[2].endswith("^ invalid hour 25 (expected 00-23)")

    def test_input_preserved(self):
        with pytest.raises(TimeSpecParseError) as exc_info:
            parse_with_anchor("yesterdays", datetime(2023, 11, 11))
        assert exc_info.value.text == "yesterdays"
        assert "unexpected trailing input" in str(exc_info.value)
