"""Custom exceptions for intervalle."""

from __future__ import annotations

from enum import Enum


class ParseErrorKind(Enum):
    """Why a timespec was rejected."""

    DIGIT_COUNT = "digit count"  # Wrong number of digits in a field
    MISSING_DELIMITER = "missing delimiter"  # Expected '-', ':', ' ' or keyword
    CALENDAR_RANGE = "calendar range"  # Well-formed digits, illegal value
    NO_ALTERNATIVE = "no alternative"  # Nothing matched at the decision point
    TRAILING_INPUT = "trailing input"  # Matched, but characters remain


class IntervalleError(Exception):
    """Base exception for intervalle."""


class ConfigError(IntervalleError):
    """Error in configuration."""


class TimeSpecParseError(IntervalleError, ValueError):
    """A timespec string could not be parsed.

    Carries the description of what was expected, the untouched input and
    the 0-based offset at which matching diverged. ``str()`` renders the
    caret diagnostic.
    """

    def __init__(
        self,
        description: str,
        text: str,
        offset: int,
        kind: ParseErrorKind,
    ) -> None:
        self.description = description
        self.text = text
        self.offset = offset
        self.kind = kind
        super().__init__(description)

    def __str__(self) -> str:
        from intervalle.core.diagnostic import format_diagnostic

        return format_diagnostic(self.text, self.offset, self.description)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.description!r}, {self.text!r}, "
            f"{self.offset}, {self.kind})"
        )
