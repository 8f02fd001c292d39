"""Core parsing and configuration for intervalle."""

from .exceptions import ConfigError, IntervalleError, ParseErrorKind, TimeSpecParseError
from .grammar import parse, parse_with_anchor
from .timespec import After, Before, Modifier, Point, TimeSpec

__all__ = [
    # Exceptions
    "ConfigError",
    "IntervalleError",
    "ParseErrorKind",
    "TimeSpecParseError",
    # Parsing
    "parse",
    "parse_with_anchor",
    # Types
    "TimeSpec",
    "Point",
    "After",
    "Before",
    "Modifier",
]
