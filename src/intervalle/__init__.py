"""intervalle: parse compact time filters such as ``-15:28`` or ``+yesterday``."""

try:
    from intervalle._version import __version__
except ImportError:
    __version__ = "0.0.0.dev0"

from intervalle.core.config import IntervalleConfig, get_config, load_config, reload_config
from intervalle.core.diagnostic import format_diagnostic
from intervalle.core.exceptions import (
    ConfigError,
    IntervalleError,
    ParseErrorKind,
    TimeSpecParseError,
)
from intervalle.core.grammar import parse, parse_with_anchor
from intervalle.core.timespec import After, Before, Modifier, Point, TimeSpec

__all__ = [
    # Version
    "__version__",
    # Parsing
    "parse",
    "parse_with_anchor",
    "format_diagnostic",
    # Types
    "TimeSpec",
    "Point",
    "After",
    "Before",
    "Modifier",
    # Config
    "load_config",
    "get_config",
    "reload_config",
    "IntervalleConfig",
    # Exceptions
    "IntervalleError",
    "TimeSpecParseError",
    "ParseErrorKind",
    "ConfigError",
]
