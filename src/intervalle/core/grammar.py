"""Timespec grammar and public entry points.

Accepted forms, each optionally prefixed by ``+`` (after) or ``-`` (before)::

    today | yesterday | tomorrow
    YYYY-MM-DD HH:MM[:SS]
    YYYY-MM-DD
    HH:MM[:SS]

Productions are tried in that order and the first match wins.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, tzinfo

from intervalle.core import anchor as anchors
from intervalle.core.exceptions import ParseErrorKind, TimeSpecParseError
from intervalle.core.fields import Backtrack, Cursor, read_date, read_time
from intervalle.core.timespec import Modifier, TimeSpec
from intervalle.core.types import Anchor, Instant

logger = logging.getLogger(__name__)

Production = Callable[[Cursor, Anchor], Instant]

_KEYWORDS: dict[str, Callable[[Anchor], Instant]] = {
    "today": anchors.today,
    "yesterday": anchors.yesterday,
    "tomorrow": anchors.tomorrow,
}

_NO_ALTERNATIVE = (
    "expected 'today', 'yesterday', 'tomorrow', "
    "a date (YYYY-MM-DD) or a time (HH:MM[:SS])"
)


def _keyword(cursor: Cursor, anchor: Anchor) -> Instant:
    start = cursor.pos
    for word, resolve in _KEYWORDS.items():
        if cursor.take(word):
            try:
                return resolve(anchor)
            except OverflowError:
                raise cursor.fail(
                    f"{word!r} is outside the supported date range",
                    ParseErrorKind.CALENDAR_RANGE,
                    at=start,
                    committed=True,
                ) from None
    raise cursor.fail("expected a keyword", ParseErrorKind.MISSING_DELIMITER)


def _date_and_time(cursor: Cursor, anchor: Anchor) -> Instant:
    day = read_date(cursor)
    if not cursor.take(" "):
        raise cursor.fail("expected ' ' (date/time separator)", ParseErrorKind.MISSING_DELIMITER)
    return datetime.combine(day.date(), read_time(cursor, committed=True))


def _date(cursor: Cursor, anchor: Anchor) -> Instant:
    return read_date(cursor)


def _time(cursor: Cursor, anchor: Anchor) -> Instant:
    return anchors.on_anchor_date(anchor, read_time(cursor))


# Date-like productions come before time-only
PRODUCTIONS: tuple[Production, ...] = (_keyword, _date_and_time, _date, _time)


def _read_modifier(cursor: Cursor) -> Modifier:
    prefix = next((char for char in ("+", "-") if cursor.take(char)), None)
    return Modifier.from_prefix(prefix)


def _dispatch(cursor: Cursor, anchor: Anchor) -> Instant:
    """Try each production in order from the cursor's position.

    Soft failures rewind and move on. A hard failure propagates as is. When
    every production fails softly, the one that got furthest is reported.
    """
    start = cursor.pos
    furthest: TimeSpecParseError | None = None

    for production in PRODUCTIONS:
        cursor.pos = start
        try:
            return production(cursor, anchor)
        except Backtrack as miss:
            if furthest is None or miss.error.offset > furthest.offset:
                furthest = miss.error

    cursor.pos = start
    if furthest is not None and furthest.offset > start:
        raise furthest
    raise cursor.fail(_NO_ALTERNATIVE, ParseErrorKind.NO_ALTERNATIVE, committed=True)


def parse_with_anchor(text: str, anchor: Anchor) -> TimeSpec:
    """Parse *text*, resolving relative forms against *anchor*.

    Args:
        text: The timespec, e.g. ``"-15:28"`` or ``"+2024-08-08"``.
        anchor: Reference instant for ``today``/``yesterday``/``tomorrow``
            and bare times. Only its wall-clock fields are used.

    Returns:
        A :class:`Point`, :class:`After` or :class:`Before`.

    Raises:
        TimeSpecParseError: If *text* is not a valid timespec.
        TypeError: If *text* is not a string.
    """
    if not isinstance(text, str):
        raise TypeError(f"timespec must be a str, not {type(text).__name__}")

    anchor = anchors.civil(anchor)
    cursor = Cursor(text)
    try:
        modifier = _read_modifier(cursor)
        instant = _dispatch(cursor, anchor)
        if not cursor.at_end():
            raise cursor.fail(
                "unexpected trailing input",
                ParseErrorKind.TRAILING_INPUT,
                committed=True,
            )
    except TimeSpecParseError as e:
        logger.debug(f"Rejected timespec {text!r} at offset {e.offset}: {e.description}")
        raise

    return TimeSpec.from_modifier(modifier, instant)


def parse(text: str, *, utc_offset: tzinfo | None = None) -> TimeSpec:
    """Parse *text* against the current local time.

    Args:
        text: The timespec.
        utc_offset: Fixed offset to resolve "now" with; the system's local
            zone when None.
    """
    return parse_with_anchor(text, anchors.local_now(utc_offset))
