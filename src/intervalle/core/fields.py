"""Fixed-width digit tokens and the date/time field builders.

Every reader works on a :class:`Cursor` and either advances it past what it
matched or raises. Before a field's distinguishing delimiter has matched a
failure is soft (:class:`Backtrack`), so the grammar may try its next
alternative. Past that point it is hard (:class:`TimeSpecParseError`).
"""

from __future__ import annotations

import calendar
from datetime import MAXYEAR, MINYEAR, datetime, time

from intervalle.core.exceptions import ParseErrorKind, TimeSpecParseError

_DIGITS = frozenset("0123456789")


class Backtrack(Exception):
    """Soft failure: this alternative did not match, try the next one."""

    def __init__(self, error: TimeSpecParseError) -> None:
        self.error = error
        super().__init__(error.description)


class Cursor:
    """Read position over a timespec string."""

    __slots__ = ("text", "pos")

    def __init__(self, text: str, pos: int = 0) -> None:
        self.text = text
        self.pos = pos

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def startswith(self, literal: str) -> bool:
        return self.text.startswith(literal, self.pos)

    def take(self, literal: str) -> bool:
        """Consume *literal* if it comes next."""
        if self.startswith(literal):
            self.pos += len(literal)
            return True
        return False

    def take_digits(self) -> str:
        """Consume the maximal run of ASCII digits (possibly empty)."""
        end = self.pos
        while end < len(self.text) and self.text[end] in _DIGITS:
            end += 1
        run = self.text[self.pos:end]
        self.pos = end
        return run

    def fail(
        self,
        description: str,
        kind: ParseErrorKind,
        *,
        at: int | None = None,
        committed: bool = False,
    ) -> TimeSpecParseError | Backtrack:
        """Build the failure to raise at *at* (default: current position)."""
        error = TimeSpecParseError(
            description,
            self.text,
            self.pos if at is None else at,
            kind,
        )
        return error if committed else Backtrack(error)


def read_fixed_digits(cursor: Cursor, count: int, *, committed: bool = False) -> int:
    """Read exactly *count* ASCII digits as an unsigned integer.

    A shorter, longer or missing run fails where the run began.
    """
    start = cursor.pos
    run = cursor.take_digits()
    if len(run) != count:
        cursor.pos = start
        raise cursor.fail(
            f"expected {count} digits",
            ParseErrorKind.DIGIT_COUNT,
            committed=committed,
        )
    return int(run)


def expect(cursor: Cursor, literal: str, label: str, *, committed: bool = False) -> None:
    """Consume *literal* or fail with a missing-delimiter error."""
    if not cursor.take(literal):
        raise cursor.fail(
            f"expected {literal!r} ({label})",
            ParseErrorKind.MISSING_DELIMITER,
            committed=committed,
        )


def _out_of_range(cursor: Cursor, description: str, at: int) -> TimeSpecParseError:
    return cursor.fail(
        description,
        ParseErrorKind.CALENDAR_RANGE,
        at=at,
        committed=True,
    )


def read_date(cursor: Cursor, *, committed: bool = False) -> datetime:
    """Read ``YYYY-MM-DD`` and return that date at midnight.

    Commits once the ``-`` after the year has matched.
    """
    year_at = cursor.pos
    year = read_fixed_digits(cursor, 4, committed=committed)
    expect(cursor, "-", "date delimiter", committed=committed)

    if not MINYEAR <= year <= MAXYEAR:
        raise _out_of_range(
            cursor, f"invalid year {year:04d} (expected {MINYEAR:04d}-{MAXYEAR:04d})", year_at
        )

    month_at = cursor.pos
    month = read_fixed_digits(cursor, 2, committed=True)
    if not 1 <= month <= 12:
        raise _out_of_range(cursor, f"invalid month {month:02d} (expected 01-12)", month_at)

    expect(cursor, "-", "date delimiter", committed=True)

    day_at = cursor.pos
    day = read_fixed_digits(cursor, 2, committed=True)
    last_day = calendar.monthrange(year, month)[1]
    if not 1 <= day <= last_day:
        raise _out_of_range(
            cursor,
            f"invalid day {day:02d} for {year:04d}-{month:02d} (expected 01-{last_day:02d})",
            day_at,
        )

    return datetime(year, month, day)


def read_time(cursor: Cursor, *, committed: bool = False) -> time:
    """Read ``HH:MM`` or ``HH:MM:SS``; seconds default to 0.

    Commits once the ``:`` after the hour has matched. The optional seconds
    group is only entered when its ``:`` is present.
    """
    hour_at = cursor.pos
    hour = read_fixed_digits(cursor, 2, committed=committed)
    expect(cursor, ":", "time delimiter", committed=committed)

    if hour > 23:
        raise _out_of_range(cursor, f"invalid hour {hour:02d} (expected 00-23)", hour_at)

    minute_at = cursor.pos
    minute = read_fixed_digits(cursor, 2, committed=True)
    if minute > 59:
        raise _out_of_range(cursor, f"invalid minute {minute:02d} (expected 00-59)", minute_at)

    second = 0
    if cursor.take(":"):
        second_at = cursor.pos
        second = read_fixed_digits(cursor, 2, committed=True)
        if second > 59:
            raise _out_of_range(
                cursor, f"invalid second {second:02d} (expected 00-59)", second_at
            )

    return time(hour, minute, second)
