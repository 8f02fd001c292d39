"""Anchor-relative date resolution and the local time source."""

from __future__ import annotations

import logging
from datetime import datetime, time, timedelta, tzinfo

from intervalle.core.types import Anchor, Instant

logger = logging.getLogger(__name__)

_ONE_DAY = timedelta(days=1)


def civil(anchor: Anchor) -> Instant:
    """Drop any tzinfo, keeping the anchor's wall-clock fields."""
    return anchor.replace(tzinfo=None)


def today(anchor: Anchor) -> Instant:
    """The anchor's date at midnight."""
    return datetime.combine(anchor.date(), time())


def yesterday(anchor: Anchor) -> Instant:
    """One calendar day before the anchor's date, at midnight.

    Raises:
        OverflowError: If the anchor is on the first supported day.
    """
    return today(anchor) - _ONE_DAY


def tomorrow(anchor: Anchor) -> Instant:
    """One calendar day after the anchor's date, at midnight.

    Raises:
        OverflowError: If the anchor is on the last supported day.
    """
    return today(anchor) + _ONE_DAY


def on_anchor_date(anchor: Anchor, wall_clock: time) -> Instant:
    """Carry the anchor's date over, replacing its time of day."""
    return datetime.combine(anchor.date(), wall_clock)


def local_now(utc_offset: tzinfo | None = None) -> Anchor:
    """Current civil time, without tzinfo.

    Args:
        utc_offset: An already-resolved fixed offset. When None, the system's
            local zone is used.
    """
    if utc_offset is None:
        now = datetime.now().astimezone()
    else:
        now = datetime.now(utc_offset)
    logger.debug(f"Resolved anchor {now.isoformat()}")
    return civil(now)
