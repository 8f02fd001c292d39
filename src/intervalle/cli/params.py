"""Click parameter types for timespec values."""

from __future__ import annotations

from datetime import datetime
from typing import Any

import rich_click as click

from intervalle.core.anchor import local_now
from intervalle.core.config import get_config
from intervalle.core.exceptions import ConfigError, TimeSpecParseError
from intervalle.core.grammar import parse_with_anchor
from intervalle.core.timespec import TimeSpec

# Formats accepted for --anchor and for moments passed to ``check``
DATETIME_FORMATS = ["%Y-%m-%d %H:%M:%S", "%Y-%m-%d %H:%M", "%Y-%m-%d"]


class TimeSpecParam(click.ParamType):
    """Convert a command-line value into a :class:`TimeSpec`.

    Relative forms resolve against the command's ``anchor`` parameter when
    one was given (declare it eager so it is converted first), otherwise
    against the current local time for the configured UTC offset.
    """

    name = "timespec"

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> TimeSpec:
        if isinstance(value, TimeSpec):
            return value

        try:
            anchor = self._anchor(ctx)
        except ConfigError as e:
            self.fail(str(e), param, ctx)

        try:
            return parse_with_anchor(value, anchor)
        except TimeSpecParseError as e:
            self.fail(f"\n{e}", param, ctx)

    @staticmethod
    def _anchor(ctx: click.Context | None) -> datetime:
        if ctx is not None:
            anchor = ctx.params.get("anchor")
            if anchor is not None:
                return anchor

        from intervalle.cli.main import Context

        state = ctx.find_object(Context) if ctx is not None else None
        config = state.config if state is not None else get_config()
        return local_now(config.utc_offset())


TIMESPEC = TimeSpecParam()
