"""Parse and check commands - evaluate a timespec."""

import json
import sys
from datetime import datetime
from typing import Optional

import rich_click as click
from rich.console import Console
from rich.table import Table

from intervalle.cli.main import Context, pass_context
from intervalle.cli.params import DATETIME_FORMATS, TIMESPEC
from intervalle.core.exceptions import ConfigError
from intervalle.core.timespec import TimeSpec

console = Console()

# A leading '-' belongs to the timespec, so these commands take no short options
_TIMESPEC_SETTINGS = {"ignore_unknown_options": True}

_anchor_option = click.option(
    "--anchor",
    type=click.DateTime(formats=DATETIME_FORMATS),
    default=None,
    is_eager=True,
    help="Resolve relative forms against this instant instead of now",
)


@click.command(context_settings=_TIMESPEC_SETTINGS)
@click.argument("timespec", type=TIMESPEC)
@_anchor_option
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@pass_context
def parse(
    ctx: Context,
    timespec: TimeSpec,
    anchor: Optional[datetime],
    as_json: bool,
) -> None:
    """Parse a timespec.

    \b
    TIMESPEC is one of, optionally prefixed by + (after) or - (before):
        today | yesterday | tomorrow
        YYYY-MM-DD
        HH:MM[:SS]
        YYYY-MM-DD HH:MM[:SS]
    """
    try:
        fmt = "json" if as_json else ctx.config.output_format()
    except ConfigError as e:
        raise click.UsageError(str(e))

    if fmt == "json":
        click.echo(json.dumps(timespec.to_dict()))
        return

    table = Table(title=f"Timespec {timespec}")
    table.add_column("Property", style="cyan")
    table.add_column("Value")

    table.add_row("Kind", _kind_style(timespec))
    table.add_row("Instant", timespec.instant.isoformat(sep=" "))
    if anchor is not None:
        table.add_row("Anchor", anchor.isoformat(sep=" "))

    console.print(table)


@click.command(context_settings=_TIMESPEC_SETTINGS)
@click.argument("timespec", type=TIMESPEC)
@click.argument("moment", type=click.DateTime(formats=DATETIME_FORMATS))
@_anchor_option
def check(timespec: TimeSpec, moment: datetime, anchor: Optional[datetime]) -> None:
    """Check whether MOMENT satisfies TIMESPEC.

    Exits 0 when it does and 1 when it does not.
    """
    if timespec.admits(moment):
        console.print(f"[green]{moment} matches {timespec}[/green]")
        return

    console.print(f"[yellow]{moment} does not match {timespec}[/yellow]")
    sys.exit(1)


def _kind_style(timespec: TimeSpec) -> str:
    """Apply color to the variant name."""
    colors = {
        "Point": "[green]Point[/green]",
        "After": "[blue]After[/blue]",
        "Before": "[magenta]Before[/magenta]",
    }
    name = type(timespec).__name__
    return colors.get(name, name)
