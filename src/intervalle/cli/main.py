"""Main CLI entry point using rich-click."""

import logging
from pathlib import Path
from typing import Optional

import rich_click as click
from rich.console import Console
from rich.logging import RichHandler

from intervalle.core.config import IntervalleConfig, load_config

# Configure rich-click
click.rich_click.SHOW_ARGUMENTS = True

# Global console for Rich output
console = Console()


# Context object to pass state between commands
class Context:
    def __init__(self) -> None:
        self.config_path: Optional[Path] = None
        self.verbose: bool = False
        self._config: Optional[IntervalleConfig] = None

    @property
    def config(self) -> IntervalleConfig:
        """Configuration from --config, or auto-discovered (loaded once)."""
        if self._config is None:
            self._config = load_config(self.config_path)
        return self._config


pass_context = click.make_pass_decorator(Context, ensure=True)


@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Enable verbose output",
)
@click.version_option(package_name="intervalle")
@pass_context
def cli(ctx: Context, config: Optional[Path], verbose: bool) -> None:
    """Time filter parser.

    Turn compact timespecs such as today, 15:28, -15:28 or
    +2024-08-08 14:10 into a point in time or an open bound.
    """
    ctx.config_path = config
    ctx.verbose = verbose

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


# Import and register subcommands
from intervalle.cli.config import config_cmd
from intervalle.cli.parse import check, parse

cli.add_command(parse)
cli.add_command(check)
cli.add_command(config_cmd, name="config")


def main() -> None:
    """Entry point for console script."""
    cli()


if __name__ == "__main__":
    main()
