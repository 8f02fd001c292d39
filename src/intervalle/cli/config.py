"""Config command - inspect configuration."""

import rich_click as click
from rich.console import Console
from rich.syntax import Syntax

from intervalle.cli.main import Context, pass_context
from intervalle.core.config import find_config_file

console = Console()


@click.group()
def config_cmd() -> None:
    """Inspect configuration."""
    pass


@config_cmd.command("show")
@pass_context
def show(ctx: Context) -> None:
    """Show current configuration."""
    config_path = ctx.config_path or find_config_file()

    if config_path is None:
        console.print("[yellow]No configuration file found[/yellow]")
        console.print("Using default settings")
        console.print("\nSearch locations:")
        console.print("  1. ./intervalle.toml")
        console.print("  2. ./pyproject.toml \\[tool.intervalle]")
        console.print("  3. <git root>/intervalle.toml")
        console.print("  4. ~/.config/intervalle/config.toml")
        return

    console.print(f"[bold]Config file:[/bold] {config_path}")
    console.print()

    content = config_path.read_text()
    syntax = Syntax(content, "toml", theme="monokai", line_numbers=True)
    console.print(syntax)


@config_cmd.command("path")
@pass_context
def path(ctx: Context) -> None:
    """Show path to active configuration file."""
    config_path = ctx.config_path or find_config_file()

    if config_path:
        console.print(str(config_path))
    else:
        console.print("[yellow]No configuration file found[/yellow]")
