"""Font listing command for the pyattributed CLI."""

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from pyattributed.cli.utils.settings import load_settings
from pyattributed.exceptions import AttributedError

console = Console()


def list_fonts(
    config: Optional[str] = typer.Option(None, "--config", help="JSON settings file"),
):
    """List the font families the resolver knows about."""
    try:
        settings = load_settings(config)
    except AttributedError as e:
        console.print(f"[bold red]Error:[/bold red] {str(e)}")
        raise typer.Exit(1)

    manager = settings.font_manager()
    table = Table("Family", "Fallback")
    for family in manager.available_families():
        table.add_row(family, "yes" if family == manager.fallback_family else "")
    console.print(table)
