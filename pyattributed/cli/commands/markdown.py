"""Markdown command for the pyattributed CLI."""

import os
from typing import List, Optional

import typer
from rich.console import Console

from pyattributed.cli.utils.settings import configure_logging, emit, load_settings
from pyattributed.exceptions import AttributedError
from pyattributed.services.markdown import markdown

console = Console()


def render_markdown(
    paths: List[str] = typer.Argument(..., help="Markdown files to render"),
    html: bool = typer.Option(False, "--html", help="Write an HTML page to stdout"),
    title: Optional[str] = typer.Option(None, help="Page title for --html"),
    config: Optional[str] = typer.Option(None, "--config", help="JSON settings file"),
    family: Optional[str] = typer.Option(None, help="Base font family"),
    size: Optional[float] = typer.Option(None, help="Base font size in points"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Render markdown files, joined by the configured separator."""
    configure_logging(verbose)
    try:
        settings = load_settings(config, family, size)
        documents = []
        for path in paths:
            with open(path, "rb") as f:
                documents.append(markdown(f.read(), code_family=settings.code_family))
        value = settings.join(documents)
    except (AttributedError, OSError) as e:
        console.print(f"[bold red]Error:[/bold red] {str(e)}")
        raise typer.Exit(1)

    emit(console, value, html, title or os.path.basename(paths[0]))
