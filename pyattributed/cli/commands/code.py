"""Syntax highlighting command for the pyattributed CLI."""

import os
from typing import Optional

import typer
from rich.console import Console
from rich.syntax import Syntax

from pyattributed.cli.utils.settings import configure_logging, emit, load_settings
from pyattributed.exceptions import AttributedError
from pyattributed.services.highlighting import highlight

console = Console()


def render_code(
    path: str = typer.Argument(..., help="Source file to highlight"),
    lexer: Optional[str] = typer.Option(
        None, help="Pygments lexer name (guessed from the filename by default)"
    ),
    stylesheet: Optional[str] = typer.Option(None, help="Highlighting stylesheet"),
    html: bool = typer.Option(False, "--html", help="Write an HTML page to stdout"),
    title: Optional[str] = typer.Option(None, help="Page title for --html"),
    config: Optional[str] = typer.Option(None, "--config", help="JSON settings file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Highlight a source file."""
    configure_logging(verbose)
    try:
        settings = load_settings(config)
        with open(path, "r", encoding="utf-8") as f:
            source = f.read()
        value = highlight(
            source,
            lexer or Syntax.guess_lexer(path, source),
            stylesheet or settings.code_stylesheet,
            family=settings.code_family,
            size=settings.style.size,
            font_manager=settings.font_manager(),
        )
    except (AttributedError, OSError, UnicodeDecodeError) as e:
        console.print(f"[bold red]Error:[/bold red] {str(e)}")
        raise typer.Exit(1)

    emit(console, value, html, title or os.path.basename(path))
