"""Settings and output helpers shared by the CLI commands."""

import logging
from typing import Any, Dict, Optional

import typer
from rich.console import Console

from pyattributed.attributed_string import AttributedString
from pyattributed.config import BuilderSettings
from pyattributed.rendering.html_export import render_fragment, render_page


def configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


def load_settings(
    config_path: Optional[str] = None,
    family: Optional[str] = None,
    size: Optional[float] = None,
) -> BuilderSettings:
    """Load settings from a file (or the environment) and apply CLI overrides."""
    if config_path:
        settings = BuilderSettings.from_file(config_path)
    else:
        settings = BuilderSettings.from_env()
    if family is None and size is None:
        return settings

    data: Dict[str, Any] = settings.model_dump()
    if family is not None:
        data["style"]["family"] = family
    if size is not None:
        data["style"]["size"] = size
    return BuilderSettings.load(data)


def emit(console: Console, value: AttributedString, html: bool, title: str) -> None:
    """Print ``value`` to the terminal, or as an HTML page when ``html`` is set."""
    if html:
        typer.echo(render_page(title, render_fragment(value)))
    else:
        console.print(value)
