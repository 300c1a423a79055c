#!/usr/bin/env python
"""Command Line Interface for pyattributed."""

import typer

from pyattributed.cli.commands import code, fonts, markdown

app = typer.Typer(help="Render attributed text from markdown and source files")

app.command("markdown")(markdown.render_markdown)
app.command("code")(code.render_code)
app.command("fonts")(fonts.list_fonts)


@app.callback()
def callback():
    """Render markdown and source files as attributed text."""
    pass


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
