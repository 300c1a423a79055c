"""Command modules for the pyattributed CLI."""

# Import all command modules here for easy access
from pyattributed.cli.commands import code, fonts, markdown

# Explicitly define what's exported
__all__ = ["code", "fonts", "markdown"]
