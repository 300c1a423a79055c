"""Exceptions raised at the collaborator boundaries of pyattributed."""

from __future__ import annotations

from typing import Optional, Union


class AttributedError(Exception):
    """Base class for all pyattributed errors."""


class ParseError(AttributedError):
    """Markdown source could not be parsed into a fragment."""

    def __init__(self, message: str, source: Optional[Union[str, bytes]] = None):
        super().__init__(message)
        self.source = source


class HighlightError(AttributedError):
    """The syntax highlighter was asked for a stylesheet it does not know."""

    def __init__(self, message: str, stylesheet: Optional[str] = None):
        super().__init__(message)
        self.stylesheet = stylesheet


class ConfigError(AttributedError):
    """Settings could not be loaded or validated."""
