"""External collaborators: syntax highlighting and markdown parsing."""

from .highlighting import highlight, stylesheets
from .markdown import MarkdownFragment, markdown

__all__ = ["highlight", "stylesheets", "markdown", "MarkdownFragment"]
