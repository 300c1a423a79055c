"""Declarative builder for composing attributed (styled) text."""

from .attributed_string import (
    FONT,
    FOREGROUND_COLOR,
    AttributedString,
    MutableAttributedString,
    Run,
)
from .attributes import Attributes, Environment
from .builder import build, composed, each, optional
from .exceptions import AttributedError, ConfigError, HighlightError, ParseError
from .fonts import Font, FontManager, FontTrait
from .fragments import (
    Attributed,
    Fragment,
    Group,
    Modify,
    Plain,
    RichText,
    as_fragment,
    text,
)
from .joined import Joined, join, run
from .services import highlight, markdown

__all__ = [
    "FONT",
    "FOREGROUND_COLOR",
    "AttributedString",
    "MutableAttributedString",
    "Run",
    "Attributes",
    "Environment",
    "Font",
    "FontManager",
    "FontTrait",
    "Fragment",
    "Plain",
    "Attributed",
    "RichText",
    "Group",
    "Modify",
    "Joined",
    "as_fragment",
    "text",
    "build",
    "optional",
    "each",
    "composed",
    "join",
    "run",
    "highlight",
    "markdown",
    "AttributedError",
    "ParseError",
    "HighlightError",
    "ConfigError",
]
