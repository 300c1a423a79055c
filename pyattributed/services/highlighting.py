"""
Syntax highlighting collaborator.

Source code is tokenized by Pygments, colored with a ``rich.syntax`` theme and
returned as a pre-built attributed string; the result does not follow the
ambient environment of the tree it is placed in. The text is kept exactly as
given, tabs included.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name
from pygments.lexers.special import TextLexer
from pygments.styles import get_all_styles
from pygments.util import ClassNotFound
from rich.syntax import RICH_SYNTAX_THEMES, Syntax
from rich.text import Text

from ..attributed_string import AttributedString
from ..attributes import Attributes
from ..exceptions import HighlightError
from ..fonts import FontManager
from ..rendering.rich_text import from_rich_text

LOGGER = logging.getLogger(__name__)

DEFAULT_STYLESHEET = "monokai"
DEFAULT_CODE_FAMILY = "Menlo"


def stylesheets() -> List[str]:
    """Return every stylesheet name ``highlight`` accepts."""
    return sorted(set(get_all_styles()) | set(RICH_SYNTAX_THEMES))


def _lexer(name: str) -> Lexer:
    # tabsize=0 leaves tabs alone; stripnl=False keeps leading/trailing lines.
    try:
        return get_lexer_by_name(name, stripnl=False, ensurenl=True, tabsize=0)
    except ClassNotFound:
        LOGGER.debug("services.highlighting.unknown_lexer lexer=%s", name)
        return TextLexer(stripnl=False, ensurenl=True, tabsize=0)


def highlight(
    source: str,
    lexer: str = "python",
    stylesheet: str = DEFAULT_STYLESHEET,
    *,
    family: str = DEFAULT_CODE_FAMILY,
    size: float = 14.0,
    font_manager: Optional[FontManager] = None,
) -> AttributedString:
    """Return ``source`` highlighted with ``lexer`` using ``stylesheet``.

    An unknown lexer yields unhighlighted text in the code font. An unknown
    stylesheet raises ``HighlightError``.
    """
    if stylesheet not in stylesheets():
        raise HighlightError(f"unknown stylesheet: {stylesheet}", stylesheet=stylesheet)

    theme = Syntax.get_theme(stylesheet)
    text = Text()
    for token_type, value in _lexer(lexer).get_tokens(source):
        text.append(value, style=theme.get_style_for_token(token_type))
    # Pygments always terminates the last line.
    if not source.endswith("\n") and text.plain.endswith("\n"):
        text.right_crop(1)

    LOGGER.debug(
        "services.highlighting.done lexer=%s stylesheet=%s spans=%d",
        lexer,
        stylesheet,
        len(text.spans),
    )
    return from_rich_text(text, Attributes(family=family, size=size), font_manager)
