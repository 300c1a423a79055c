"""
Conversion between ``AttributedString`` and ``rich.text.Text``.

``rich`` is the host rendering API: terminal output goes through
``to_rich_text``. Font family and size cannot be shown in a terminal, so they
travel in ``Style.meta`` and survive a round trip through ``from_rich_text``.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Union

from rich.errors import StyleSyntaxError
from rich.style import Style
from rich.text import Text

from ..attributed_string import FONT, FOREGROUND_COLOR, AttributedString, Run
from ..attributes import Attributes
from ..fonts import Font, FontManager

LOGGER = logging.getLogger(__name__)


def _run_style(attributes: Mapping[str, Any]) -> Style:
    font = attributes.get(FONT)
    style = font.to_style() if isinstance(font, Font) else Style()
    color = attributes.get(FOREGROUND_COLOR)
    if color is not None and not color.is_default:
        style += Style(color=color)
    return style


def to_rich_text(value: AttributedString) -> Text:
    """Return a ``rich`` text with one span per run of ``value``."""
    text = Text()
    for run in value.runs:
        text.append(run.text, style=_run_style(run.attributes))
    return text


def _as_style(style: Union[str, Style]) -> Style:
    if isinstance(style, Style):
        return style
    try:
        return Style.parse(style)
    except StyleSyntaxError:
        # Theme names such as "repr.number" need a console to resolve.
        LOGGER.debug("rendering.rich_text.unresolved_style style=%s", style)
        return Style.null()


def _apply_style(attributes: Attributes, style: Style) -> None:
    if style.bold is not None:
        attributes.bold = style.bold
    if style.italic is not None:
        attributes.italic = style.italic
    if style.color is not None and not style.color.is_default:
        attributes.foreground_color = style.color
    meta = style.meta
    if "font_family" in meta:
        attributes.family = str(meta["font_family"])
    if "font_size" in meta:
        attributes.size = float(meta["font_size"])


def from_rich_text(
    text: Text,
    attributes: Optional[Attributes] = None,
    font_manager: Optional[FontManager] = None,
) -> AttributedString:
    """Build an attributed string from ``text`` and its spans.

    ``attributes`` supplies everything the text's styles leave unset; it
    defaults to ``Attributes()``, never to an ambient render context.
    """
    base = attributes or Attributes()
    plain = text.plain
    if not plain:
        return AttributedString()

    base_style = _as_style(text.style)
    spans = [
        (max(0, span.start), min(len(plain), span.end), _as_style(span.style))
        for span in text.spans
        if span.end > span.start
    ]
    bounds = sorted({0, len(plain)} | {s for s, _, _ in spans} | {e for _, e, _ in spans})

    runs: List[Run] = []
    for start, end in zip(bounds, bounds[1:]):
        if start >= end:
            continue
        style = base_style
        for span_start, span_end, span_style in spans:
            if span_start <= start and span_end >= end:
                style = style + span_style
        run_attributes = base.copy()
        _apply_style(run_attributes, style)
        runs.append(Run(plain[start:end], run_attributes.resolve(font_manager)))
    return AttributedString.from_runs(runs)
