"""
Pure HTML exporter for attributed strings. No I/O.

Each run becomes a ``<span>`` carrying its font and color as inline CSS;
newlines become ``<br>``.
"""

from __future__ import annotations

import html
from typing import Any, List, Mapping, Optional

from rich.color import Color

from ..attributed_string import FONT, FOREGROUND_COLOR, AttributedString
from ..fonts import Font, css_font_stack
from .options import HtmlOptions


def _color_css(color: Optional[Color]) -> Optional[str]:
    if color is None or color.is_default:
        return None
    return f"color:{color.get_truecolor().hex}"


def _preserve_leading_ws(line: str, tab_width: int) -> str:
    esc = html.escape(line)
    prefix: List[str] = []
    k = 0
    for ch in line:
        if ch == " ":
            prefix.append("&nbsp;")
        elif ch == "\t":
            prefix.append("&nbsp;" * tab_width)
        else:
            break
        k += 1
    if prefix:
        esc = "".join(prefix) + esc[k:]
    return esc


def _escape(text: str, options: HtmlOptions) -> str:
    lines = text.split("\n")
    if options.preserve_leading_whitespace:
        out = [_preserve_leading_ws(line, options.tab_width) for line in lines]
    else:
        out = [html.escape(line) for line in lines]
    return "<br>".join(out)


# Font weights run 0-15 with 5 as regular and 9 as bold.
_CSS_WEIGHTS = (100, 100, 200, 300, 400, 400, 500, 500, 600, 700, 800)


def _weight_css(font: Font) -> Optional[str]:
    index = max(font.weight, 0)
    weight = _CSS_WEIGHTS[index] if index < len(_CSS_WEIGHTS) else 900
    if weight == 400:
        return None
    return f"font-weight:{weight}"


def _run_css(attributes: Mapping[str, Any], options: HtmlOptions) -> List[str]:
    styles: List[str] = []
    font = attributes.get(FONT)
    if isinstance(font, Font):
        if options.include_font:
            styles.append(f"font-family:{css_font_stack(font)}")
            styles.append(options.size_css(font.size))
        weight = _weight_css(font)
        if weight:
            styles.append(weight)
        if font.italic:
            styles.append("font-style:italic")
    color = _color_css(attributes.get(FOREGROUND_COLOR))
    if color:
        styles.append(color)
    return styles


def render_fragment(value: AttributedString, options: Optional[HtmlOptions] = None) -> str:
    """Render ``value`` to an HTML fragment."""
    options = options or HtmlOptions()
    fragments: List[str] = []
    for run in value.runs:
        body = _escape(run.text, options)
        font = run.attributes.get(FONT)
        if isinstance(font, Font) and font.monospace and options.code_tags:
            body = f"{options.code_tags[0]}{body}{options.code_tags[1]}"
        styles = _run_css(run.attributes, options)
        if styles:
            # Single quotes keep quoted font-family names intact.
            fragments.append(f"<span style='{'; '.join(styles)}'>{body}</span>")
        else:
            fragments.append(body)
    return "".join(fragments)


def render_page(
    title: str, html_fragment: str, options: Optional[HtmlOptions] = None
) -> str:
    """Wrap an HTML fragment in a standalone page."""
    options = options or HtmlOptions()
    return (
        '<!doctype html><meta charset="utf-8">'
        f'<meta name="color-scheme" content="{html.escape(options.color_scheme)}">'
        f"<title>{html.escape(title)}</title>"
        "<style>"
        "body{font-family:-apple-system,BlinkMacSystemFont,Segoe UI,Roboto,Helvetica,Arial,sans-serif;line-height:1.4;background:#fff;color:#000}"
        "code{font-family:inherit}"
        "@media (prefers-color-scheme: dark){"
        "body{background:#111;color:#eee}"
        "}"
        f'{options.extra_css}</style><div class="attributed-content">{html_fragment}</div>'
    )
