"""
Markdown collaborator backed by markdown-it-py.

``markdown()`` parses eagerly and raises ``ParseError`` on bad input, so a
malformed document is reported to the caller instead of surfacing halfway
through a render. The resulting fragment styles its runs relative to the
ambient environment and always renders to a single piece.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from markdown_it import MarkdownIt
from markdown_it.token import Token

from ..attributed_string import AttributedString, Run
from ..attributes import Environment
from ..exceptions import ParseError
from ..fragments import Fragment
from .highlighting import DEFAULT_CODE_FAMILY

LOGGER = logging.getLogger(__name__)

_PARSER = MarkdownIt("commonmark").enable("strikethrough")

HEADING_SCALES = {1: 2.0, 2: 1.5, 3: 1.25}
BULLET = "• "


@dataclass(frozen=True)
class Span:
    text: str
    bold: bool = False
    italic: bool = False
    code: bool = False
    scale: float = 1.0


Block = List[Span]


def _inline_spans(children: Optional[Sequence[Token]], heading: Optional[int]) -> Block:
    spans: Block = []
    strong = em = 0
    scale = HEADING_SCALES.get(heading, 1.0) if heading else 1.0
    for child in children or ():
        kind = child.type
        if kind == "strong_open":
            strong += 1
        elif kind == "strong_close":
            strong -= 1
        elif kind == "em_open":
            em += 1
        elif kind == "em_close":
            em -= 1
        elif kind in ("s_open", "s_close"):
            # No strikethrough attribute; only the markers are dropped.
            continue
        elif kind in ("text", "html_inline", "image", "code_inline", "softbreak", "hardbreak"):
            if kind == "softbreak":
                content = " "
            elif kind == "hardbreak":
                content = "\n"
            else:
                content = child.content
            spans.append(
                Span(
                    content,
                    bold=strong > 0 or heading is not None,
                    italic=em > 0,
                    code=kind == "code_inline",
                    scale=scale,
                )
            )
    return spans


def parse_blocks(source: str) -> List[Block]:
    """Parse ``source`` into blocks of styled spans, one block per line group."""
    blocks: List[Block] = []
    lists: List[List[Optional[int]]] = []
    heading: Optional[int] = None
    prefix = ""

    def _add(block: Block) -> None:
        nonlocal prefix
        if prefix:
            block.insert(0, Span(prefix))
            prefix = ""
        blocks.append(block)

    for token in _PARSER.parse(source):
        kind = token.type
        if kind == "heading_open":
            heading = int(token.tag[1:])
        elif kind == "heading_close":
            heading = None
        elif kind == "bullet_list_open":
            lists.append([None])
        elif kind == "ordered_list_open":
            lists.append([int(token.attrGet("start") or 1)])
        elif kind in ("bullet_list_close", "ordered_list_close"):
            lists.pop()
        elif kind == "list_item_open" and lists:
            current = lists[-1]
            indent = "  " * (len(lists) - 1)
            if current[0] is None:
                prefix = indent + BULLET
            else:
                prefix = f"{indent}{current[0]}. "
                current[0] += 1
        elif kind == "list_item_close" and prefix:
            # Empty item: keep its marker on a line of its own.
            prefix = prefix.rstrip()
            _add([])
        elif kind == "inline":
            _add(_inline_spans(token.children, heading))
        elif kind in ("fence", "code_block"):
            _add([Span(token.content.rstrip("\n"), code=True)])
        elif kind == "html_block":
            _add([Span(token.content.rstrip("\n"))])
        elif kind == "hr":
            _add([Span("—" * 3)])
    return blocks


class MarkdownFragment(Fragment):
    """Parsed markdown, rendered as one attributed string."""

    def __init__(self, blocks: List[Block], code_family: str = DEFAULT_CODE_FAMILY):
        self.blocks = blocks
        self.code_family = code_family

    def _run(self, span: Span, environment: Environment) -> Run:
        attributes = environment.attributes.copy()
        if span.bold:
            attributes.bold = True
        if span.italic:
            attributes.italic = True
        if span.code:
            attributes.family = self.code_family
        if span.scale != 1.0:
            attributes.size = attributes.size * span.scale
        return Run(span.text, attributes.resolve(environment.font_manager))

    def render(self, environment: Environment) -> List[AttributedString]:
        runs: List[Run] = []
        for index, block in enumerate(self.blocks):
            if index:
                runs.append(Run("\n", environment.resolve()))
            runs.extend(self._run(span, environment) for span in block)
        return [AttributedString.from_runs(runs)]

    def __repr__(self) -> str:
        return f"MarkdownFragment(blocks={len(self.blocks)})"


def markdown(
    source: Union[str, bytes], *, code_family: str = DEFAULT_CODE_FAMILY
) -> MarkdownFragment:
    """Parse ``source`` into a fragment, raising ``ParseError`` when it can't."""
    if isinstance(source, (bytes, bytearray)):
        try:
            source = bytes(source).decode("utf-8")
        except UnicodeDecodeError as exc:
            LOGGER.debug("services.markdown.decode_fail %s", exc)
            raise ParseError("markdown source is not valid UTF-8", source) from exc
    if not isinstance(source, str):
        raise ParseError(
            f"markdown source must be str or bytes, not {type(source).__name__}"
        )
    try:
        blocks = parse_blocks(source)
    except Exception as exc:
        LOGGER.debug("services.markdown.parse_fail %s", exc)
        raise ParseError(f"could not parse markdown: {exc}", source) from exc
    LOGGER.debug("services.markdown.parsed blocks=%d", len(blocks))
    return MarkdownFragment(blocks, code_family=code_family)
