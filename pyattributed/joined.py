"""
Joining rendered pieces into one attributed string.

The separator is rendered against the ambient environment handed to the
joiner, never against the environment of the pieces on either side of it.
"""

from __future__ import annotations

from typing import List, Optional

from .attributed_string import AttributedString, MutableAttributedString
from .attributes import Environment
from .fragments import Fragment, FragmentLike, as_fragment


class Joined(Fragment):
    """Renders ``content`` and glues its pieces together with ``separator``."""

    def __init__(self, content: FragmentLike, separator: FragmentLike = "\n"):
        self.content = as_fragment(content)
        self.separator = as_fragment(separator)

    def render(self, environment: Environment) -> List[AttributedString]:
        return [self.single(environment)]

    def single(self, environment: Environment) -> AttributedString:
        pieces = self.content.render(environment)
        if not pieces:
            return AttributedString()
        result = MutableAttributedString(pieces[0])
        if len(pieces) > 1:
            separator = self.separator.render(environment)
            for piece in pieces[1:]:
                for separator_piece in separator:
                    result.append(separator_piece)
                result.append(piece)
        return result.copy()

    def __repr__(self) -> str:
        return f"Joined({self.content!r}, separator={self.separator!r})"


def join(
    parts: FragmentLike,
    separator: FragmentLike = "\n",
    environment: Optional[Environment] = None,
) -> AttributedString:
    """Render ``parts`` and join the pieces with ``separator``."""
    return Joined(parts, separator=separator).single(environment or Environment())


def run(
    fragment: FragmentLike, environment: Optional[Environment] = None
) -> AttributedString:
    """Flatten ``fragment`` into a single attributed string with no separator."""
    return as_fragment(fragment).run(environment)
