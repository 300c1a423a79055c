"""
Fragments: nodes that render themselves into attributed strings.

Every fragment exposes ``render(environment)`` and returns an ordered list of
``AttributedString`` pieces. Plain strings, attributed strings, ``rich`` texts
and lists are accepted anywhere a fragment is expected and coerced with
``as_fragment``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, List, Optional, Sequence, Tuple, Union

from rich.text import Text

from .attributed_string import AttributedString
from .attributes import Attributes, ColorLike, Environment, parse_color
from .rendering.rich_text import from_rich_text

if TYPE_CHECKING:  # pragma: no cover - import for type checking only
    from .joined import Joined

FragmentLike = Union["Fragment", str, AttributedString, Text, Sequence[Any]]


class Fragment(ABC):
    """Base class for everything that can be rendered to attributed text."""

    @abstractmethod
    def render(self, environment: Environment) -> List[AttributedString]: ...

    # ─── Modifiers ──────────────────────────────────────────────────────────
    def modify(self, modify: Callable[[Attributes], None]) -> "Modify":
        """Wrap in a modifier that mutates a copy of the ambient attributes."""
        return Modify(modify, self)

    def bold(self, value: bool = True) -> "Modify":
        def _apply(attributes: Attributes) -> None:
            attributes.bold = value

        return Modify(_apply, self)

    def italic(self, value: bool = True) -> "Modify":
        def _apply(attributes: Attributes) -> None:
            attributes.italic = value

        return Modify(_apply, self)

    def foreground_color(self, color: ColorLike) -> "Modify":
        parsed = parse_color(color)

        def _apply(attributes: Attributes) -> None:
            attributes.foreground_color = parsed

        return Modify(_apply, self)

    def font_family(self, family: str) -> "Modify":
        def _apply(attributes: Attributes) -> None:
            attributes.family = family

        return Modify(_apply, self)

    def font_size(self, size: float) -> "Modify":
        def _apply(attributes: Attributes) -> None:
            attributes.size = size

        return Modify(_apply, self)

    def font_weight(self, weight: int) -> "Modify":
        def _apply(attributes: Attributes) -> None:
            attributes.weight = weight

        return Modify(_apply, self)

    # ─── Joining ────────────────────────────────────────────────────────────
    def joined(self, separator: FragmentLike = "\n") -> "Joined":
        from .joined import Joined

        return Joined(self, separator=separator)

    def run(self, environment: Optional[Environment] = None) -> AttributedString:
        """Flatten this fragment into one attributed string with no separators."""
        from .joined import Joined

        return Joined(self, separator="").single(environment or Environment())


class Plain(Fragment):
    """A string drawn with the ambient attributes."""

    def __init__(self, text: str):
        self.text = text

    def render(self, environment: Environment) -> List[AttributedString]:
        return [AttributedString(self.text, environment.resolve())]

    def __repr__(self) -> str:
        return f"Plain({self.text!r})"


class Attributed(Fragment):
    """An attributed string whose attributes are already fixed."""

    def __init__(self, value: AttributedString):
        self.value = value

    def render(self, environment: Environment) -> List[AttributedString]:
        return [self.value]

    def __repr__(self) -> str:
        return f"Attributed({self.value!r})"


class RichText(Fragment):
    """A pre-styled ``rich.text.Text``; its own spans decide the attributes."""

    def __init__(self, text: Text):
        self.text = text.copy()
        self.value = from_rich_text(self.text)

    def render(self, environment: Environment) -> List[AttributedString]:
        return [self.value]

    def __repr__(self) -> str:
        return f"RichText({self.text.plain!r})"


class Group(Fragment):
    """An ordered list of fragments rendered one after another."""

    def __init__(self, children: Sequence[FragmentLike] = ()):
        self.children: Tuple[Fragment, ...] = tuple(as_fragment(c) for c in children)

    def render(self, environment: Environment) -> List[AttributedString]:
        pieces: List[AttributedString] = []
        for child in self.children:
            pieces.extend(child.render(environment))
        return pieces

    def __len__(self) -> int:
        return len(self.children)

    def __repr__(self) -> str:
        return f"Group({list(self.children)!r})"


class Modify(Fragment):
    """Renders ``contents`` with a locally modified copy of the environment.

    Each nested modifier starts from the copy its parent already changed, so
    the modifier closest to the leaf has the last word on an attribute.
    """

    def __init__(self, modify: Callable[[Attributes], None], contents: FragmentLike):
        self.modify_attributes = modify
        self.contents = as_fragment(contents)

    def render(self, environment: Environment) -> List[AttributedString]:
        copy = environment.copy()
        self.modify_attributes(copy.attributes)
        return self.contents.render(copy)

    def __repr__(self) -> str:
        return f"Modify({self.contents!r})"


def as_fragment(value: FragmentLike) -> Fragment:
    """Coerce ``value`` into a ``Fragment``."""
    if isinstance(value, Fragment):
        return value
    if isinstance(value, str):
        return Plain(value)
    if isinstance(value, AttributedString):
        return Attributed(value)
    if isinstance(value, Text):
        return RichText(value)
    if isinstance(value, (list, tuple)):
        return Group(value)
    raise TypeError(f"cannot use {type(value).__name__} as a fragment")


def text(value: str) -> Plain:
    """Start a modifier chain from a plain string: ``text("Hi").bold()``."""
    return Plain(value)
