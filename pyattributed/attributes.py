"""
Ambient style context threaded through a render pass.

``Attributes`` describes how a leaf fragment is drawn; ``Environment`` carries
them (plus the font manager) down the fragment tree. Modifiers always work on
a copy, never on the environment they received.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional, Union

from rich.color import Color

from .attributed_string import FONT, FOREGROUND_COLOR
from .fonts import DEFAULT_FAMILY, DEFAULT_SIZE, DEFAULT_WEIGHT, FontManager, FontTrait

ColorLike = Union[Color, str]


def parse_color(color: ColorLike) -> Color:
    """Accept a rich ``Color`` or anything ``Color.parse`` understands."""
    if isinstance(color, Color):
        return color
    return Color.parse(color)


@dataclass
class Attributes:
    family: str = DEFAULT_FAMILY
    size: float = DEFAULT_SIZE
    traits: FontTrait = FontTrait.NONE
    weight: int = DEFAULT_WEIGHT
    foreground_color: Color = field(default_factory=Color.default)

    def _set_trait(self, trait: FontTrait, value: bool) -> None:
        if value:
            self.traits = self.traits | trait
        else:
            self.traits = self.traits & ~trait

    @property
    def bold(self) -> bool:
        return FontTrait.BOLD in self.traits

    @bold.setter
    def bold(self, value: bool) -> None:
        self._set_trait(FontTrait.BOLD, value)

    @property
    def italic(self) -> bool:
        return FontTrait.ITALIC in self.traits

    @italic.setter
    def italic(self, value: bool) -> None:
        self._set_trait(FontTrait.ITALIC, value)

    def copy(self) -> "Attributes":
        return replace(self)

    def resolve(self, font_manager: Optional[FontManager] = None) -> Dict[str, Any]:
        """Return the concrete attribute map for a run drawn in this style."""
        fm = font_manager or FontManager.shared()
        font = fm.font(self.family, self.traits, self.weight, self.size)
        return {FONT: font, FOREGROUND_COLOR: self.foreground_color}


@dataclass
class Environment:
    attributes: Attributes = field(default_factory=Attributes)
    font_manager: Optional[FontManager] = None

    def copy(self) -> "Environment":
        return replace(self, attributes=self.attributes.copy())

    def resolve(self) -> Dict[str, Any]:
        return self.attributes.resolve(self.font_manager)
