"""
Font resolution for attributed text.

Maps a requested (family, traits, weight, size) onto a concrete ``Font``. The
manager never fails: unknown families resolve to the fallback family and the
substitution is logged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Flag, auto
from typing import Dict, Iterable, List, Optional, Tuple

from rich.style import Style

LOGGER = logging.getLogger(__name__)

DEFAULT_FAMILY = "Helvetica"
DEFAULT_SIZE = 14.0
DEFAULT_WEIGHT = 5
BOLD_WEIGHT = 9
MIN_WEIGHT = 0
MAX_WEIGHT = 15


class FontTrait(Flag):
    NONE = 0
    BOLD = auto()
    ITALIC = auto()
    CONDENSED = auto()
    EXPANDED = auto()
    MONOSPACE = auto()


DEFAULT_FAMILIES: Tuple[str, ...] = (
    "Helvetica",
    "Helvetica Neue",
    "Arial",
    "Times New Roman",
    "Georgia",
    "Verdana",
    "Courier New",
    "Menlo",
    "Monaco",
    "Comic Sans MS",
)

_MONOSPACED_FAMILIES = {"courier new", "menlo", "monaco"}

# PostScript-style names seen in exported documents.
_ALIASES = {
    "helveticaneue": "Helvetica Neue",
    "arialmt": "Arial",
    "timesnewromanpsmt": "Times New Roman",
    "couriernewpsmt": "Courier New",
    "comicsansms": "Comic Sans MS",
}


@dataclass(frozen=True)
class Font:
    """A concrete font produced by ``FontManager.font``."""

    family: str
    size: float
    weight: int
    traits: FontTrait = FontTrait.NONE

    @property
    def bold(self) -> bool:
        return FontTrait.BOLD in self.traits

    @property
    def italic(self) -> bool:
        return FontTrait.ITALIC in self.traits

    @property
    def monospace(self) -> bool:
        return FontTrait.MONOSPACE in self.traits

    def to_style(self) -> Style:
        """Return the terminal style that carries this font's face and metrics."""
        return Style(
            bold=self.bold,
            italic=self.italic,
            meta={"font_family": self.family, "font_size": float(self.size)},
        )


class FontManager:
    """Resolves font requests against a set of known families."""

    _shared: Optional["FontManager"] = None

    def __init__(
        self,
        families: Optional[Iterable[str]] = None,
        fallback_family: str = DEFAULT_FAMILY,
    ):
        self._families: Dict[str, str] = {}
        for name in DEFAULT_FAMILIES if families is None else families:
            self._families[name.lower()] = name
        self._cache: Dict[Tuple[str, FontTrait, int, float], Font] = {}
        resolved = self._lookup(fallback_family)
        if resolved is None:
            self._families[fallback_family.lower()] = fallback_family
            resolved = fallback_family
        self.fallback_family = resolved

    @classmethod
    def shared(cls) -> "FontManager":
        """Return the process-wide manager with the default families."""
        if cls._shared is None:
            cls._shared = cls()
        return cls._shared

    def available_families(self) -> List[str]:
        return sorted(self._families.values(), key=str.lower)

    def register_family(self, family: str) -> None:
        self._families[family.lower()] = family
        self._cache.clear()
        LOGGER.debug("fonts.register family=%s", family)

    def _lookup(self, family: str) -> Optional[str]:
        key = family.lower()
        if key in self._families:
            return self._families[key]
        alias = _ALIASES.get(key.replace(" ", "").replace("-", ""))
        if alias and alias.lower() in self._families:
            return self._families[alias.lower()]
        return None

    def font(
        self,
        family: str,
        traits: FontTrait = FontTrait.NONE,
        weight: int = DEFAULT_WEIGHT,
        size: float = DEFAULT_SIZE,
    ) -> Font:
        key = (family, traits, weight, size)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        resolved = self._lookup(family)
        if resolved is None:
            LOGGER.debug(
                "fonts.resolve.fallback family=%s -> %s", family, self.fallback_family
            )
            resolved = self.fallback_family

        if size <= 0:
            LOGGER.debug("fonts.resolve.bad_size size=%s -> %s", size, DEFAULT_SIZE)
            size = DEFAULT_SIZE
        weight = max(MIN_WEIGHT, min(MAX_WEIGHT, int(weight)))

        font_traits = traits
        if FontTrait.BOLD in traits:
            weight = max(weight, BOLD_WEIGHT)
        if resolved.lower() in _MONOSPACED_FAMILIES:
            font_traits |= FontTrait.MONOSPACE

        result = Font(family=resolved, size=float(size), weight=weight, traits=font_traits)
        self._cache[key] = result
        return result


_FONT_STACKS = {
    "Comic Sans MS": [
        '"Comic Sans MS"',
        '"Comic Sans"',
        '"Chalkboard SE"',
        '"Comic Neue"',
        "cursive",
    ],
    "Helvetica": ["Helvetica", "Arial", "sans-serif"],
    "Helvetica Neue": ['"Helvetica Neue"', "Helvetica", "Arial", "sans-serif"],
    "Arial": ["Arial", "Helvetica", "sans-serif"],
    "Times New Roman": ['"Times New Roman"', "Times", "serif"],
    "Courier New": ['"Courier New"', "Courier", "monospace"],
    "Menlo": ["Menlo", "Monaco", '"Courier New"', "monospace"],
}


def css_font_stack(font: Font) -> str:
    """Return a CSS ``font-family`` value with sensible generic fallbacks."""
    stack = _FONT_STACKS.get(font.family)
    if stack:
        return ", ".join(stack)
    safe = font.family.replace('"', "'")
    lower = font.family.lower()
    generic = "sans-serif"
    if font.monospace or "mono" in lower or "courier" in lower or "code" in lower:
        generic = "monospace"
    elif "serif" in lower or "times" in lower or "georgia" in lower:
        generic = "serif"
    elif "comic" in lower or "chalk" in lower or "hand" in lower:
        generic = "cursive"
    return f'"{safe}", {generic}'
