"""
HTML export configuration.

Centralizes behavior flags so callers can tune defaults without touching the
exporter. All fields have working defaults.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class HtmlOptions:
    # Emit font-family/font-size on every span. Turning this off leaves
    # typography to the page stylesheet.
    include_font: bool = True

    # Unit appended to font sizes ("pt" or "px").
    font_size_unit: str = "pt"

    # Keep runs of leading spaces/tabs visible on each line.
    preserve_leading_whitespace: bool = True
    tab_width: int = 4

    # Page-level
    color_scheme: str = "light dark"
    extra_css: str = ""

    # Monospaced runs are wrapped in <code> as well as styled.
    code_tags: Tuple[str, str] = ("<code>", "</code>")

    def size_css(self, size: float) -> str:
        unit = self.font_size_unit if self.font_size_unit in ("pt", "px") else "pt"
        return f"font-size:{size:g}{unit}"
