"""
Pydantic settings for building and rendering attributed text.

Settings can come from keyword arguments, a JSON file, or ``PYATTRIBUTED_*``
environment variables. Anything that fails validation is reported as a
``ConfigError``.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from rich.color import Color, ColorParseError

from .attributed_string import AttributedString
from .attributes import Attributes, Environment
from .exceptions import ConfigError
from .fonts import DEFAULT_FAMILY, DEFAULT_SIZE, DEFAULT_WEIGHT, FontManager
from .fragments import FragmentLike
from .joined import Joined
from .services.highlighting import DEFAULT_CODE_FAMILY, DEFAULT_STYLESHEET

LOGGER = logging.getLogger(__name__)

ENV_PREFIX = "PYATTRIBUTED_"


# ─── Base and Shared Config ──────────────────────────────────────────────────
class ConfigModel(BaseModel):
    """Base class: population by name, unknown keys rejected."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class StyleSettings(ConfigModel):
    """Root attributes for a render pass."""

    family: str = DEFAULT_FAMILY
    """Font family name."""

    size: float = Field(DEFAULT_SIZE, gt=0)
    """Point size."""

    weight: int = Field(DEFAULT_WEIGHT, ge=0, le=15)
    """Font weight on the 0-15 scale (5 regular, 9 bold)."""

    bold: bool = False
    italic: bool = False

    foreground_color: Optional[str] = Field(None, alias="color")
    """Any color ``rich`` can parse; ``None`` keeps the default text color."""

    @field_validator("foreground_color")
    @classmethod
    def _check_color(cls, v):
        if v is None:
            return v
        try:
            Color.parse(v)
        except ColorParseError as exc:
            raise ValueError(str(exc)) from exc
        return v

    def to_attributes(self) -> Attributes:
        attributes = Attributes(family=self.family, size=self.size, weight=self.weight)
        attributes.bold = self.bold
        attributes.italic = self.italic
        if self.foreground_color is not None:
            attributes.foreground_color = Color.parse(self.foreground_color)
        return attributes


class BuilderSettings(ConfigModel):
    """Everything the CLI and callers need to set up an environment."""

    style: StyleSettings = Field(default_factory=StyleSettings)
    separator: str = "\n"
    code_stylesheet: str = DEFAULT_STYLESHEET
    code_family: str = DEFAULT_CODE_FAMILY
    fallback_family: str = DEFAULT_FAMILY
    extra_families: List[str] = Field(default_factory=list)

    def font_manager(self) -> FontManager:
        manager = FontManager(fallback_family=self.fallback_family)
        for family in self.extra_families:
            manager.register_family(family)
        return manager

    def environment(self) -> Environment:
        return Environment(
            attributes=self.style.to_attributes(), font_manager=self.font_manager()
        )

    def join(self, content: FragmentLike) -> AttributedString:
        """Render ``content`` to one string with ``separator`` between its pieces."""
        return Joined(content, separator=self.separator).single(self.environment())

    @classmethod
    def load(cls, data: Mapping[str, Any]) -> "BuilderSettings":
        try:
            return cls.model_validate(dict(data))
        except ValidationError as exc:
            LOGGER.error("Settings validation failed.")
            raise ConfigError(f"invalid settings: {exc}") from exc

    @classmethod
    def from_file(cls, path: str) -> "BuilderSettings":
        """Load settings from a JSON file."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            LOGGER.error("Failed to read settings from %s", path)
            raise ConfigError(f"could not read settings file {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError(f"settings file {path} must contain a JSON object")
        LOGGER.debug("config.from_file path=%s keys=%s", path, sorted(data))
        return cls.load(data)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "BuilderSettings":
        """Build settings from ``PYATTRIBUTED_*`` variables; unset ones keep defaults."""
        env = os.environ if environ is None else environ
        style: Dict[str, Any] = {}
        data: Dict[str, Any] = {}
        for name, key in (
            ("FAMILY", "family"),
            ("SIZE", "size"),
            ("WEIGHT", "weight"),
            ("COLOR", "color"),
        ):
            value = env.get(ENV_PREFIX + name)
            if value is not None:
                style[key] = value
        for name, key in (
            ("SEPARATOR", "separator"),
            ("CODE_STYLESHEET", "code_stylesheet"),
            ("CODE_FAMILY", "code_family"),
            ("FALLBACK_FAMILY", "fallback_family"),
        ):
            value = env.get(ENV_PREFIX + name)
            if value is not None:
                data[key] = value
        if style:
            data["style"] = style
        return cls.load(data)
