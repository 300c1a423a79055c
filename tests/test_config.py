"""Tests for pydantic settings."""

import json
import os
import tempfile
import unittest

from rich.color import Color

from pyattributed.attributed_string import FONT
from pyattributed.config import BuilderSettings, StyleSettings
from pyattributed.exceptions import ConfigError


class StyleSettingsTest(unittest.TestCase):
    """Tests for StyleSettings.to_attributes."""

    def test_defaults(self):
        attributes = StyleSettings().to_attributes()
        self.assertEqual(attributes.family, "Helvetica")
        self.assertEqual(attributes.size, 14.0)
        self.assertEqual(attributes.weight, 5)
        self.assertFalse(attributes.bold)
        self.assertTrue(attributes.foreground_color.is_default)

    def test_color_alias_and_traits(self):
        attributes = StyleSettings(color="#ff0000", bold=True, italic=True).to_attributes()
        self.assertEqual(attributes.foreground_color, Color.parse("#ff0000"))
        self.assertTrue(attributes.bold)
        self.assertTrue(attributes.italic)


class BuilderSettingsTest(unittest.TestCase):
    """Tests for loading BuilderSettings."""

    def test_load_rejects_bad_values(self):
        for data in (
            {"style": {"size": 0}},
            {"style": {"weight": 16}},
            {"style": {"color": "not a color"}},
            {"unknown": True},
        ):
            with self.assertRaises(ConfigError):
                BuilderSettings.load(data)

    def test_environment(self):
        settings = BuilderSettings.load(
            {
                "style": {"family": "Tiempos Text", "size": 20},
                "extra_families": ["Tiempos Text"],
            }
        )
        font = settings.environment().resolve()[FONT]
        self.assertEqual(font.family, "Tiempos Text")
        self.assertEqual(font.size, 20.0)

    def test_fallback_family(self):
        settings = BuilderSettings(fallback_family="Georgia")
        font = settings.environment().resolve()[FONT]
        self.assertEqual(font.family, "Helvetica")
        self.assertEqual(settings.font_manager().font("Unknown").family, "Georgia")

    def test_from_env(self):
        settings = BuilderSettings.from_env(
            {
                "PYATTRIBUTED_FAMILY": "Georgia",
                "PYATTRIBUTED_SIZE": "18",
                "PYATTRIBUTED_COLOR": "blue",
                "PYATTRIBUTED_CODE_STYLESHEET": "ansi_dark",
                "UNRELATED": "x",
            }
        )
        self.assertEqual(settings.style.family, "Georgia")
        self.assertEqual(settings.style.size, 18.0)
        self.assertEqual(settings.style.foreground_color, "blue")
        self.assertEqual(settings.code_stylesheet, "ansi_dark")
        self.assertEqual(settings.separator, "\n")

    def test_join_uses_separator(self):
        self.assertEqual(BuilderSettings(separator=" | ").join(["a", "b"]).string, "a | b")
        self.assertEqual(BuilderSettings().join(["a", "b"]).string, "a\nb")
        settings = BuilderSettings.from_env({"PYATTRIBUTED_SEPARATOR": ", "})
        self.assertEqual(settings.join(["x", "y", "z"]).string, "x, y, z")

    def test_join_renders_with_the_style(self):
        value = BuilderSettings.load({"style": {"family": "Georgia", "bold": True}}).join(
            ["a", "b"]
        )
        font = value.attributes_at(1)[FONT]
        self.assertEqual(font.family, "Georgia")
        self.assertTrue(font.bold)

    def test_from_env_defaults(self):
        self.assertEqual(BuilderSettings.from_env({}), BuilderSettings())

    def test_from_env_invalid(self):
        with self.assertRaises(ConfigError):
            BuilderSettings.from_env({"PYATTRIBUTED_SIZE": "big"})

    def test_from_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "settings.json")
            with open(path, "w", encoding="utf-8") as f:
                json.dump({"style": {"family": "Arial"}, "separator": " | "}, f)
            settings = BuilderSettings.from_file(path)
        self.assertEqual(settings.style.family, "Arial")
        self.assertEqual(settings.separator, " | ")

    def test_from_file_errors(self):
        with self.assertRaises(ConfigError):
            BuilderSettings.from_file("/nonexistent/settings.json")
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "settings.json")
            with open(path, "w", encoding="utf-8") as f:
                f.write("[1, 2]")
            with self.assertRaises(ConfigError):
                BuilderSettings.from_file(path)


if __name__ == "__main__":
    unittest.main()
