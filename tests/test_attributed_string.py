"""Tests for AttributedString and MutableAttributedString."""

import unittest

from pyattributed.attributed_string import (
    FONT,
    AttributedString,
    MutableAttributedString,
    Run,
)

PLAIN = {FONT: "plain"}
BOLD = {FONT: "bold"}


class AttributedStringTest(unittest.TestCase):
    """Tests for the immutable attributed string."""

    def test_empty(self):
        value = AttributedString()
        self.assertEqual(len(value), 0)
        self.assertEqual(value.string, "")
        self.assertEqual(value.runs, ())

    def test_adjacent_equal_runs_coalesce(self):
        value = AttributedString.from_runs(
            [Run("a", PLAIN), Run("b", PLAIN), Run("", BOLD), Run("c", BOLD)]
        )
        self.assertEqual([r.text for r in value.runs], ["ab", "c"])
        self.assertEqual(value, AttributedString("ab", PLAIN) + AttributedString("c", BOLD))

    def test_attributes_at(self):
        value = AttributedString("ab", PLAIN) + AttributedString("cd", BOLD)
        self.assertEqual(value.attributes_at(1), PLAIN)
        self.assertEqual(value.attributes_at(2), BOLD)
        self.assertEqual(value.attributes_at(-1), BOLD)
        with self.assertRaises(IndexError):
            value.attributes_at(4)

    def test_ranges(self):
        value = AttributedString("ab", PLAIN) + AttributedString("cde", BOLD)
        self.assertEqual([(s, e) for s, e, _ in value.ranges()], [(0, 2), (2, 5)])

    def test_run_attributes_are_read_only(self):
        source = dict(PLAIN)
        run = Run("x", source)
        source[FONT] = "changed"
        self.assertEqual(run.attributes[FONT], "plain")
        with self.assertRaises(TypeError):
            run.attributes[FONT] = "changed"  # type: ignore[index]


class MutableAttributedStringTest(unittest.TestCase):
    """Tests for appending."""

    def test_append_does_not_touch_source(self):
        source = AttributedString("a", PLAIN)
        result = MutableAttributedString(source)
        result.append(AttributedString("b", BOLD))
        self.assertEqual(source.string, "a")
        self.assertEqual(result.string, "ab")

    def test_copy_is_a_snapshot(self):
        result = MutableAttributedString(AttributedString("a", PLAIN))
        snapshot = result.copy()
        result.append(AttributedString("b", PLAIN))
        self.assertEqual(snapshot.string, "a")
        self.assertNotIsInstance(snapshot, MutableAttributedString)


if __name__ == "__main__":
    unittest.main()
