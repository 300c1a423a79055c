"""Tests for joining rendered pieces."""

import unittest

from rich.color import Color

from pyattributed.attributed_string import FONT, FOREGROUND_COLOR, AttributedString
from pyattributed.attributes import Attributes, Environment
from pyattributed.fragments import Group, Plain, text
from pyattributed.joined import Joined, join, run


class JoinedTest(unittest.TestCase):
    """Tests for Joined.single and friends."""

    def setUp(self):
        self.environment = Environment(Attributes(family="Georgia"))
        self.ambient = self.environment.resolve()

    def test_empty_list_yields_empty_value(self):
        self.assertEqual(Joined([]).single(self.environment), AttributedString())
        self.assertEqual(Joined(Group()).single(self.environment).string, "")

    def test_single_element_is_never_separated(self):
        fragment = text("only").bold()
        self.assertEqual(
            Joined([fragment], separator="-").single(self.environment),
            fragment.render(self.environment)[0],
        )

    def test_default_separator_is_newline(self):
        self.assertEqual(Joined(["a", "b"]).single(self.environment).string, "a\nb")

    def test_separator_uses_ambient_attributes(self):
        fragment = Group([text("A").bold(), text("B").foreground_color("red"), "C"])
        value = Joined(fragment, separator="-").single(self.environment)
        self.assertEqual(value.string, "A-B-C")
        self.assertTrue(value.attributes_at(0)[FONT].bold)
        self.assertEqual(value.attributes_at(2)[FOREGROUND_COLOR], Color.parse("red"))
        self.assertEqual(value.attributes_at(4), self.ambient)
        for index in (1, 3):
            self.assertEqual(value.attributes_at(index), self.ambient)

    def test_separator_ignores_modifiers_around_content(self):
        # Pieces inside a bold group: the separator is still rendered with
        # the environment given to the joiner.
        value = Joined(Group(["a", "b"]).bold(), separator="|").single(self.environment)
        self.assertTrue(value.attributes_at(0)[FONT].bold)
        self.assertFalse(value.attributes_at(1)[FONT].bold)
        self.assertTrue(value.attributes_at(2)[FONT].bold)

    def test_multi_piece_and_empty_separators(self):
        value = Joined(["a", "b", "c"], separator=[", ", text("and ").italic()]).single(
            self.environment
        )
        self.assertEqual(value.string, "a, and b, and c")
        self.assertTrue(value.attributes_at(3)[FONT].italic)
        self.assertEqual(Joined(["a", "b"], separator=[]).single(self.environment).string, "ab")

    def test_render_returns_one_piece(self):
        pieces = Joined(["a", "b"]).render(self.environment)
        self.assertEqual(len(pieces), 1)

    def test_nested_joins(self):
        inner = Group(["x", "y"]).joined(separator="+")
        value = Group([inner, "z"]).joined(separator=" ").run(self.environment)
        self.assertEqual(value.string, "x+y z")

    def test_run_is_a_no_separator_flatten(self):
        fragment = Group(["a", text("b").bold(), "c"])
        self.assertEqual(
            fragment.run(self.environment),
            Joined(fragment, separator="").single(self.environment),
        )
        self.assertEqual(fragment.run(self.environment).string, "abc")

    def test_run_defaults_to_a_fresh_environment(self):
        value = Plain("x").run()
        self.assertEqual(value.attributes_at(0), Environment().resolve())

    def test_module_helpers(self):
        self.assertEqual(join(["a", "b"], separator=", ").string, "a, b")
        self.assertEqual(run(["a", "b"], self.environment).string, "ab")

    def test_joining_leaves_pieces_untouched(self):
        first = AttributedString("a", self.ambient)
        Joined([first, "b"]).single(self.environment)
        self.assertEqual(first.string, "a")


if __name__ == "__main__":
    unittest.main()
