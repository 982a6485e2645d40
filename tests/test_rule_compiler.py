"""Tests for compiling filter rules into predicates."""

import unittest

from models import Node
from outline import compile_content_rule, compile_title_rule


def rule(directive, *arguments):
    return Node(text=directive, children=[Node(text=a) for a in arguments])


class TestTitleRules(unittest.TestCase):

    def test_starts_with(self):
        predicate = compile_title_rule(rule("STARTS WITH", "Public/"))

        self.assertTrue(predicate("Public/Notes"))
        self.assertTrue(predicate("Public/"))
        self.assertFalse(predicate("Private/Notes"))
        self.assertFalse(predicate("public/notes"))

    def test_directive_is_case_insensitive_and_trimmed(self):
        predicate = compile_title_rule(rule("  starts with ", "Blog"))

        self.assertTrue(predicate("Blog post"))
        self.assertFalse(predicate("My Blog"))

    def test_uses_first_argument_only(self):
        predicate = compile_title_rule(rule("STARTS WITH", "A", "B"))

        self.assertTrue(predicate("Apple"))
        self.assertFalse(predicate("Banana"))

    def test_missing_argument_accepts_everything(self):
        predicate = compile_title_rule(rule("STARTS WITH"))

        self.assertTrue(predicate("anything"))

    def test_unknown_directive_accepts_everything(self):
        self.assertTrue(compile_title_rule(rule("TAGGED WITH", "x"))("anything"))
        self.assertTrue(compile_title_rule(rule("ENDS WITH", "x"))("anything"))


class TestContentRules(unittest.TestCase):

    def test_tag_renderings(self):
        """Any of #Tag, [[Tag]] and Tag:: marks a page as tagged."""
        predicate = compile_content_rule(rule("TAGGED WITH", "Project"))

        self.assertTrue(predicate("Working on #Project today"))
        self.assertTrue(predicate("Part of [[Project]]"))
        self.assertTrue(predicate("Project:: garden"))
        self.assertFalse(predicate("A project without the tag"))
        self.assertFalse(predicate("[Project] and Project: and # Project"))

    def test_directive_is_case_insensitive(self):
        predicate = compile_content_rule(rule("tagged with", "Public"))

        self.assertTrue(predicate("#Public"))
        self.assertFalse(predicate("nothing"))

    def test_missing_argument_accepts_everything(self):
        self.assertTrue(compile_content_rule(rule("TAGGED WITH"))("anything"))

    def test_unknown_directive_accepts_everything(self):
        self.assertTrue(compile_content_rule(rule("STARTS WITH", "x"))("anything"))


if __name__ == '__main__':
    unittest.main()
