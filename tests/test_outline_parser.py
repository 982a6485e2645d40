"""Tests for building node trees from indented outlines."""

import pytest

from models import Node
from outline import MalformedOutlineError, OutlineParser


def bullet(level: int, text: str) -> str:
    return "    " * level + "- " + text


class TestTreeShape:
    """Test the tree built for well-formed outlines."""

    def test_levels_round_trip(self):
        """Indent levels [0,1,1,0,1,2,1,0] give the matching tree."""
        levels = [0, 1, 1, 0, 1, 2, 1, 0]
        texts = ['a', 'b', 'c', 'd', 'e', 'f', 'g', 'h']
        lines = [bullet(level, text) for level, text in zip(levels, texts)]

        forest = OutlineParser().parse(lines)

        assert [n.text for n in forest] == ['a', 'd', 'h']
        a, d, h = forest
        assert [n.text for n in a.children] == ['b', 'c']
        assert [n.text for n in d.children] == ['e', 'g']
        assert [n.text for n in d.children[0].children] == ['f']
        assert d.children[1].children == []
        assert h.children == []

        root = Node(text='', children=forest)
        assert root.flatten() == texts
        assert root.depth() == 3

    def test_text_after_marker_is_kept_verbatim(self):
        forest = OutlineParser().parse(["- Index  ", "    -   Home"])

        assert forest[0].text == "Index  "
        assert forest[0].children[0].text == "  Home"

    def test_offset_not_multiple_of_four_is_floored(self):
        forest = OutlineParser().parse(["- parent", "      - child"])

        assert forest[0].children[0].text == "child"

    def test_parse_text_splits_lines(self):
        forest = OutlineParser().parse_text("- one\n    - two\n- three\n")

        assert [n.text for n in forest] == ['one', 'three']
        assert forest[0].children[0].text == 'two'

    def test_blank_lines_are_skipped(self):
        forest = OutlineParser().parse(["- one", "", "   ", "- two"])

        assert [n.text for n in forest] == ['one', 'two']

    def test_continuation_line_extends_previous_node(self):
        forest = OutlineParser().parse(["- first line", "  second line", "- next"])

        assert forest[0].text == "first line\nsecond line"
        assert forest[1].text == "next"

    def test_continuation_line_containing_dash(self):
        forest = OutlineParser().parse(["- a", "    - b", "      note - draft", "- c"])

        assert [n.text for n in forest] == ['a', 'c']
        b = forest[0].children[0]
        assert b.text == "b\nnote - draft"
        assert b.children == []

    def test_deep_continuation_with_dash_is_not_a_bullet(self):
        lines = [
            "- filter",
            "    - tagged with",
            "        - Published",
            "          see notes - draft",
        ]

        forest = OutlineParser().parse(lines)

        tag = forest[0].children[0].children[0]
        assert tag.text == "Published\nsee notes - draft"

    def test_empty_input(self):
        assert OutlineParser().parse([]) == []


class TestMalformedOutlines:
    """Test that broken indentation is reported."""

    def test_first_line_indented(self):
        with pytest.raises(MalformedOutlineError) as exc_info:
            OutlineParser().parse(["    - orphan"])

        assert exc_info.value.line_number == 1

    def test_jump_of_two_levels(self):
        with pytest.raises(MalformedOutlineError) as exc_info:
            OutlineParser().parse(["- a", "        - too deep"])

        assert exc_info.value.line_number == 2
        assert "line 2" in str(exc_info.value)

    def test_text_before_any_bullet(self):
        with pytest.raises(MalformedOutlineError):
            OutlineParser().parse(["plain text", "- a"])

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            OutlineParser().parse(["    - orphan"])
