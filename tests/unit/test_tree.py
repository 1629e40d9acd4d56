"""Tests for TreeRegexp, Group and argument building."""

import pytest

from step_expr import PlaceholderType, TreeRegexp, build_arguments


class TestTreeRegexp:
    """Test capture-group tree construction."""

    def test_nested_groups(self):
        tree = TreeRegexp(r"(a)(b(c))")

        assert len(tree.group_builder.children) == 2
        assert len(tree.group_builder.children[1].children) == 1
        assert tree.group_builder.children[1].source == "b(c)"

    def test_non_capturing_groups_are_transparent(self):
        """Capturing children of (?:...) attach to the parent."""
        tree = TreeRegexp(r"(?:x(a))?(b)")

        assert [c.source for c in tree.group_builder.children] == ["a", "b"]

    def test_lookahead_not_counted(self):
        tree = TreeRegexp(r"(?=\d)(\d+)")

        assert len(tree.group_builder.children) == 1

    def test_named_group_counted(self):
        tree = TreeRegexp(r"(?P<n>\d+)")

        assert len(tree.group_builder.children) == 1

    @pytest.mark.parametrize("pattern", [r"(?<n>\d+)", r"(?'n'\d+)"])
    def test_angle_and_quote_named_groups_counted(self, pattern):
        """Every named-group spelling captures, not just (?P<...>)."""
        tree = TreeRegexp(pattern)

        assert len(tree.group_builder.children) == 1

    @pytest.mark.parametrize("pattern", [r"(?<=a)(b)", r"(?<!a)(b)"])
    def test_lookbehind_not_counted(self, pattern):
        tree = TreeRegexp(pattern)

        assert [c.source for c in tree.group_builder.children] == ["b"]

    def test_named_group_keeps_later_numbering(self):
        group = TreeRegexp(r"^0x(?<digits>[0-9a-f]+) and (\d+)$").match("0xff and 7")

        assert [c.value for c in group.children] == ["ff", "7"]

    @pytest.mark.parametrize("pattern", [r"[]()]+(a)", r"[^]()]+(a)"])
    def test_leading_bracket_in_character_class_is_literal(self, pattern):
        """A ] right after [ or [^ does not close the class."""
        tree = TreeRegexp(pattern)

        assert [c.source for c in tree.group_builder.children] == ["a"]

    def test_escaped_parens_ignored(self):
        tree = TreeRegexp(r"\((a)\)")

        assert len(tree.group_builder.children) == 1

    def test_parens_in_character_class_ignored(self):
        tree = TreeRegexp(r"[()\]](a)")

        assert [c.source for c in tree.group_builder.children] == ["a"]

    def test_match_builds_groups(self):
        tree = TreeRegexp(r"^(a)(b(c))$")
        group = tree.match("abc")

        assert group.value == "abc"
        assert [c.value for c in group.children] == ["a", "bc"]
        assert group.children[1].children[0].value == "c"
        assert (group.children[1].start, group.children[1].end) == (1, 3)

    def test_no_match(self):
        assert TreeRegexp(r"^a$").match("b") is None

    def test_unmatched_group_is_none(self):
        group = TreeRegexp(r"^(a)|(b)$").match("b")

        assert group.children[0].value is None
        assert group.children[0].start == -1
        assert group.children[1].value == "b"

    def test_group_values(self):
        group = TreeRegexp(r"^((x)|(y))$").match("y")
        outer = group.children[0]

        assert outer.values == [None, "y"]
        assert outer.children[1].values == ["y"]


class TestBuildArguments:
    """Test build_arguments."""

    def test_pairs_groups_with_types(self):
        int_type = PlaceholderType("int", r"\d+", int)
        word_type = PlaceholderType("word", r"\w+")
        tree = TreeRegexp(r"^(\d+) (\w+)$")

        args = build_arguments(tree, "12 apples", [int_type, word_type])

        assert [a.value for a in args] == [12, "apples"]
        assert args[0].placeholder_type is int_type
        assert args[0].group.value == "12"

    def test_no_placeholders_yields_empty_list(self):
        assert build_arguments(TreeRegexp(r"^hi$"), "hi", []) == []

    def test_no_match_yields_none(self):
        assert build_arguments(TreeRegexp(r"^hi$"), "bye", []) is None

    def test_count_mismatch(self):
        with pytest.raises(ValueError, match="capture groups"):
            build_arguments(TreeRegexp(r"^(a)(b)$"), "ab", [PlaceholderType("x", "a")])
