"""Tests for format decisions (line breaks and indentation)."""

from abbrmarkup.format import (
    Format,
    count_adjacent_inline,
    get_format,
    get_indent_level,
    has_inner_formatting,
    is_first_in_output,
    is_inline,
    should_format,
)
from abbrmarkup.nodes import Node
from abbrmarkup.profile import Profile

PROFILE = Profile()


def _tree(*nodes: Node) -> Node:
    return Node(children=nodes)


class TestShouldFormat:
    """Block/inline classification and forcing rules."""

    def test_block_is_formatted(self) -> None:
        tree = _tree(Node("div"))
        assert should_format(tree.children[0], PROFILE)

    def test_master_switch(self) -> None:
        tree = _tree(Node("div"))
        assert not should_format(tree.children[0], Profile(format=False))

    def test_lonely_inline_not_formatted(self) -> None:
        tree = _tree(Node("div", children=[Node("span")]))
        assert not should_format(tree.children[0].children[0], PROFILE)

    def test_inline_followed_later_by_block(self) -> None:
        tree = _tree(Node("div", children=[Node("b"), Node("i"), Node("p")]))
        b, i, _ = tree.children[0].children
        assert should_format(b, PROFILE)
        # not first, previous sibling inline, run of two is below the default break
        assert not should_format(i, PROFILE)

    def test_text_only_counts_as_inline(self) -> None:
        tree = _tree(Node("div", children=[Node(value="text")]))
        text = tree.children[0].children[0]
        assert is_inline(text, PROFILE)
        assert not should_format(text, PROFILE)

    def test_field_wrapper_child_never_formatted(self) -> None:
        tree = _tree(Node(value="<!-- ${1} -->", children=[Node("div")]))
        assert not should_format(tree.children[0].children[0], PROFILE)

    def test_wrapper_without_fields_does_not_suppress(self) -> None:
        tree = _tree(Node(value="<!-- -->", children=[Node("div")]))
        assert should_format(tree.children[0].children[0], PROFILE)

    def test_wrapper_with_two_children_does_not_suppress(self) -> None:
        tree = _tree(Node(value="${1}", children=[Node("div"), Node("div")]))
        first, second = tree.children[0].children
        assert should_format(first, PROFILE)
        assert should_format(second, PROFILE)

    def test_pseudo_snippet_always_formatted(self) -> None:
        tree = _tree(Node("span", children=[Node(value="${1}", children=[Node("b")])]))
        assert should_format(tree.children[0].children[0], PROFILE)


class TestInlineBreak:
    """Counting runs of adjacent inline siblings."""

    def test_count_includes_both_directions(self) -> None:
        tree = _tree(Node("p", children=[Node("b"), Node("i"), Node("em"), Node("div"), Node("u")]))
        b, i, em, _, u = tree.children[0].children
        assert count_adjacent_inline(i, PROFILE) == 3
        assert count_adjacent_inline(b, PROFILE) == 3
        assert count_adjacent_inline(em, PROFILE) == 3
        assert count_adjacent_inline(u, PROFILE) == 1

    def test_threshold_forces_formatting(self) -> None:
        tree = _tree(Node("p", children=[Node("b"), Node("i"), Node("em")]))
        i = tree.children[0].children[1]
        assert should_format(i, Profile(inline_break=3))
        assert not should_format(i, Profile(inline_break=4))
        assert not should_format(i, Profile(inline_break=0))


class TestIndentLevel:
    """Indent depth adjustments."""

    def test_plain_level(self) -> None:
        tree = _tree(Node("div", children=[Node("p")]))
        assert get_indent_level(tree.children[0].children[0], PROFILE, 1) == 1

    def test_skipped_ancestors(self) -> None:
        profile = Profile(format_skip={"div", "section"})
        tree = _tree(Node("div", children=[Node("section", children=[Node("p")])]))
        p = tree.children[0].children[0].children[0]
        assert get_indent_level(p, profile, 2) == 0

    def test_skip_does_not_apply_to_node_itself(self) -> None:
        tree = _tree(Node("div", children=[Node("div")]))
        inner = tree.children[0].children[0]
        assert get_indent_level(inner, Profile(format_skip={"div"}), 1) == 0
        assert get_indent_level(tree.children[0], Profile(format_skip={"div"}), 0) == 0

    def test_text_only_parent(self) -> None:
        tree = _tree(Node("ul", children=[Node(value="x", children=[Node("li")])]))
        li = tree.children[0].children[0].children[0]
        assert get_indent_level(li, PROFILE, 2) == 1

    def test_clamped_at_zero(self) -> None:
        tree = _tree(Node(value="x", children=[Node("p")]))
        assert get_indent_level(tree.children[0].children[0], Profile(format_skip=set()), 0) == 0


class TestInnerFormatting:
    """Children on their own lines."""

    def test_forced_tag(self) -> None:
        tree = _tree(Node("body"))
        assert has_inner_formatting(tree.children[0], PROFILE)

    def test_formatted_child(self) -> None:
        tree = _tree(Node("div", children=[Node("p")]))
        assert has_inner_formatting(tree.children[0], PROFILE)

    def test_inline_children_only(self) -> None:
        tree = _tree(Node("p", children=[Node("b"), Node("i")]))
        assert not has_inner_formatting(tree.children[0], PROFILE)

    def test_formatted_grandchild(self) -> None:
        tree = _tree(Node("div", children=[Node("span", children=[Node("p")])]))
        assert has_inner_formatting(tree.children[0], PROFILE)


class TestGetFormat:
    """Format descriptors."""

    def test_first_node_has_no_leading_whitespace(self) -> None:
        tree = _tree(Node("div", children=[Node("p")]))
        fmt = get_format(tree.children[0], 0, PROFILE)
        assert fmt == Format(indent="", newline="\n", before_open="", before_text="\n\t", before_close="\n")

    def test_nested_block(self) -> None:
        tree = _tree(Node("div", children=[Node("p")]))
        fmt = get_format(tree.children[0].children[0], 1, PROFILE)
        assert fmt == Format(indent="\t", newline="\n", before_open="\n\t")

    def test_text_only_node_moves_text_slot(self) -> None:
        tree = _tree(Node("div", children=[Node("p"), Node(value="t")]))
        fmt = get_format(tree.children[0].children[1], 1, PROFILE)
        assert fmt.before_open == "\n\t"
        assert fmt.before_text == "\n\t"
        assert fmt.before_close == ""

    def test_unformatted_node_is_empty(self) -> None:
        tree = _tree(Node("p", children=[Node("b")]))
        assert get_format(tree.children[0].children[0], 1, PROFILE) == Format()

    def test_first_in_output(self) -> None:
        tree = _tree(Node("div", children=[Node("p")]), Node("div"))
        first, second = tree.children
        assert is_first_in_output(first)
        assert not is_first_in_output(second)
        assert not is_first_in_output(first.children[0])
