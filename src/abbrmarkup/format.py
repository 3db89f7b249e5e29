"""Formatting decisions: line breaks and indentation per node.

For every node the formatter asks ``get_format()`` for a Format descriptor:
the whitespace to put before its open tag, its text, and its close tag.
A node is either unformatted (all slots empty, it flows inline with its
neighbours) or formatted (it starts on a new, indented line).

Rules, in order:

1. Nothing is formatted when the profile's ``format`` option is off.
2. The only child of a text-only node whose value holds fields is never
   formatted, so the child stays glued to the field it replaces.
3. Block nodes are always formatted.
4. Inline nodes (text-only, or inline per the profile) are formatted only
   when something forces it: they are pseudo-snippets, they sit next to a
   block sibling, or they belong to a run of adjacent inline siblings at
   least ``inline_break`` long.

A formatted node also has *inner formatting* (children on their own lines,
close tag on a new line) when its tag is in ``format_force`` or any
descendant is itself formatted.

Thread Safety:
    All functions are pure over (node, profile).

"""

from __future__ import annotations

from dataclasses import dataclass

from abbrmarkup.fields import parse_fields
from abbrmarkup.nodes import Node, NodeKind
from abbrmarkup.profile import Profile


@dataclass(slots=True)
class Format:
    """Whitespace slots for one output node. Empty means no whitespace."""

    indent: str = ""
    newline: str = ""
    before_open: str = ""
    before_text: str = ""
    before_close: str = ""


def get_format(node: Node, level: int, profile: Profile) -> Format:
    """Compute the Format descriptor for ``node`` at nesting ``level``."""
    fmt = Format()

    if should_format(node, profile):
        fmt.indent = profile.indent(get_indent_level(node, profile, level))
        fmt.newline = "\n"
        prefix = fmt.newline + fmt.indent

        # Nothing precedes the very first node of the output
        if not is_first_in_output(node):
            fmt.before_open = prefix
            if node.is_text_only:
                fmt.before_text = prefix

        if has_inner_formatting(node, profile):
            if not node.is_text_only:
                fmt.before_text = prefix + profile.indent(1)
            fmt.before_close = prefix

    return fmt


def should_format(node: Node, profile: Profile) -> bool:
    """Check whether ``node`` starts on its own line."""
    if not profile.format:
        return False

    parent = node.parent
    if (
        parent is not None
        and parent.is_text_only
        and len(parent.children) == 1
        and parse_fields(parent.value or "").fields
    ):
        return False

    return should_format_inline(node, profile) if is_inline(node, profile) else True


def should_format_inline(node: Node, profile: Profile) -> bool:
    """Check whether an inline node is forced onto its own line."""
    if not is_inline(node, profile):
        return False

    if node.kind is NodeKind.PSEUDO_SNIPPET:
        return True

    if node.child_index == 0:
        # First in parent: break if any later sibling is block-level
        sibling = node.next_sibling
        while sibling is not None:
            if not is_inline(sibling, profile):
                return True
            sibling = sibling.next_sibling
    elif not is_inline(node.previous_sibling, profile):
        # Right after a block-level sibling
        return True

    if profile.inline_break:
        return count_adjacent_inline(node, profile) >= profile.inline_break

    return False


def count_adjacent_inline(node: Node, profile: Profile) -> int:
    """Length of the run of inline siblings containing ``node`` (inclusive)."""
    count = 1
    before = node.previous_sibling
    while before is not None and profile.is_inline(before):
        count += 1
        before = before.previous_sibling

    after = node.next_sibling
    while after is not None and profile.is_inline(after):
        count += 1
        after = after.next_sibling

    return count


def has_inner_formatting(node: Node, profile: Profile) -> bool:
    """Check whether the node's children go on their own lines."""
    if (node.name or "").lower() in profile.format_force:
        return True

    return any(_subtree_formatted(child, profile) for child in node.children)


def get_indent_level(node: Node, profile: Profile, level: int) -> int:
    """Indentation depth for ``node``.

    One level is dropped for a text-only parent and one for every ancestor
    listed in ``format_skip``.
    """
    parent = node.parent
    if parent is not None and parent.is_text_only:
        level -= 1

    ancestor = parent
    while ancestor is not None:
        if (ancestor.name or "").lower() in profile.format_skip:
            level -= 1
        ancestor = ancestor.parent

    return max(level, 0)


def is_inline(node: Node | None, profile: Profile) -> bool:
    """Text-only nodes and profile inline elements flow with their siblings."""
    return node is not None and (node.is_text_only or profile.is_inline(node))


def is_first_in_output(node: Node) -> bool:
    """True for the first top-level node, the first thing ever emitted."""
    parent = node.parent
    return parent is not None and parent.is_root and node.child_index == 0


def _subtree_formatted(node: Node, profile: Profile) -> bool:
    if should_format(node, profile):
        return True
    return any(_subtree_formatted(child, profile) for child in node.children)
