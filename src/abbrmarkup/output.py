"""Output node: assembles one node's markup from its parts.

An OutputNode holds the open tag, text and close tag produced for a node
(each may be absent) together with its Format descriptor. ``to_string()``
wraps every present part with the descriptor's whitespace and joins them
around the already rendered children::

    before_open + open + before_text + text + children + before_close + close

Absent parts contribute nothing, including their leading whitespace.
"""

from __future__ import annotations

from abbrmarkup.format import Format
from abbrmarkup.nodes import Node
from abbrmarkup.utils.text import split_lines


class OutputNode:
    """Mutable assembly record for a single node."""

    __slots__ = ("close", "format", "node", "open", "text")

    def __init__(self, node: Node, fmt: Format | None = None) -> None:
        self.node = node
        self.format = fmt or Format()
        self.open: str | None = None
        self.text: str | None = None
        self.close: str | None = None

    def to_string(self, children: str = "") -> str:
        fmt = self.format
        return (
            self._wrap(self.open, fmt.before_open)
            + self._wrap(self.text, fmt.before_text)
            + children
            + self._wrap(self.close, fmt.before_close)
        )

    def _wrap(self, part: str | None, before: str) -> str:
        if part is None:
            return ""
        if before:
            part = part.lstrip()
        return before + self._indent_lines(part, before)

    def _indent_lines(self, text: str, before: str) -> str:
        """Re-indent continuation lines of multi-line text.

        Continuation lines line up with the slot's own indentation. Text of
        unformatted nodes is left as given.
        """
        lines = split_lines(text)
        if len(lines) == 1:
            return text

        fmt = self.format
        if not fmt.newline:
            return text

        indent = before.rpartition("\n")[2] if "\n" in before else fmt.indent
        return fmt.newline.join(lines[:1] + [indent + line for line in lines[1:]])
