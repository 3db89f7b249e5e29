"""Tests for OutputNode assembly."""

from abbrmarkup.format import Format
from abbrmarkup.nodes import Node
from abbrmarkup.output import OutputNode

BLOCK = Format(indent="\t", newline="\n", before_open="\n\t", before_text="\n\t\t", before_close="\n\t")


def _output(fmt: Format | None = None, *, open_: str | None = None, text: str | None = None,
            close: str | None = None) -> OutputNode:
    out = OutputNode(Node("p"), fmt)
    out.open = open_
    out.text = text
    out.close = close
    return out


class TestAssembly:
    """Joining parts with their whitespace."""

    def test_unformatted(self) -> None:
        out = _output(open_="<p>", text="x", close="</p>")
        assert out.to_string() == "<p>x</p>"
        assert out.to_string("<b></b>") == "<p>x<b></b></p>"

    def test_default_format_is_empty(self) -> None:
        assert OutputNode(Node("p")).format == Format()

    def test_formatted(self) -> None:
        out = _output(BLOCK, open_="<p>", text="x", close="</p>")
        assert out.to_string() == "\n\t<p>\n\t\tx\n\t</p>"

    def test_absent_parts_drop_their_whitespace(self) -> None:
        out = _output(BLOCK, open_="<img>")
        assert out.to_string() == "\n\t<img>"

    def test_children_are_not_wrapped(self) -> None:
        out = _output(BLOCK, open_="<ul>", close="</ul>")
        assert out.to_string("\n\t\t<li></li>") == "\n\t<ul>\n\t\t<li></li>\n\t</ul>"

    def test_leading_whitespace_stripped_when_formatted(self) -> None:
        out = _output(BLOCK, text="   x")
        assert out.to_string() == "\n\t\tx"

    def test_leading_whitespace_kept_when_unformatted(self) -> None:
        out = _output(text="   x")
        assert out.to_string() == "   x"


class TestMultilineText:
    """Continuation lines of text values."""

    def test_continuation_lines_follow_slot_indent(self) -> None:
        out = _output(BLOCK, text="a\nb\r\nc")
        assert out.to_string() == "\n\t\ta\n\t\tb\n\t\tc"

    def test_first_node_uses_node_indent(self) -> None:
        fmt = Format(indent="\t", newline="\n")
        out = _output(fmt, text="a\nb")
        assert out.to_string() == "a\n\tb"

    def test_unformatted_text_is_left_as_given(self) -> None:
        out = _output(text="a\r\n  b")
        assert out.to_string() == "a\r\n  b"
