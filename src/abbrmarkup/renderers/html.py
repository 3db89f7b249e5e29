"""HTML formatter: renders an abbreviation tree as formatted markup.

The formatter walks the tree depth-first. For each node it computes a Format
descriptor, builds the open/text/close parts into an OutputNode, renders the
children, and lets the OutputNode join everything with the computed
whitespace. Children are always rendered before their parent is assembled.

Thread Safety:
All per-render state (the field counter) lives in a FieldRenderer created
fresh for each render() call. Multiple threads can safely share a single
HtmlFormatter instance and call render() concurrently.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, TypeAlias

from abbrmarkup.config import get_profile
from abbrmarkup.fields import FieldRenderer, lowest_index_field, parse_fields, split_at_field
from abbrmarkup.format import get_format
from abbrmarkup.nodes import Node, NodeKind
from abbrmarkup.output import OutputNode
from abbrmarkup.utils.logger import get_logger

if TYPE_CHECKING:
    from abbrmarkup.fields import FieldString, FieldToken
    from abbrmarkup.profile import Profile

RenderFields: TypeAlias = "Callable[[str | FieldString | None], str]"

logger = get_logger(__name__)


class HtmlFormatter:
    """Render abbreviation trees to HTML according to an output profile.

    Usage:
        >>> tree = Node(children=[Node("div", children=[Node("p"), Node("p")])])
        >>> formatter = HtmlFormatter(Profile(indentation="  "))
        >>> formatter.render(tree)
        '<div>\\n  <p></p>\\n  <p></p>\\n</div>'

    Thread Safety:
        Multiple threads can safely share a single HtmlFormatter instance.
        Each render() call creates an independent FieldRenderer.
    """

    __slots__ = ("_field", "_profile")

    def __init__(self, profile: Profile | None = None, *, field: FieldToken | None = None) -> None:
        """Initialize formatter.

        Args:
            profile: Output profile (uses the active context profile if None)
            field: Token function emitting tab stops; defaults to plain
                placeholder text
        """
        self._profile = profile or get_profile()
        self._field = field

    @property
    def profile(self) -> Profile:
        return self._profile

    def render(self, tree: Node, render_fields: RenderFields | None = None) -> str:
        """Render the children of ``tree`` (the abbreviation root) to markup.

        Args:
            tree: Root node; it acts as a container and is not emitted itself
            render_fields: Field output function; a fresh FieldRenderer using
                this formatter's token function by default

        Returns:
            Markup string

        Errors raised by ``render_fields`` propagate unchanged.
        """
        if render_fields is None:
            render_fields = FieldRenderer(self._field)

        result = self._render_children(tree, 0, render_fields)
        logger.debug("Rendered %d top-level node(s) into %d chars", len(tree.children), len(result))
        return result

    # =========================================================================
    # Tree walk
    # =========================================================================

    def _render_children(self, node: Node, level: int, render_fields: RenderFields) -> str:
        return "".join(self._render_node(child, level, render_fields) for child in node.children)

    def _render_node(self, node: Node, level: int, render_fields: RenderFields) -> str:
        out = OutputNode(node, get_format(node, level, self._profile))

        match node.kind:
            case NodeKind.PSEUDO_SNIPPET:
                self._fill_pseudo_snippet(out, render_fields)
            case NodeKind.TEXT | NodeKind.ELEMENT:
                self._fill_element(out, render_fields)

        return out.to_string(self._render_children(node, level + 1, render_fields))

    def _fill_element(self, out: OutputNode, render_fields: RenderFields) -> None:
        node = out.node
        profile = self._profile

        if node.name:
            name = profile.name(node.name)
            attrs = self._format_attributes(node, render_fields)
            self_close = profile.self_close() if node.self_closing else ""
            out.open = f"<{name}{attrs}{self_close}>"
            if not node.self_closing:
                out.close = f"</{name}>"

        # Empty leaves still get a text slot so they receive a tab stop
        if node.value or (not node.children and not node.self_closing):
            out.text = render_fields(node.value)

    def _fill_pseudo_snippet(self, out: OutputNode, render_fields: RenderFields) -> None:
        """Use the node's value as a literal wrapper around its children.

        When the value has fields, children take the place of the field with
        the lowest index; otherwise the value is emitted as text before them.
        """
        model = parse_fields(out.node.value or "")
        field = lowest_index_field(model)
        if field is not None:
            before, after = split_at_field(model, field)
            out.open = render_fields(before)
            out.close = render_fields(after)
        else:
            out.text = render_fields(model)

    # =========================================================================
    # Attributes
    # =========================================================================

    def _format_attributes(self, node: Node, render_fields: RenderFields) -> str:
        """Serialize attributes, each with a leading space."""
        profile = self._profile
        parts: list[str] = []

        for attr in node.attributes:
            if attr.implied and attr.value is None:
                continue

            name = profile.attribute(attr.name)
            value: str | None = None

            if attr.boolean or profile.is_boolean_attribute(name):
                if attr.value is None:
                    if profile.compact_boolean_attributes:
                        parts.append(f" {name}")
                        continue
                    value = name

            if value is None:
                value = render_fields(attr.value)

            parts.append(f" {name}={profile.quote(value)}")

        return "".join(parts)
