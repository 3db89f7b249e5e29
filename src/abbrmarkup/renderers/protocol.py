"""MarkupRenderer protocol — stable interface for tree renderers.

Any renderer that implements ``render(tree) -> str`` conforms to this protocol.
The built-in ``HtmlFormatter`` is the reference implementation.

Example:
    from abbrmarkup.renderers.protocol import MarkupRenderer

    def expand(renderer: MarkupRenderer, tree: Node) -> str:
        return renderer.render(tree)

"""

from typing import Protocol

from abbrmarkup.nodes import Node


class MarkupRenderer(Protocol):
    """Protocol for abbreviation tree renderers.

    Implementations must accept the tree root and return the rendered string.
    The built-in ``HtmlFormatter`` conforms to this protocol.

    """

    def render(self, tree: Node) -> str:
        """Render an abbreviation tree to a string.

        Args:
            tree: Root of the abbreviation tree.

        Returns:
            Rendered markup.

        """
        ...
