"""abbrmarkup renderers.

Renderers turn abbreviation trees into output markup.

Available Renderers:
- HtmlFormatter: Renders trees to HTML, formatted per output profile

Thread Safety:
Per-render state is local to each render() call.
Safe for concurrent use from multiple threads.

"""

from abbrmarkup.renderers.html import HtmlFormatter
from abbrmarkup.renderers.protocol import MarkupRenderer

__all__ = ["HtmlFormatter", "MarkupRenderer"]
