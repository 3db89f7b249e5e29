"""
abbrmarkup — Formatted markup output for abbreviation trees

Renders a parsed abbreviation tree (elements, text, attributes) into markup,
deciding per node whether it goes on its own line, how deep it is indented,
and where editor tab stops land. Output is controlled by an immutable Profile.

Quick Start:
    >>> from abbrmarkup import Node, render
    >>> tree = Node(children=[Node("ul", children=[Node("li"), Node("li")])])
    >>> print(render(tree))
    <ul>
    	<li></li>
    	<li></li>
    </ul>

    >>> # Tab stops in editor syntax
    >>> from abbrmarkup import Attribute, create_token
    >>> tree = Node(children=[Node("a", attributes=[Attribute("href")])])
    >>> render(tree, field=create_token)
    '<a href="${1}">${2}</a>'

    >>> # Or keep a configured processor around
    >>> from abbrmarkup import Markup, Profile
    >>> markup = Markup(Profile(indentation="  ", format=False))
    >>> html = markup(tree)

Installation:
    pip install abbrmarkup
"""

from abbrmarkup.config import get_profile, profile_context, reset_profile, set_profile
from abbrmarkup.errors import AbbrMarkupError, FieldParseError, ProfileError, TreeError
from abbrmarkup.fields import (
    Field,
    FieldRenderer,
    FieldString,
    FieldToken,
    create_token,
    default_field,
    parse_fields,
)
from abbrmarkup.format import Format, get_format
from abbrmarkup.nodes import Attribute, Node, NodeKind
from abbrmarkup.output import OutputNode
from abbrmarkup.profile import Profile
from abbrmarkup.renderers.html import HtmlFormatter
from abbrmarkup.renderers.protocol import MarkupRenderer
from abbrmarkup.serialization import from_dict, from_json, to_dict, to_json

__version__ = "0.1.0"


def render(
    tree: Node,
    profile: Profile | None = None,
    *,
    field: FieldToken | None = None,
) -> str:
    """Render an abbreviation tree to markup.

    Args:
        tree: Abbreviation root; its children are the top-level nodes
        profile: Output profile (uses the active context profile if None)
        field: Token function for tab stops, ``(index, placeholder) -> str``.
            Defaults to emitting the bare placeholder text.

    Returns:
        Markup string

    Example:
        >>> tree = Node(children=[Node("p", value="Hello")])
        >>> render(tree)
        '<p>Hello</p>'
    """
    return HtmlFormatter(profile, field=field).render(tree)


class Markup:
    """Reusable formatter bound to a profile and token function.

    Usage:
        >>> markup = Markup(Profile(tag_case="upper"))
        >>> markup(Node(children=[Node("b", value="x")]))
        '<B>x</B>'

    Thread Safety:
        Holds only immutable configuration. Safe to share across threads.

    """

    __slots__ = ("_formatter",)

    def __init__(self, profile: Profile | None = None, *, field: FieldToken | None = None) -> None:
        self._formatter = HtmlFormatter(profile, field=field)

    @property
    def profile(self) -> Profile:
        return self._formatter.profile

    def __call__(self, tree: Node) -> str:
        return self._formatter.render(tree)

    def render_json(self, data: str) -> str:
        """Render a tree given in the JSON form produced by ``to_json``."""
        return self._formatter.render(from_json(data))


__all__ = [  # noqa: RUF022 - grouped by category
    # Version
    "__version__",
    # Core API
    "render",
    "Markup",
    # Tree
    "Attribute",
    "Node",
    "NodeKind",
    # Profile + configuration (ContextVar-based)
    "Profile",
    "get_profile",
    "set_profile",
    "reset_profile",
    "profile_context",
    # Fields
    "Field",
    "FieldRenderer",
    "FieldString",
    "FieldToken",
    "create_token",
    "default_field",
    "parse_fields",
    # Formatting
    "Format",
    "get_format",
    "OutputNode",
    # Renderer
    "HtmlFormatter",
    "MarkupRenderer",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Errors
    "AbbrMarkupError",
    "FieldParseError",
    "ProfileError",
    "TreeError",
]
