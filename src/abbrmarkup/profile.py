"""Output profile: the read-only option set the formatter consults.

A Profile is resolved once at construction into named fields; the formatter
only ever reads them. ``get()`` exposes the same values under their
camelCase option names for callers that configure by name.

Example:
    >>> profile = Profile(indentation="  ", inline_break=0)
    >>> profile.indent(2)
    '    '
    >>> profile.get("inlineBreak")
    0
    >>> profile.quote("x")
    '"x"'

Thread Safety:
    Frozen dataclass; safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any

from abbrmarkup.errors import ProfileError
from abbrmarkup.utils.text import is_valid_case, str_case

if TYPE_CHECKING:
    from abbrmarkup.nodes import Node

DEFAULT_INLINE_ELEMENTS: frozenset[str] = frozenset({
    "a", "abbr", "acronym", "applet", "b", "basefont", "bdo", "big", "br",
    "button", "cite", "code", "del", "dfn", "em", "font", "i", "iframe", "img",
    "input", "ins", "kbd", "label", "map", "object", "q", "s", "samp",
    "select", "small", "span", "strike", "strong", "sub", "sup", "textarea",
    "tt", "u", "var",
})

DEFAULT_BOOLEAN_ATTRIBUTES: frozenset[str] = frozenset({
    "contenteditable", "seamless", "async", "autofocus", "autoplay",
    "checked", "controls", "defer", "disabled", "formnovalidate", "hidden",
    "ismap", "loop", "multiple", "muted", "novalidate", "readonly",
    "required", "reversed", "selected", "typemustmatch",
})

_QUOTES = {"double": '"', "single": "'"}
_SELF_CLOSE = {"html": "", "xhtml": " /", "xml": "/"}

# camelCase option name -> field name
_OPTION_FIELDS: dict[str, str] = {
    "format": "format",
    "formatForce": "format_force",
    "formatSkip": "format_skip",
    "inlineBreak": "inline_break",
    "booleanAttributes": "boolean_attributes",
    "compactBooleanAttributes": "compact_boolean_attributes",
    "indent": "indentation",
    "tagCase": "tag_case",
    "attributeCase": "attribute_case",
    "attributeQuotes": "attribute_quotes",
    "selfClosingStyle": "self_closing_style",
    "inlineElements": "inline_elements",
}

_NAME_SETS = ("format_force", "format_skip", "boolean_attributes", "inline_elements")


@dataclass(frozen=True, slots=True)
class Profile:
    """Immutable output profile.

    Attributes:
        format: Master switch; when False nothing is ever formatted
        format_force: Tags that always get their children on separate lines
        format_skip: Tags that do not consume an indentation level
        inline_break: Number of adjacent inline siblings that forces line
            breaks between them (0 disables)
        boolean_attributes: Attribute names treated as boolean
        compact_boolean_attributes: Emit valueless boolean attributes as a
            bare name instead of ``name="name"``
        indentation: Text used for one level of indentation
        tag_case: ``"upper"``, ``"lower"`` or ``""`` to keep names as given
        attribute_case: Same as tag_case, for attribute names
        attribute_quotes: ``"double"`` or ``"single"``
        self_closing_style: ``"html"``, ``"xhtml"`` or ``"xml"``
        inline_elements: Tag names rendered inline

    """

    format: bool = True
    format_force: frozenset[str] = frozenset({"body"})
    format_skip: frozenset[str] = frozenset({"html"})
    inline_break: int = 3
    boolean_attributes: frozenset[str] = DEFAULT_BOOLEAN_ATTRIBUTES
    compact_boolean_attributes: bool = False
    indentation: str = "\t"
    tag_case: str = ""
    attribute_case: str = ""
    attribute_quotes: str = "double"
    self_closing_style: str = "html"
    inline_elements: frozenset[str] = DEFAULT_INLINE_ELEMENTS

    def __post_init__(self) -> None:
        for name in _NAME_SETS:
            object.__setattr__(self, name, _name_set(getattr(self, name)))

        if self.inline_break is None or self.inline_break is False:
            object.__setattr__(self, "inline_break", 0)
        if not isinstance(self.inline_break, int) or self.inline_break < 0:
            raise ProfileError("inline_break", f"expected a non-negative integer, got {self.inline_break!r}")
        if self.attribute_quotes not in _QUOTES:
            raise ProfileError("attribute_quotes", f"expected one of {sorted(_QUOTES)}, got {self.attribute_quotes!r}")
        if self.self_closing_style not in _SELF_CLOSE:
            raise ProfileError(
                "self_closing_style", f"expected one of {sorted(_SELF_CLOSE)}, got {self.self_closing_style!r}"
            )
        for name in ("tag_case", "attribute_case"):
            if not is_valid_case(getattr(self, name)):
                raise ProfileError(name, f"unknown case {getattr(self, name)!r}")

    @classmethod
    def from_dict(cls, options: dict[str, Any]) -> Profile:
        """Create a Profile from a dictionary of options.

        Keys may be field names (``inline_break``) or option names
        (``inlineBreak``); unknown keys are silently ignored.

        Example:
            >>> Profile.from_dict({"inlineBreak": 0, "tag_case": "upper"}).tag_case
            'upper'

        """
        valid_fields = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in options.items():
            name = _OPTION_FIELDS.get(key, key)
            if name in valid_fields:
                kwargs[name] = value
        return cls(**kwargs)

    def get(self, option: str) -> Any:
        """Look up an option by its camelCase name (or field name).

        Raises:
            KeyError: If the option is not recognized
        """
        name = _OPTION_FIELDS.get(option, option)
        if name not in _OPTION_FIELDS.values():
            raise KeyError(option)
        return getattr(self, name)

    def indent(self, level: int) -> str:
        return self.indentation * max(level, 0)

    def name(self, tag_name: str) -> str:
        return str_case(tag_name, self.tag_case)

    def attribute(self, attr_name: str) -> str:
        return str_case(attr_name, self.attribute_case)

    def quote(self, value: str | None) -> str:
        q = _QUOTES[self.attribute_quotes]
        return f"{q}{value if value is not None else ''}{q}"

    def self_close(self) -> str:
        return _SELF_CLOSE[self.self_closing_style]

    def is_inline(self, node: Node | str | None) -> bool:
        """Check whether a node (or bare tag name) is inline-level.

        Named nodes are looked up in ``inline_elements``; nameless nodes are
        inline when they only carry text.
        """
        if node is None:
            return False
        if isinstance(node, str):
            return node.lower() in self.inline_elements
        if node.name:
            return node.name.lower() in self.inline_elements
        return node.is_text_only

    def is_boolean_attribute(self, attr_name: str) -> bool:
        return attr_name.lower() in self.boolean_attributes


def _name_set(names: Iterable[str] | None) -> frozenset[str]:
    if not names:
        return frozenset()
    if isinstance(names, str):
        names = names.split()
    return frozenset(name.lower() for name in names)
