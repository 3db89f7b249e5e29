"""Tab-stop field placeholders in text and attribute values.

Values may carry editor tab stops in the usual snippet syntax::

    $1          field 1, empty placeholder
    ${1}        same
    ${1:name}   field 1 with placeholder text "name"
    \\$1        escaped, kept verbatim

``parse_fields()`` strips the markers, leaving only placeholder text, and
records where each field sits. ``FieldString.mark()`` puts markers back using
a token function, which decides the output form (editor syntax, bare
placeholder, or anything else).

During a render, ``FieldRenderer`` is the single function that turns raw
values into output text. Field indices in a value are relative: each value's
indices are offset by the last index already emitted in the same render, so
``$1`` is the first free tab stop and fields coming from different nodes
never collide.

Example:
    >>> model = parse_fields("Hello ${1:world}!")
    >>> model.string
    'Hello world!'
    >>> model.mark(create_token)
    'Hello ${1:world}!'

Thread Safety:
    Parsing is pure. A FieldRenderer carries per-render counter state and must
    not be shared between concurrent renders.

"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import TypeAlias

from abbrmarkup.errors import FieldParseError

FieldToken: TypeAlias = Callable[[int, str], str]
"""Emits one field: ``token(index, placeholder) -> str``."""

_INDEX = re.compile(r"[0-9]+")


@dataclass(frozen=True, slots=True)
class Field:
    """A tab stop found in a value.

    ``location`` is the offset of the placeholder inside the cleaned string
    of the owning FieldString.
    """

    index: int
    placeholder: str
    location: int

    @property
    def length(self) -> int:
        return len(self.placeholder)


@dataclass(frozen=True, slots=True)
class FieldString:
    """A value with its field markers removed, plus the removed fields."""

    string: str
    fields: tuple[Field, ...] = ()

    def mark(self, token: FieldToken | None = None) -> str:
        """Re-insert every field, emitted through ``token``."""
        return mark(self.string, self.fields, token)

    def shift(self, offset: int) -> FieldString:
        """Return a copy with every field index increased by ``offset``."""
        if not offset or not self.fields:
            return self
        return FieldString(self.string, tuple(replace(f, index=f.index + offset) for f in self.fields))


def create_token(index: int, placeholder: str) -> str:
    """Emit a field in editor snippet syntax."""
    return f"${{{index}:{placeholder}}}" if placeholder else f"${{{index}}}"


def default_field(index: int, placeholder: str) -> str:
    """Emit only the placeholder text (plain markup output)."""
    return placeholder


def parse_fields(text: str) -> FieldString:
    """Find all fields in ``text``.

    Raises:
        FieldParseError: If a placeholder opens a curly brace it never closes
    """
    found: list[Field] = []
    parts: list[str] = []
    clean_length = 0
    copied_to = 0
    pos = 0

    while pos < len(text):
        ch = text[pos]
        if ch == "\\":
            pos += 2
            continue
        if ch == "$":
            consumed = _consume_field(text, pos)
            if consumed is not None:
                index, placeholder, end = consumed
                prefix = text[copied_to:pos]
                location = clean_length + len(prefix)
                parts.append(prefix)
                parts.append(placeholder)
                clean_length = location + len(placeholder)
                found.append(Field(index, placeholder, location))
                copied_to = pos = end
                continue
        pos += 1

    parts.append(text[copied_to:])
    return FieldString("".join(parts), tuple(found))


def mark(string: str, fields: tuple[Field, ...], token: FieldToken | None = None) -> str:
    """Replace each field's placeholder in ``string`` with ``token(index, placeholder)``."""
    token = token or create_token
    ordered = sorted(enumerate(fields), key=lambda item: (item[1].location + item[1].length, item[0]))

    parts: list[str] = []
    offset = 0
    for _, f in ordered:
        end = f.location + f.length
        parts.append(string[offset : f.location])
        parts.append(token(f.index, string[f.location : end]))
        offset = end
    parts.append(string[offset:])
    return "".join(parts)


def lowest_index_field(model: FieldString) -> Field | None:
    """Return the field with the smallest index (first one wins on ties)."""
    result: Field | None = None
    for f in model.fields:
        if result is None or f.index < result.index:
            result = f
    return result


def split_at_field(model: FieldString, field: Field) -> tuple[FieldString, FieldString]:
    """Split ``model`` around ``field``, dropping the field itself.

    Locations of fields in the right part are rebased onto its own string.
    """
    ix = model.fields.index(field)
    cut = field.location + field.length
    left = FieldString(model.string[: field.location], model.fields[:ix])
    right = FieldString(
        model.string[cut:],
        tuple(replace(f, location=f.location - cut) for f in model.fields[ix + 1 :]),
    )
    return left, right


class FieldRenderer:
    """Per-render field output function.

    Called with a raw value (or an already parsed FieldString) it returns the
    value with fields emitted by the token function. Called with None it
    allocates a fresh empty tab stop.

    Usage:
        >>> render_fields = FieldRenderer(create_token)
        >>> render_fields(None)
        '${1}'
        >>> render_fields("${1:a} ${2:b}")
        '${2:a} ${3:b}'
        >>> render_fields.last_index
        3

    """

    __slots__ = ("_last_index", "_token")

    def __init__(self, token: FieldToken | None = None) -> None:
        self._token = token or default_field
        self._last_index = 0

    @property
    def last_index(self) -> int:
        """Highest tab stop emitted so far, 0 before the first one."""
        return self._last_index

    def __call__(self, value: str | FieldString | None) -> str:
        if value is None:
            self._last_index += 1
            return self._token(self._last_index, "")

        model = value if isinstance(value, FieldString) else parse_fields(value)
        model = model.shift(self._last_index)
        if model.fields:
            self._last_index = max(f.index for f in model.fields)
        return model.mark(self._token)


def _consume_field(text: str, start: int) -> tuple[int, str, int] | None:
    """Match ``$N`` or ``${N[:placeholder]}`` at ``start`` (which holds ``$``)."""
    pos = start + 1
    match = _INDEX.match(text, pos)
    if match:
        return int(match.group()), "", match.end()

    if text.startswith("{", pos):
        match = _INDEX.match(text, pos + 1)
        if match:
            pos = match.end()
            placeholder = ""
            if text.startswith(":", pos):
                placeholder, pos = _consume_placeholder(text, pos + 1)
            if text.startswith("}", pos):
                return int(match.group()), placeholder, pos + 1
    return None


def _consume_placeholder(text: str, start: int) -> tuple[str, int]:
    """Consume placeholder text up to the first unbalanced ``}``."""
    open_braces: list[int] = []
    pos = start
    while pos < len(text):
        ch = text[pos]
        if ch == "{":
            open_braces.append(pos)
        elif ch == "}":
            if not open_braces:
                break
            open_braces.pop()
        pos += 1

    if open_braces:
        raise FieldParseError('Unable to find matching "}" for curly brace', position=open_braces[-1])
    return text[start:pos], pos
