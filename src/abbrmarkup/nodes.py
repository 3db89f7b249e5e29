"""Abbreviation tree nodes for abbrmarkup.

Nodes are frozen dataclasses with slots. A tree is built bottom-up: passing
``children`` to a Node attaches them to it, recording a weak reference to the
parent and the child's index. All navigation (parent, siblings) is derived
from those two values, so the tree owns its nodes strictly top-down.

Node kinds:
    ELEMENT          named tag, or a nameless container (e.g. the root)
    TEXT             text-only node: no name, no attributes, non-empty value
    PSEUDO_SNIPPET   text-only node that also has children; its value is a
                     literal wrapper for them

Example:
    >>> root = Node(children=[Node("ul", children=[Node("li"), Node("li")])])
    >>> ul = root.children[0]
    >>> ul.children[1].previous_sibling is ul.children[0]
    True

Thread Safety:
    Nodes are immutable once built and safe to share across threads.

"""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from enum import Enum, auto

from abbrmarkup.errors import TreeError


class NodeKind(Enum):
    """Rendering variant of a node, resolved from its shape."""

    ELEMENT = auto()
    TEXT = auto()
    PSEUDO_SNIPPET = auto()


@dataclass(frozen=True, slots=True)
class Attribute:
    """A single attribute of an abbreviation node.

    ``value`` is None when the abbreviation gave no value (``a[href]``).
    ``implied`` attributes are hints only and are dropped unless a value was
    supplied. ``boolean`` forces boolean-attribute output regardless of the
    profile's boolean attribute list.

    """

    name: str
    value: str | None = None
    implied: bool = False
    boolean: bool = False


@dataclass(frozen=True, slots=True, weakref_slot=True, eq=False)
class Node:
    """One node of a parsed abbreviation tree.

    Equality is identity: two structurally equal nodes at different
    positions are different nodes.

    """

    name: str | None = None
    value: str | None = None
    attributes: tuple[Attribute, ...] = ()
    children: tuple[Node, ...] = ()
    self_closing: bool = False
    _parent: weakref.ref[Node] | None = field(default=None, init=False, repr=False)
    _index: int = field(default=-1, init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", tuple(self.attributes))
        object.__setattr__(self, "children", tuple(self.children))

        # All children are checked before any is attached
        for child in self.children:
            if child.parent is not None:
                msg = f"Node {child.name or child.value!r} already has a parent"
                raise TreeError(msg)

        parent_ref = weakref.ref(self)
        for index, child in enumerate(self.children):
            object.__setattr__(child, "_parent", parent_ref)
            object.__setattr__(child, "_index", index)

    # -- Classification --------------------------------------------------------

    @property
    def is_text_only(self) -> bool:
        """True when the node carries text content and no tag identity."""
        return not self.name and bool(self.value) and not self.attributes

    @property
    def kind(self) -> NodeKind:
        if self.is_text_only:
            return NodeKind.PSEUDO_SNIPPET if self.children else NodeKind.TEXT
        return NodeKind.ELEMENT

    # -- Navigation ------------------------------------------------------------

    @property
    def parent(self) -> Node | None:
        """Owning node, or None for the root (or a detached subtree)."""
        return self._parent() if self._parent is not None else None

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def child_index(self) -> int:
        """Position among the parent's children, -1 for the root."""
        return self._index if self.parent is not None else -1

    @property
    def previous_sibling(self) -> Node | None:
        parent = self.parent
        if parent is None or self._index == 0:
            return None
        return parent.children[self._index - 1]

    @property
    def next_sibling(self) -> Node | None:
        parent = self.parent
        if parent is None or self._index + 1 >= len(parent.children):
            return None
        return parent.children[self._index + 1]

    @property
    def first_child(self) -> Node | None:
        return self.children[0] if self.children else None

    @property
    def last_child(self) -> Node | None:
        return self.children[-1] if self.children else None

    def get_attribute(self, name: str) -> Attribute | None:
        """Return the first attribute called ``name``, or None."""
        for attr in self.attributes:
            if attr.name == name:
                return attr
        return None
