"""Tree serialization — JSON round-trip for abbreviation trees.

Converts Node trees to/from JSON-compatible dicts. Useful for:
- Feeding trees produced by an external abbreviation parser
- Storing expanded snippets as fixtures
- Debugging and inspection

All output is deterministic (sorted keys) for cache-key stability.
Parent links are not stored; they are rebuilt when the tree is rebuilt.

Example:
    from abbrmarkup.serialization import to_json, from_json

    restored = from_json(to_json(tree))
    assert render(restored) == render(tree)

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

import json
from dataclasses import fields
from typing import Any

from abbrmarkup.nodes import Attribute, Node

# Node fields that are derived and never serialized
_PRIVATE_FIELDS = {"_parent", "_index"}


def to_dict(node: Node | Attribute) -> dict[str, Any]:
    """Convert a node (recursively) or attribute to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.

    Args:
        node: A Node or Attribute.

    Returns:
        Dict with ``_type`` and all public fields.

    """
    result: dict[str, Any] = {"_type": type(node).__name__}

    for f in fields(node):
        if f.name in _PRIVATE_FIELDS:
            continue
        value = getattr(node, f.name)
        if isinstance(value, tuple):
            value = [to_dict(item) for item in value]
        result[f.name] = value

    return result


def from_dict(data: dict[str, Any]) -> Node:
    """Rebuild a Node tree from a dict produced by ``to_dict``.

    Raises:
        ValueError: If ``_type`` is missing or is not ``"Node"``.

    """
    obj = _from_dict(data)
    if not isinstance(obj, Node):
        msg = f"Expected Node, got {type(obj).__name__}"
        raise ValueError(msg)
    return obj


def _from_dict(data: dict[str, Any]) -> Node | Attribute:
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized node"
        raise ValueError(msg)

    if type_name == "Attribute":
        return Attribute(
            name=data["name"],
            value=data.get("value"),
            implied=data.get("implied", False),
            boolean=data.get("boolean", False),
        )
    if type_name != "Node":
        msg = f"Unknown node type: {type_name!r}"
        raise ValueError(msg)

    return Node(
        name=data.get("name"),
        value=data.get("value"),
        attributes=tuple(_from_dict(item) for item in data.get("attributes", ())),
        children=tuple(_from_dict(item) for item in data.get("children", ())),
        self_closing=data.get("self_closing", False),
    )


def to_json(tree: Node, *, indent: int | None = None) -> str:
    """Serialize a tree to a JSON string.

    Args:
        tree: Root node to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps(to_dict(tree), sort_keys=True, indent=indent)


def from_json(data: str) -> Node:
    """Deserialize a tree from a JSON string produced by ``to_json``."""
    return from_dict(json.loads(data))
