"""Field-path views of a JsonNode tree.

``flatten`` maps every object member to its JSON kind, expanding nested
objects but never arrays:

    {"well": {"id": "A-1", "tags": ["x"]}}
    -> {"well": object, "well.id": string, "well.tags": array}

The object entry ("well") and its children ("well.id", ...) are separate keys;
a canonical object therefore counts as one required field on its own.

``leaf_fields`` lists the members whose value is not an object.  Unlike
``flatten`` it looks inside arrays, so the members of objects held in an array
are reported under the array's path (indices are never part of a path).
``member_fields`` is the same walk with object-valued members included.

The walks keep an explicit stack instead of recursing, so they accept any
tree they are given.  Parsing text is another matter: ``JsonTreeBuilder``
stops at the interpreter's recursion limit, and a document nested deeper than
that fails to parse with RecursionError.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import NamedTuple

from harmonization_accuracy.tree.nodes import JsonKind, JsonNode

__all__ = ["MemberField", "flatten", "join_path", "leaf_fields", "member_fields"]


class MemberField(NamedTuple):
    """A document member: its dot-joined path and its own member name."""

    path: str
    name: str


def join_path(prefix: str, name: str) -> str:
    """Append ``name`` to a dot-joined field path."""
    return f"{prefix}.{name}" if prefix else name


def flatten(node: JsonNode) -> dict[str, JsonKind]:
    """Map each field path of an object tree to its raw JSON kind.

    Paths are recorded in document pre-order.  A repeated member name keeps
    the position of its first occurrence and the kind of its last.

    Args:
        node: Root of a parsed document.  Must be an OBJECT.

    Returns:
        Ordered mapping of dot-joined field path to JsonKind.

    Raises:
        TypeError: If the root is not an object.
    """
    if not node.is_object:
        msg = f"Cannot flatten a JSON {node.kind} document, expected an object"
        raise TypeError(msg)

    fields: dict[str, JsonKind] = {}
    stack: list[tuple[str, Iterator[tuple[str, JsonNode]]]] = [
        ("", iter(node.members))
    ]
    while stack:
        prefix, members = stack[-1]
        entry = next(members, None)
        if entry is None:
            stack.pop()
            continue
        name, child = entry
        path = join_path(prefix, name)
        fields[path] = child.kind
        if child.is_object:
            stack.append((path, iter(child.members)))
    return fields


def leaf_fields(node: JsonNode) -> list[MemberField]:
    """List the distinct non-object members of a document in pre-order.

    A member holding a scalar or an array is a leaf.  Objects found inside
    arrays (at any array depth) are walked as if they sat at the array's path.
    The root may be of any kind; a scalar root has no fields.
    """
    return _walk_members(node, include_objects=False)


def member_fields(node: JsonNode) -> list[MemberField]:
    """List every distinct member of a document in pre-order.

    Same walk as ``leaf_fields``, but object-valued members are reported too,
    ahead of their own members.
    """
    return _walk_members(node, include_objects=True)


def _walk_members(node: JsonNode, *, include_objects: bool) -> list[MemberField]:
    seen: dict[str, MemberField] = {}
    # (path, node, member name); the name is None for the root and for
    # array elements, which are not members themselves.
    stack: list[tuple[str, JsonNode, str | None]] = [("", node, None)]
    while stack:
        path, current, name = stack.pop()
        if name is not None and (include_objects or not current.is_object):
            seen.setdefault(path, MemberField(path, name))
        if current.is_array:
            stack.extend(
                (path, element, None) for element in reversed(current.elements)
            )
        elif current.is_object:
            stack.extend(
                (join_path(path, member), child, member)
                for member, child in reversed(current.members)
            )
    return list(seen.values())
