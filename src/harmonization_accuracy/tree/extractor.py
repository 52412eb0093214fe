"""Scalar value extraction for data-completeness scoring.

Objects and arrays are transparent: every member (document order) and every
element (index order) is visited and only scalar leaves are emitted, as text.
Duplicates are kept.  ``null`` carries no information and emits nothing.
"""

from __future__ import annotations

from harmonization_accuracy.tree.nodes import JsonKind, JsonNode

__all__ = ["extract_values"]


def extract_values(node: JsonNode) -> list[str]:
    """Return every scalar leaf of ``node`` in document order.

    Strings are returned as decoded, numbers as their literal source text and
    booleans as ``"true"`` / ``"false"``.

    Example::

        extract_values(builder.parse('{"a": [1, {"b": true}], "c": "x"}'))
        # ["1", "true", "x"]
    """
    values: list[str] = []
    stack: list[JsonNode] = [node]
    while stack:
        current = stack.pop()
        if current.kind == JsonKind.OBJECT:
            stack.extend(child for _, child in reversed(current.members))
        elif current.kind == JsonKind.ARRAY:
            stack.extend(reversed(current.elements))
        elif current.kind != JsonKind.NULL:
            values.append(current.text)
    return values
