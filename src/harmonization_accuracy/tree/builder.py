"""JsonTreeBuilder: converts JSON text (or decoded Python values) into JsonNode trees.

Parsing goes through the standard ``json`` module with three hooks so that
nothing the scorers care about is lost on the way:

- ``object_pairs_hook`` keeps object members in document order, including
  repeated member names (a plain dict would silently keep only the last one).
- ``parse_int`` / ``parse_float`` keep number literals as their source text,
  so ``8500.0`` is reported as ``"8500.0"`` and ``1e2`` as ``"1e2"``.
- ``parse_constant`` rejects ``NaN``, ``Infinity`` and ``-Infinity``, which
  Python accepts by default but which are not valid JSON.

Both the decoder and ``build`` recurse once per nesting level, so a document
nested past the interpreter's recursion limit raises RecursionError.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass
from typing import Any

from harmonization_accuracy.tree.nodes import JsonKind, JsonNode

__all__ = ["JsonTreeBuilder"]


class _NumberLiteral(str):
    """Marker type for a number literal captured verbatim by the decoder."""

    __slots__ = ()


class _Members(list):  # type: ignore[type-arg]
    """Marker type for the ordered (name, value) pairs of a decoded object."""

    __slots__ = ()


def _reject_constant(literal: str) -> Any:
    msg = f"Invalid JSON literal: {literal}"
    raise ValueError(msg)


@dataclass
class JsonTreeBuilder:
    """Converts JSON documents into JsonNode trees.

    The dispatch order in ``build`` matters: bool is checked before int because
    bool subclasses int, and the decoder's marker types are checked before the
    builtin str/list they derive from.

    Example::

        builder = JsonTreeBuilder()
        tree = builder.parse('{"wellId": "Alpha-1", "depth": 8500}')
        # tree: OBJECT -> [("wellId", STRING "Alpha-1"), ("depth", NUMBER "8500")]
    """

    def parse(self, text: str | bytes | bytearray) -> JsonNode:
        """Parse JSON text into a JsonNode tree.

        Args:
            text: A complete JSON document.

        Returns:
            The root JsonNode of the document.

        Raises:
            TypeError: If ``text`` is not str, bytes or bytearray.
            json.JSONDecodeError: If ``text`` is not well-formed JSON.
            ValueError: If ``text`` uses the NaN/Infinity extensions.
            RecursionError: If ``text`` nests deeper than the recursion limit.
        """
        if not isinstance(text, (str, bytes, bytearray)):
            msg = f"JSON document must be str or bytes, got {type(text).__name__}"
            raise TypeError(msg)

        decoded = json.loads(
            text,
            object_pairs_hook=_Members,
            parse_int=_NumberLiteral,
            parse_float=_NumberLiteral,
            parse_constant=_reject_constant,
        )
        return self.build(decoded)

    def build(self, value: Any) -> JsonNode:
        """Convert a decoded JSON value into a JsonNode tree.

        Accepts both the output of ``parse``'s decoder hooks and ordinary
        Python values (dict, list, str, int, float, bool, None).

        Raises:
            TypeError: If the value is not a JSON type.
            ValueError: If a float is NaN or infinite.
        """
        if isinstance(value, bool):
            if value:
                return JsonNode(JsonKind.TRUE, "true")
            return JsonNode(JsonKind.FALSE, "false")

        if isinstance(value, _NumberLiteral):
            return JsonNode(JsonKind.NUMBER, str(value))

        if isinstance(value, str):
            return JsonNode(JsonKind.STRING, value)

        if isinstance(value, (int, float)):
            if isinstance(value, float) and not math.isfinite(value):
                msg = f"Non-finite number is not valid JSON: {value!r}"
                raise ValueError(msg)
            return JsonNode(JsonKind.NUMBER, json.dumps(value))

        if value is None:
            return JsonNode(JsonKind.NULL, "null")

        if isinstance(value, _Members):
            return self._build_object(value)

        if isinstance(value, dict):
            return self._build_object(list(value.items()))

        if isinstance(value, (list, tuple)):
            return JsonNode(
                JsonKind.ARRAY, elements=[self.build(item) for item in value]
            )

        msg = f"Unsupported JSON value type: {type(value)!r}"
        raise TypeError(msg)

    def _build_object(self, pairs: list[tuple[Any, Any]]) -> JsonNode:
        node = JsonNode(JsonKind.OBJECT)
        for name, child in pairs:
            if not isinstance(name, str):
                msg = f"JSON object keys must be strings, got {type(name)!r}"
                raise TypeError(msg)
            node.members.append((name, self.build(child)))
        return node
