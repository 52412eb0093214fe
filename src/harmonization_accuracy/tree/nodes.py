"""JsonNode dataclass and JsonKind StrEnum: the JSON value sum type.

Every document handed to the scorers is converted into a tree of JsonNode
objects first.  The node's ``kind`` is the tag of the union; the payload
fields that are meaningful depend on it:

- OBJECT -> ``members``  : ordered (name, child) pairs, duplicates preserved
- ARRAY  -> ``elements`` : ordered child nodes
- STRING -> ``text``     : the decoded string
- NUMBER -> ``text``     : the number literal exactly as written in the source
- TRUE / FALSE / NULL    : ``text`` is the literal ("true", "false", "null")
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto


class JsonKind(StrEnum):
    """The seven raw JSON value kinds.

    StrEnum values are the lowercased member names, so a kind can be used
    directly as the field type tag reported by the flattener:
    - OBJECT -> "object"
    - ARRAY  -> "array"
    - STRING -> "string"
    - NUMBER -> "number"
    - TRUE   -> "true"
    - FALSE  -> "false"
    - NULL   -> "null"

    Booleans keep their literal tag: ``true`` and ``false`` are two
    distinct kinds, never unified as "boolean".
    """

    OBJECT = auto()
    ARRAY = auto()
    STRING = auto()
    NUMBER = auto()
    TRUE = auto()
    FALSE = auto()
    NULL = auto()


_SCALAR_KINDS = frozenset(
    {JsonKind.STRING, JsonKind.NUMBER, JsonKind.TRUE, JsonKind.FALSE, JsonKind.NULL}
)


@dataclass(slots=True)
class JsonNode:
    """A node of a parsed JSON document.

    Attributes:
        kind:     Which JSON value this node holds (see JsonKind).
        text:     Scalar text.  Decoded string for STRING, literal source text
                  for NUMBER, the keyword for TRUE/FALSE/NULL, empty for
                  containers.
        members:  (name, child) pairs of an OBJECT in document order.
        elements: Children of an ARRAY in index order.
    """

    kind: JsonKind
    text: str = ""
    members: list[tuple[str, JsonNode]] = field(default_factory=list)
    elements: list[JsonNode] = field(default_factory=list)

    @property
    def is_scalar(self) -> bool:
        return self.kind in _SCALAR_KINDS

    @property
    def is_object(self) -> bool:
        return self.kind == JsonKind.OBJECT

    @property
    def is_array(self) -> bool:
        return self.kind == JsonKind.ARRAY
