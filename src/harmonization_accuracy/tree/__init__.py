"""Tree subpackage: the JSON value sum type and the walks over it.

Re-exports the public API for the tree module:
- JsonNode / JsonKind: tagged-union representation of a JSON value
- JsonTreeBuilder: JSON text -> JsonNode, number literals preserved
- flatten: field path -> JsonKind map (objects expand, arrays do not)
- leaf_fields / member_fields: members (objects excluded / included), looking
  inside arrays
- extract_values: ordered scalar leaves as text
- FieldNameNormalizer: splits member names across naming conventions
"""

from harmonization_accuracy.tree.builder import JsonTreeBuilder
from harmonization_accuracy.tree.extractor import extract_values
from harmonization_accuracy.tree.flattener import (
    MemberField,
    flatten,
    leaf_fields,
    member_fields,
)
from harmonization_accuracy.tree.nodes import JsonKind, JsonNode
from harmonization_accuracy.tree.normalizer import FieldNameNormalizer

__all__ = [
    "FieldNameNormalizer",
    "JsonKind",
    "JsonNode",
    "JsonTreeBuilder",
    "MemberField",
    "extract_values",
    "flatten",
    "leaf_fields",
    "member_fields",
]
