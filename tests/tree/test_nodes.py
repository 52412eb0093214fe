"""Tests for JsonNode dataclass and JsonKind StrEnum.

Verifies:
- JsonKind has exactly 7 members with lowercase string values
- true and false are distinct kinds (never unified as "boolean")
- JsonNode defaults and independent mutable payload lists
- is_scalar / is_object / is_array dispatch over every kind
"""

import pytest

from harmonization_accuracy.tree.nodes import JsonKind, JsonNode


class TestJsonKind:
    def test_has_exactly_seven_members(self) -> None:
        assert len(JsonKind) == 7

    def test_values_are_lowercased(self) -> None:
        assert JsonKind.OBJECT == "object"
        assert JsonKind.ARRAY == "array"
        assert JsonKind.STRING == "string"
        assert JsonKind.NUMBER == "number"
        assert JsonKind.TRUE == "true"
        assert JsonKind.FALSE == "false"
        assert JsonKind.NULL == "null"

    def test_booleans_are_distinct_kinds(self) -> None:
        assert JsonKind.TRUE != JsonKind.FALSE
        assert "boolean" not in {str(kind) for kind in JsonKind}

    def test_members_are_str_instances(self) -> None:
        for member in JsonKind:
            assert isinstance(member, str)


class TestJsonNode:
    def test_defaults(self) -> None:
        node = JsonNode(JsonKind.OBJECT)
        assert node.text == ""
        assert node.members == []
        assert node.elements == []

    def test_payload_lists_are_independent(self) -> None:
        a = JsonNode(JsonKind.OBJECT)
        b = JsonNode(JsonKind.OBJECT)
        a.members.append(("x", JsonNode(JsonKind.NULL, "null")))
        assert b.members == []

    @pytest.mark.parametrize(
        "kind",
        [
            JsonKind.STRING,
            JsonKind.NUMBER,
            JsonKind.TRUE,
            JsonKind.FALSE,
            JsonKind.NULL,
        ],
    )
    def test_scalar_kinds(self, kind: JsonKind) -> None:
        node = JsonNode(kind)
        assert node.is_scalar
        assert not node.is_object
        assert not node.is_array

    def test_object_flags(self) -> None:
        node = JsonNode(JsonKind.OBJECT)
        assert node.is_object
        assert not node.is_scalar
        assert not node.is_array

    def test_array_flags(self) -> None:
        node = JsonNode(JsonKind.ARRAY)
        assert node.is_array
        assert not node.is_scalar
        assert not node.is_object
