"""Tests for JsonTreeBuilder.

Covers parsing of every JSON kind, preservation of number literal text,
member order and duplicate member names, rejection of NaN/Infinity,
RecursionError past the recursion limit, bool/int dispatch ordering for
already-decoded values, and input type errors.
"""

from __future__ import annotations

import json
import sys

import pytest

from harmonization_accuracy.tree.builder import JsonTreeBuilder
from harmonization_accuracy.tree.nodes import JsonKind, JsonNode

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def builder() -> JsonTreeBuilder:
    return JsonTreeBuilder()


def _member(node: JsonNode, name: str) -> JsonNode:
    return next(child for key, child in node.members if key == name)


# ---------------------------------------------------------------------------
# parse(): kinds
# ---------------------------------------------------------------------------


class TestParseKinds:
    def test_object_root(self, builder: JsonTreeBuilder) -> None:
        tree = builder.parse('{"wellId": "Alpha-1", "depth": 8500}')
        assert tree.kind == JsonKind.OBJECT
        assert [name for name, _ in tree.members] == ["wellId", "depth"]

    def test_string_member(self, builder: JsonTreeBuilder) -> None:
        tree = builder.parse('{"wellId": "Alpha-1"}')
        child = _member(tree, "wellId")
        assert child.kind == JsonKind.STRING
        assert child.text == "Alpha-1"

    def test_number_member(self, builder: JsonTreeBuilder) -> None:
        child = _member(builder.parse('{"depth": 8500}'), "depth")
        assert child.kind == JsonKind.NUMBER
        assert child.text == "8500"

    def test_boolean_members(self, builder: JsonTreeBuilder) -> None:
        tree = builder.parse('{"a": true, "b": false}')
        assert _member(tree, "a").kind == JsonKind.TRUE
        assert _member(tree, "a").text == "true"
        assert _member(tree, "b").kind == JsonKind.FALSE
        assert _member(tree, "b").text == "false"

    def test_null_member(self, builder: JsonTreeBuilder) -> None:
        child = _member(builder.parse('{"a": null}'), "a")
        assert child.kind == JsonKind.NULL

    def test_array_root(self, builder: JsonTreeBuilder) -> None:
        tree = builder.parse('[1, "two", {"three": 3}]')
        assert tree.kind == JsonKind.ARRAY
        kinds = [element.kind for element in tree.elements]
        assert kinds == [JsonKind.NUMBER, JsonKind.STRING, JsonKind.OBJECT]

    def test_scalar_root(self, builder: JsonTreeBuilder) -> None:
        tree = builder.parse('"just text"')
        assert tree.kind == JsonKind.STRING
        assert tree.text == "just text"

    def test_nested_object(self, builder: JsonTreeBuilder) -> None:
        tree = builder.parse('{"location": {"county": "Kern"}}')
        location = _member(tree, "location")
        assert location.kind == JsonKind.OBJECT
        assert _member(location, "county").text == "Kern"

    def test_bytes_input(self, builder: JsonTreeBuilder) -> None:
        tree = builder.parse(b'{"a": 1}')
        assert tree.kind == JsonKind.OBJECT


# ---------------------------------------------------------------------------
# parse(): literal preservation
# ---------------------------------------------------------------------------


class TestNumberLiterals:
    @pytest.mark.parametrize("literal", ["8500.0", "1e2", "-0", "1.50", "3E-4"])
    def test_literal_text_preserved(
        self, builder: JsonTreeBuilder, literal: str
    ) -> None:
        tree = builder.parse(literal)
        assert tree.kind == JsonKind.NUMBER
        assert tree.text == literal

    def test_large_integer_preserved(self, builder: JsonTreeBuilder) -> None:
        tree = builder.parse("123456789012345678901234567890")
        assert tree.text == "123456789012345678901234567890"


class TestMemberOrderAndDuplicates:
    def test_document_order_kept(self, builder: JsonTreeBuilder) -> None:
        tree = builder.parse('{"z": 1, "a": 2, "m": 3}')
        assert [name for name, _ in tree.members] == ["z", "a", "m"]

    def test_duplicate_names_kept(self, builder: JsonTreeBuilder) -> None:
        tree = builder.parse('{"a": 1, "a": 2}')
        assert [(name, child.text) for name, child in tree.members] == [
            ("a", "1"),
            ("a", "2"),
        ]


# ---------------------------------------------------------------------------
# parse(): errors
# ---------------------------------------------------------------------------


class TestParseErrors:
    def test_malformed_json_raises_decode_error(
        self, builder: JsonTreeBuilder
    ) -> None:
        with pytest.raises(json.JSONDecodeError):
            builder.parse('{"wellId": ')

    def test_decode_error_is_value_error(self, builder: JsonTreeBuilder) -> None:
        with pytest.raises(ValueError):
            builder.parse("not json")

    @pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity"])
    def test_non_standard_constants_rejected(
        self, builder: JsonTreeBuilder, literal: str
    ) -> None:
        with pytest.raises(ValueError, match="Invalid JSON literal"):
            builder.parse(f'{{"a": {literal}}}')

    def test_nesting_past_recursion_limit(self, builder: JsonTreeBuilder) -> None:
        depth = sys.getrecursionlimit() * 3
        with pytest.raises(RecursionError):
            builder.parse("[" * depth + "]" * depth)

    @pytest.mark.parametrize("value", [None, 42, {"a": 1}])
    def test_non_text_input_raises_type_error(
        self, builder: JsonTreeBuilder, value: object
    ) -> None:
        with pytest.raises(TypeError, match="must be str or bytes"):
            builder.parse(value)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# build(): already-decoded Python values
# ---------------------------------------------------------------------------


class TestBuildFromPython:
    def test_bool_dispatched_before_int(self, builder: JsonTreeBuilder) -> None:
        assert builder.build(True).kind == JsonKind.TRUE
        assert builder.build(False).kind == JsonKind.FALSE

    def test_int_and_float(self, builder: JsonTreeBuilder) -> None:
        assert builder.build(8500).text == "8500"
        assert builder.build(42.0).text == "42.0"

    def test_none(self, builder: JsonTreeBuilder) -> None:
        assert builder.build(None).kind == JsonKind.NULL

    def test_dict_and_list(self, builder: JsonTreeBuilder) -> None:
        tree = builder.build({"tags": ["a", "b"], "n": None})
        tags = _member(tree, "tags")
        assert tags.kind == JsonKind.ARRAY
        assert [e.text for e in tags.elements] == ["a", "b"]

    def test_nan_rejected(self, builder: JsonTreeBuilder) -> None:
        with pytest.raises(ValueError, match="Non-finite"):
            builder.build(float("nan"))

    def test_unsupported_type_raises(self, builder: JsonTreeBuilder) -> None:
        with pytest.raises(TypeError, match="Unsupported JSON value type"):
            builder.build(object())

    def test_non_string_key_raises(self, builder: JsonTreeBuilder) -> None:
        with pytest.raises(TypeError, match="keys must be strings"):
            builder.build({1: "a"})
