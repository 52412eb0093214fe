"""Tests for extract_values().

Objects and arrays are transparent; scalars come out as text in document
order; duplicates are kept; null contributes nothing.
"""

from __future__ import annotations

import pytest

from harmonization_accuracy.tree.builder import JsonTreeBuilder
from harmonization_accuracy.tree.extractor import extract_values
from harmonization_accuracy.tree.nodes import JsonKind, JsonNode


@pytest.fixture
def builder() -> JsonTreeBuilder:
    return JsonTreeBuilder()


class TestExtractValues:
    def test_mixed_document_order(self, builder: JsonTreeBuilder) -> None:
        tree = builder.parse(
            '{"a": [1, {"b": true}], "c": "x", "d": null, "e": false}'
        )
        assert extract_values(tree) == ["1", "true", "x", "false"]

    def test_number_literal_text(self, builder: JsonTreeBuilder) -> None:
        tree = builder.parse('{"depth": 8500.0, "rate": 1e2}')
        assert extract_values(tree) == ["8500.0", "1e2"]

    def test_duplicates_retained(self, builder: JsonTreeBuilder) -> None:
        assert extract_values(builder.parse('[1, 1, "1"]')) == ["1", "1", "1"]

    def test_deeply_nested_order(self, builder: JsonTreeBuilder) -> None:
        tree = builder.parse(
            '{"well": {"id": "A-1", "logs": [["GR", "SP"], {"unit": "API"}]},'
            ' "status": "active"}'
        )
        assert extract_values(tree) == ["A-1", "GR", "SP", "API", "active"]

    def test_empty_object(self, builder: JsonTreeBuilder) -> None:
        assert extract_values(builder.parse("{}")) == []

    def test_only_nulls(self, builder: JsonTreeBuilder) -> None:
        assert extract_values(builder.parse('{"a": null, "b": [null]}')) == []

    def test_scalar_root(self, builder: JsonTreeBuilder) -> None:
        assert extract_values(builder.parse('"Alpha-1"')) == ["Alpha-1"]

    def test_strings_are_not_re_encoded(self, builder: JsonTreeBuilder) -> None:
        tree = builder.parse('{"note": "line\\nbreak \\"quoted\\""}')
        assert extract_values(tree) == ['line\nbreak "quoted"']

    def test_deep_array_without_recursion(self) -> None:
        depth = 5000
        root = JsonNode(JsonKind.ARRAY)
        current = root
        for _ in range(depth):
            child = JsonNode(JsonKind.ARRAY)
            current.elements.append(child)
            current = child
        current.elements.append(JsonNode(JsonKind.STRING, "bottom"))
        assert extract_values(root) == ["bottom"]
