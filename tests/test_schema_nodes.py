"""Tests for raw schema classification."""

from flowgen.schema_nodes import (
    ArrayNode,
    Composition,
    EnumNode,
    ObjectNode,
    OneOf,
    PrimitiveNode,
    Reference,
    parse_node,
)


class TestParseNode:
    """Test that each raw schema shape maps to one node kind."""

    def test_reference_wins_over_siblings(self):
        node = parse_node({"$ref": "#/definitions/Pet", "type": "object"})
        assert node == Reference("#/definitions/Pet")

    def test_all_of(self):
        node = parse_node({"allOf": [{"$ref": "#/definitions/A"}, {"type": "string"}]})
        assert node == Composition((Reference("#/definitions/A"), PrimitiveNode("string")))

    def test_one_of(self):
        node = parse_node({"oneOf": [{"type": "string"}, {"type": "integer"}]})
        assert isinstance(node, OneOf)
        assert len(node.alternatives) == 2

    def test_enum_takes_precedence_over_type(self):
        node = parse_node({"type": "string", "enum": ["a", "b"]})
        assert node == EnumNode(("a", "b"))

    def test_empty_enum_falls_back_to_type(self):
        assert parse_node({"type": "string", "enum": []}) == PrimitiveNode("string")

    def test_array_items(self):
        node = parse_node({"type": "array", "items": {"type": "string"}})
        assert node == ArrayNode(PrimitiveNode("string"))

    def test_array_without_items(self):
        assert parse_node({"type": "array"}) == ArrayNode(PrimitiveNode())

    def test_object_properties_in_order(self):
        node = parse_node({
            "type": "object",
            "required": ["b"],
            "properties": {"b": {"type": "string"}, "a": {"type": "integer"}},
        })
        assert isinstance(node, ObjectNode)
        assert [name for name, _ in node.properties] == ["b", "a"]
        assert node.required == frozenset({"b"})

    def test_properties_without_type_is_object(self):
        node = parse_node({"properties": {"a": {"type": "string"}}})
        assert isinstance(node, ObjectNode)
        assert [name for name, _ in node.properties] == ["a"]

    def test_non_list_required_ignored(self):
        node = parse_node({"type": "object", "required": True, "properties": {"a": {"type": "string"}}})
        assert isinstance(node, ObjectNode)
        assert node.required == frozenset()

    def test_non_string_required_entries_ignored(self):
        node = parse_node({"type": "object", "required": ["a", 3, None]})
        assert node.required == frozenset({"a"})

    def test_primitive(self):
        assert parse_node({"type": "boolean"}) == PrimitiveNode("boolean")

    def test_empty_schema(self):
        assert parse_node({}) == PrimitiveNode()

    def test_non_mapping(self):
        assert parse_node(None) == PrimitiveNode()
