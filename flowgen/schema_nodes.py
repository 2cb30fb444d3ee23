"""Typed views over raw OpenAPI schema mappings.

Each raw schema is classified once by parse_node() into one of the node
classes below. Everything downstream dispatches on the node class instead
of probing mapping keys.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True, slots=True)
class Reference:
    """A `$ref` pointer to another named schema."""
    ref: str


@dataclass(frozen=True, slots=True)
class Composition:
    """An `allOf` list; every member must hold."""
    members: tuple[SchemaNode, ...]


@dataclass(frozen=True, slots=True)
class OneOf:
    """A `oneOf` list; exactly one alternative holds."""
    alternatives: tuple[SchemaNode, ...]


@dataclass(frozen=True, slots=True)
class ArrayNode:
    """`type: array` with its item schema."""
    items: SchemaNode


@dataclass(frozen=True, slots=True)
class ObjectNode:
    """An object with a property map and required names."""
    properties: tuple[tuple[str, SchemaNode], ...] = ()
    required: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True, slots=True)
class EnumNode:
    """An enumeration of literal values, order preserved."""
    values: tuple[Any, ...]


@dataclass(frozen=True, slots=True)
class PrimitiveNode:
    """Any other schema; `type_name` is the raw `type`, if any."""
    type_name: str | None = None


SchemaNode = Union[Reference, Composition, OneOf, ArrayNode, ObjectNode, EnumNode, PrimitiveNode]


def parse_node(schema: Any) -> SchemaNode:
    """Classify a raw schema mapping.

    Precedence: $ref, allOf, oneOf, enum, array, object. `enum` wins over
    `type`; `properties` without `type` is treated as an object.
    """
    if not isinstance(schema, dict):
        return PrimitiveNode()

    if "$ref" in schema:
        return Reference(str(schema["$ref"]))

    if "allOf" in schema:
        return Composition(tuple(parse_node(sub) for sub in schema.get("allOf") or []))

    if "oneOf" in schema:
        return OneOf(tuple(parse_node(sub) for sub in schema.get("oneOf") or []))

    schema_type = schema.get("type")
    if not isinstance(schema_type, str):
        schema_type = None

    if "enum" in schema and schema.get("enum"):
        return EnumNode(tuple(schema["enum"]))

    if schema_type == "array":
        return ArrayNode(parse_node(schema.get("items") or {}))

    if schema_type == "object" or "properties" in schema:
        properties = schema.get("properties") or {}
        required = schema.get("required")
        if not isinstance(required, list):
            required = []
        return ObjectNode(
            properties=tuple((name, parse_node(sub)) for name, sub in properties.items()),
            required=frozenset(name for name in required if isinstance(name, str)),
        )

    return PrimitiveNode(schema_type)
