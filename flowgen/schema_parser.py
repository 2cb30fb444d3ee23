"""Synthesize Flow type expressions from OpenAPI schemas.

Handles:
- $ref resolution to bare type names
- allOf composition (intersection, concrete objects before references)
- oneOf unions, including inside array items
- Array item types (refs, inline objects, primitives)
- String enums as literal unions
- Optional property markers when required-checking is enabled
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .naming import definition_type_name
from .schema_nodes import (
    ArrayNode,
    Composition,
    EnumNode,
    ObjectNode,
    OneOf,
    PrimitiveNode,
    Reference,
    SchemaNode,
)
from .type_expr import (
    EXISTENTIAL,
    ArrayOf,
    Field,
    Intersection,
    Literal,
    ObjectType,
    Primitive,
    TypeExpr,
    TypeRef,
    UnionType,
)

logger = logging.getLogger(__name__)

# Swagger data types are based on the types supported by JSON-Schema Draft 4.
TYPE_MAPPING: dict[str, str] = {
    "array": "Array<*>",
    "boolean": "boolean",
    "integer": "number",
    "number": "number",
    "null": "null",
    "object": "Object",
    "string": "string",
}


@dataclass(frozen=True, slots=True)
class GeneratorOptions:
    """Switches that change the generated types.

    check_required: mark properties missing from `required` as optional.
    exact: print object literals as exact object types.
    """
    check_required: bool = False
    exact: bool = False


def _reference(node: Reference, definition: str | None) -> TypeRef:
    return TypeRef(definition_type_name(node.ref, definition))


def _alternative(
    node: SchemaNode, options: GeneratorOptions, definition: str | None,
) -> TypeExpr:
    """Type for one oneOf alternative; inline objects keep their fields."""
    if isinstance(node, ObjectNode):
        return build_properties(node, options, definition)
    return synthesize(node, options, definition) or EXISTENTIAL


def _array(node: ArrayNode, options: GeneratorOptions, definition: str | None) -> ArrayOf:
    items = node.items
    if isinstance(items, OneOf) and items.alternatives:
        return ArrayOf(UnionType(tuple(
            _alternative(alt, options, definition) for alt in items.alternatives
        )))
    if isinstance(items, Reference):
        return ArrayOf(_reference(items, definition))
    if isinstance(items, ObjectNode):
        return ArrayOf(build_properties(items, options, definition))
    return ArrayOf(synthesize(items, options, definition) or EXISTENTIAL)


def synthesize(
    node: SchemaNode,
    options: GeneratorOptions,
    definition: str | None = None,
) -> TypeExpr | None:
    """Return the type expression for a property-level schema.

    Returns None when the schema has neither a known `type` nor a `$ref`.
    `definition` names the schema being generated, for error context.
    """
    if isinstance(node, ArrayNode):
        return _array(node, options, definition)
    if isinstance(node, EnumNode):
        return UnionType(tuple(Literal(value) for value in node.values))
    if isinstance(node, Reference):
        return _reference(node, definition)
    if isinstance(node, Composition):
        return build_properties(node, options, definition)
    if isinstance(node, OneOf):
        if not node.alternatives:
            return None
        return UnionType(tuple(
            _alternative(alt, options, definition) for alt in node.alternatives
        ))
    if isinstance(node, ObjectNode):
        return Primitive(TYPE_MAPPING["object"])
    if isinstance(node, PrimitiveNode):
        mapped = TYPE_MAPPING.get(node.type_name) if node.type_name else None
        return Primitive(mapped) if mapped else None
    raise TypeError(f"Unknown schema node: {node!r}")


def _composition(
    node: Composition, options: GeneratorOptions, definition: str | None,
) -> TypeExpr:
    operands: list[TypeExpr] = []
    for member in node.members:
        built = build_properties(member, options, definition)
        if isinstance(built, Intersection):
            operands.extend(built.operands)
        else:
            operands.append(built)
    if not operands:
        return ObjectType()

    # Concrete object operands read first; references trail as `& Name`.
    concrete = [op for op in operands if not isinstance(op, TypeRef)]
    refs = [op for op in operands if isinstance(op, TypeRef)]
    return Intersection(tuple(concrete + refs))


def _object(node: ObjectNode, options: GeneratorOptions, definition: str | None) -> ObjectType:
    fields: dict[str, Field] = {}
    for name, sub in node.properties:
        value = synthesize(sub, options, definition)
        if value is None:
            logger.debug("Skipping untyped property %s.%s", definition, name)
            continue
        optional = options.check_required and name not in node.required
        fields[name] = Field(name, value, optional)
    return ObjectType(tuple(fields.values()))


def build_properties(
    node: SchemaNode,
    options: GeneratorOptions,
    definition: str | None = None,
) -> TypeExpr:
    """Build the type for a named schema body.

    allOf bodies become intersections, a bare $ref becomes an alias,
    non-object schemas become their synthesized type and objects become
    object literals with one field per property.
    """
    if isinstance(node, Composition):
        return _composition(node, options, definition)

    if isinstance(node, Reference):
        return _reference(node, definition)

    if isinstance(node, (ArrayNode, EnumNode, OneOf)):
        return synthesize(node, options, definition) or EXISTENTIAL

    if isinstance(node, PrimitiveNode):
        if node.type_name is None:
            return ObjectType()
        return synthesize(node, options, definition) or EXISTENTIAL

    if isinstance(node, ObjectNode):
        return _object(node, options, definition)

    raise TypeError(f"Unknown schema node: {node!r}")
