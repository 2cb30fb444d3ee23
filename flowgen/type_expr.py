"""Flow type-expression tree and its printer.

Synthesized types are built as small trees and printed in one place, so
literal values and property keys are quoted explicitly instead of being
patched into serialized text afterwards.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any, Iterator, Union

_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


@dataclass(frozen=True, slots=True)
class Primitive:
    name: str


@dataclass(frozen=True, slots=True)
class TypeRef:
    name: str


@dataclass(frozen=True, slots=True)
class Literal:
    value: Any


@dataclass(frozen=True, slots=True)
class ArrayOf:
    item: TypeExpr


@dataclass(frozen=True, slots=True)
class UnionType:
    members: tuple[TypeExpr, ...]


@dataclass(frozen=True, slots=True)
class Intersection:
    operands: tuple[TypeExpr, ...]


@dataclass(frozen=True, slots=True)
class Field:
    key: str
    value: TypeExpr
    optional: bool = False


@dataclass(frozen=True, slots=True)
class ObjectType:
    fields: tuple[Field, ...] = ()


TypeExpr = Union[Primitive, TypeRef, Literal, ArrayOf, UnionType, Intersection, ObjectType]

# Flow's existential type, used where an item type cannot be inferred
EXISTENTIAL = Primitive("*")


def quote(value: str) -> str:
    """Single-quote a string for Flow source."""
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def _render_key(key: str) -> str:
    return key if _IDENTIFIER.match(key) else quote(key)


def _render_literal(value: Any) -> str:
    if isinstance(value, str):
        return quote(value)
    return json.dumps(value)


def _render_object(expr: ObjectType, exact: bool) -> str:
    open_, close = ("{|", "|}") if exact else ("{", "}")
    if not expr.fields:
        return open_ + close
    body = ", ".join(
        f"{_render_key(f.key)}{'?' if f.optional else ''}: {render(f.value, exact=exact)}"
        for f in expr.fields
    )
    return f"{open_} {body} {close}"


def render(expr: TypeExpr, *, exact: bool = False) -> str:
    """Print a type expression as Flow source.

    With `exact`, every object literal is printed as an exact object type.
    """
    if isinstance(expr, Primitive):
        return expr.name
    if isinstance(expr, TypeRef):
        return expr.name
    if isinstance(expr, Literal):
        return _render_literal(expr.value)
    if isinstance(expr, ArrayOf):
        return f"Array<{render(expr.item, exact=exact)}>"
    if isinstance(expr, UnionType):
        return " | ".join(render(m, exact=exact) for m in expr.members)
    if isinstance(expr, Intersection):
        parts = []
        for operand in expr.operands:
            text = render(operand, exact=exact)
            if isinstance(operand, UnionType) and len(operand.members) > 1:
                text = f"({text})"
            parts.append(text)
        return " & ".join(parts)
    if isinstance(expr, ObjectType):
        return _render_object(expr, exact)
    raise TypeError(f"Unknown type expression: {expr!r}")


def iter_refs(expr: TypeExpr) -> Iterator[str]:
    """Yield referenced type names in print order."""
    if isinstance(expr, TypeRef):
        yield expr.name
    elif isinstance(expr, ArrayOf):
        yield from iter_refs(expr.item)
    elif isinstance(expr, UnionType):
        for member in expr.members:
            yield from iter_refs(member)
    elif isinstance(expr, Intersection):
        for operand in expr.operands:
            yield from iter_refs(operand)
    elif isinstance(expr, ObjectType):
        for f in expr.fields:
            yield from iter_refs(f.value)
