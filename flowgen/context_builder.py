"""Collect per-schema definitions from an OpenAPI document.

Builds one Definition per named schema (title, type expression, imports)
and assembles the template context for the declaration and index files.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .errors import DuplicateTitleError, GeneratorError
from .loader import get_definitions
from .naming import sanitize_title
from .schema_nodes import parse_node
from .schema_parser import GeneratorOptions, build_properties
from .type_expr import TypeExpr, iter_refs, render


@dataclass(frozen=True, slots=True)
class Definition:
    """One named schema ready for emission."""
    name: str
    title: str
    expression: TypeExpr
    imports: tuple[str, ...]


def collect_imports(expression: TypeExpr, title: str) -> tuple[str, ...]:
    """Names the expression refers to, first occurrence first, minus `title`."""
    seen: dict[str, None] = {}
    for name in iter_refs(expression):
        if name != title:
            seen.setdefault(name, None)
    return tuple(seen)


def _check_unique_titles(names: list[str]) -> dict[str, str]:
    """Map schema names to titles, failing on sanitized collisions."""
    by_title: dict[str, list[str]] = {}
    for name in names:
        by_title.setdefault(sanitize_title(name), []).append(name)

    for title, sources in by_title.items():
        if not title:
            raise GeneratorError("Schema name has no usable characters", sources[0])
        if len(sources) > 1:
            raise DuplicateTitleError(title, sources)

    return {name: sanitize_title(name) for name in names}


def build_definitions(
    document: dict[str, Any],
    options: GeneratorOptions,
    source: str | None = None,
) -> list[Definition]:
    """Build a Definition for every named schema, in document order."""
    schemas = get_definitions(document, source)
    titles = _check_unique_titles(list(schemas))

    definitions: list[Definition] = []
    for name, schema in schemas.items():
        title = titles[name]
        expression = build_properties(parse_node(schema), options, title)
        definitions.append(Definition(
            name=name,
            title=title,
            expression=expression,
            imports=collect_imports(expression, title),
        ))
    return definitions


def build_context(definitions: list[Definition], options: GeneratorOptions) -> dict[str, Any]:
    """Build the template context from collected definitions."""
    types = [
        {
            "title": d.title,
            "imports": list(d.imports),
            "expression": render(d.expression, exact=options.exact),
        }
        for d in definitions
    ]
    return {
        "types": types,
        "titles": [d.title for d in definitions],
    }
