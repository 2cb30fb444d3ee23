"""Resolve $ref pointers and schema names to Flow type names.

Pointer patterns:
  - OpenAPI 2: #/definitions/{name}
  - OpenAPI 3: #/components/schemas/{name}

Examples:
  #/definitions/Pet                    -> Pet
  #/components/schemas/Order           -> Order
  #/definitions/ResponseEntity«Pet»    -> ResponseEntityPet
  #/definitions/Map['string']          -> Mapstring
"""

from __future__ import annotations

import re

from .errors import UnresolvedReferenceError

_REF_PATTERN = re.compile(r"#/definitions/(.*)|#/components/schemas/(.*)")

# swagger-core injects these around generic type arguments
# https://github.com/swagger-api/swagger-core/issues/498
_GENERIC_MARKERS = ("«", "»")

_BRACKETS = re.compile(r"[\[\]']+")
_NON_IDENTIFIER = re.compile(r"[^A-Za-z0-9_$]")


def remove_generic_markers(value: str) -> str:
    """Drop generic-instantiation markers from a name."""
    for marker in _GENERIC_MARKERS:
        value = value.replace(marker, "")
    return value


def strip_brackets(name: str) -> str:
    """Strip bracket and quote characters."""
    return _BRACKETS.sub("", name)


def sanitize_title(name: str) -> str:
    """Turn a schema name into a Flow identifier.

    Generic markers are removed rather than escaped, then brackets, quotes
    and anything else that cannot appear in an identifier.
    """
    title = strip_brackets(remove_generic_markers(name))
    return _NON_IDENTIFIER.sub("", title)


def definition_type_name(ref: str, definition: str | None = None) -> str:
    """Return the type name a $ref pointer refers to.

    Raises UnresolvedReferenceError when the pointer matches neither
    pattern or leaves nothing after sanitizing.
    """
    found = _REF_PATTERN.search(ref)
    if not found:
        raise UnresolvedReferenceError(ref, definition)
    name = sanitize_title(found.group(1) or found.group(2) or "")
    if not name:
        raise UnresolvedReferenceError(ref, definition)
    return name
