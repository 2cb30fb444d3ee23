"""Shared fixtures for flowgen tests.

Two small pet-store documents, one per OpenAPI major version, with the
same schemas so generation results can be compared across them.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import httpx
import pytest
import yaml


def _schemas(prefix: str) -> dict[str, Any]:
    return {
        "Category": {
            "type": "object",
            "properties": {
                "id": {"type": "integer"},
                "name": {"type": "string"},
            },
        },
        "Tag": {
            "type": "object",
            "required": ["name"],
            "properties": {
                "name": {"type": "string"},
            },
        },
        "Pet": {
            "type": "object",
            "required": ["name"],
            "properties": {
                "id": {"type": "integer"},
                "category": {"$ref": f"{prefix}Category"},
                "name": {"type": "string"},
                "tags": {"type": "array", "items": {"$ref": f"{prefix}Tag"}},
                "status": {"type": "string", "enum": ["available", "pending", "sold"]},
            },
        },
        "Dog": {
            "allOf": [
                {"$ref": f"{prefix}Pet"},
                {"type": "object", "properties": {"barks": {"type": "boolean"}}},
            ],
        },
        "PetList": {"type": "array", "items": {"$ref": f"{prefix}Pet"}},
    }


@pytest.fixture
def swagger_doc() -> dict[str, Any]:
    """OpenAPI 2 document with a `definitions` map."""
    return {"swagger": "2.0", "definitions": _schemas("#/definitions/")}


@pytest.fixture
def openapi_doc() -> dict[str, Any]:
    """OpenAPI 3 document with a `components.schemas` map."""
    return {"openapi": "3.0.0", "components": {"schemas": _schemas("#/components/schemas/")}}


@pytest.fixture
def write_doc(tmp_path: Path) -> Callable[[dict[str, Any], str], Path]:
    """Write a document to tmp_path as JSON or YAML, chosen by file name."""
    def _write(document: dict[str, Any], name: str = "api.json") -> Path:
        path = tmp_path / name
        if path.suffix in (".yaml", ".yml"):
            path.write_text(yaml.safe_dump(document, sort_keys=False), encoding="utf-8")
        else:
            path.write_text(json.dumps(document), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def mock_client() -> Callable[..., httpx.Client]:
    """Build an httpx.Client whose every request gets the given response."""
    def _client(status_code: int = 200, **response_kwargs: Any) -> httpx.Client:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, **response_kwargs)
        return httpx.Client(transport=httpx.MockTransport(handler))
    return _client
