"""Load an OpenAPI document from disk or over HTTP.

Local `.yaml`/`.yml` files are parsed as YAML, everything else as JSON.
Fetched documents are used as-is when the body is a JSON object and
parsed as YAML text otherwise.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any

import httpx
import yaml

from .errors import DocumentLoadError, NoDefinitionsError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0

_URL_PATTERN = re.compile(r"https?://")
_YAML_SUFFIXES = {".yaml", ".yml"}


def is_url(value: str) -> bool:
    """Return True when the source looks like an http(s) URL."""
    return _URL_PATTERN.match(value) is not None


def _ensure_mapping(data: Any, source: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise DocumentLoadError("Document root must be a mapping", source)
    return data


def load_file(path: Path) -> dict[str, Any]:
    """Read and parse a local JSON or YAML document."""
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentLoadError(f"Failed to read document: {e}", str(path)) from e

    try:
        if path.suffix.lower() in _YAML_SUFFIXES:
            data = yaml.safe_load(raw)
        else:
            data = json.loads(raw)
    except (yaml.YAMLError, ValueError) as e:
        raise DocumentLoadError(f"Invalid document: {e}", str(path)) from e

    return _ensure_mapping(data, str(path))


def fetch_document(
    url: str,
    client: httpx.Client | None = None,
    timeout: float | None = DEFAULT_TIMEOUT,
) -> dict[str, Any]:
    """Fetch a document over HTTP.

    A caller-supplied client is used as-is and left open.
    """
    logger.debug("Fetching %s", url)
    try:
        if client is not None:
            resp = client.get(url)
        else:
            with httpx.Client(timeout=timeout, follow_redirects=True) as owned:
                resp = owned.get(url)
        resp.raise_for_status()
    except httpx.HTTPError as e:
        raise DocumentLoadError(f"Failed to fetch document: {e}", url) from e

    try:
        data = resp.json()
    except ValueError:
        data = None
    if not isinstance(data, dict):
        try:
            data = yaml.safe_load(resp.text)
        except yaml.YAMLError as e:
            raise DocumentLoadError(f"Invalid document: {e}", url) from e

    return _ensure_mapping(data, url)


def load_document(
    source: str,
    client: httpx.Client | None = None,
    timeout: float | None = DEFAULT_TIMEOUT,
) -> dict[str, Any]:
    """Load a document from a file path or URL."""
    if is_url(source):
        return fetch_document(source, client=client, timeout=timeout)
    return load_file(Path(source))


def get_definitions(document: dict[str, Any], source: str | None = None) -> dict[str, Any]:
    """Extract the named schemas from an OpenAPI 2 or 3 document.

    An empty map is valid and yields no definitions; a missing one is not.
    """
    definitions = document.get("definitions")
    if definitions is None:
        components = document.get("components") or {}
        definitions = components.get("schemas") if isinstance(components, dict) else None
    if not isinstance(definitions, dict):
        raise NoDefinitionsError(source)
    return definitions
