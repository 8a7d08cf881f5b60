"""Schema document loading.

Schemas reach the generator either as JSON text or as an already-parsed
mapping. Files on disk may be JSON or YAML.
"""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from schema_hypermedia.errors import MalformedSchemaError


def parse_schema(schema: str | Mapping[str, Any]) -> dict[str, Any]:
    """Parse schema JSON text (or accept a parsed mapping) into a dict."""
    if isinstance(schema, Mapping):
        return dict(schema)

    try:
        doc = json.loads(schema)
    except (json.JSONDecodeError, TypeError) as e:
        raise MalformedSchemaError(f"Schema is not valid JSON: {e}") from e

    if not isinstance(doc, dict):
        raise MalformedSchemaError(
            f"Schema must be a JSON object, got {type(doc).__name__}"
        )
    return doc


def load_schema_file(file_path: Path) -> dict[str, Any]:
    """Load a JSON or YAML schema document from disk."""
    try:
        doc = read_document(file_path)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise MalformedSchemaError(f"Schema file {file_path} cannot be parsed: {e}") from e

    if not isinstance(doc, dict):
        raise MalformedSchemaError(f"Schema file {file_path} must contain an object")
    return doc


def read_document(file_path: Path) -> Any:
    """Read a JSON or YAML file, picking the parser from the suffix."""
    text = file_path.read_text(encoding="utf-8")
    if file_path.suffix.lower() == ".json":
        return json.loads(text)
    return yaml.safe_load(text)
