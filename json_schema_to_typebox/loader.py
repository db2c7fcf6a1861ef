"""
Schema loading.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


class SchemaLoadError(Exception):
    """Raised when a schema file cannot be read or is not a JSON object."""

    pass


def load_schema(path: str | Path) -> dict[str, Any]:
    """
    Read a JSON Schema document from disk.

    Args:
        path: Path to the schema file

    Returns:
        The parsed schema

    Raises:
        SchemaLoadError: If the file cannot be read, is not valid JSON, or
            does not contain a JSON object
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            schema = json.load(f)
    except OSError as e:
        raise SchemaLoadError(f"Cannot read schema file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise SchemaLoadError(f"Schema file {path} is not valid JSON: {e}") from e

    if not isinstance(schema, dict):
        raise SchemaLoadError(f"Schema file {path} must contain a JSON object, got {type(schema).__name__}")

    return schema
