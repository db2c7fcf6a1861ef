"""
Low-level formatting helpers shared by every TypeBox expression.

Covers literal values, object property keys and constructor options.
"""

from __future__ import annotations

import json
import re
from typing import Any

# Keys that select or structure a shape; they never travel as options
STRUCTURAL_KEYS = frozenset(
    {
        "$ref",
        "type",
        "properties",
        "required",
        "enum",
        "const",
        "allOf",
        "anyOf",
        "oneOf",
        "not",
        "items",
    }
)

_IDENTIFIER_PATTERN = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")

# TypeScript reserved words, which must be quoted when used as keys
TS_RESERVED_WORDS = {
    "break",
    "case",
    "catch",
    "class",
    "const",
    "continue",
    "debugger",
    "default",
    "delete",
    "do",
    "else",
    "enum",
    "export",
    "extends",
    "false",
    "finally",
    "for",
    "function",
    "if",
    "import",
    "in",
    "instanceof",
    "new",
    "null",
    "return",
    "super",
    "switch",
    "this",
    "throw",
    "true",
    "try",
    "typeof",
    "var",
    "void",
    "while",
    "with",
}


def to_json(value: Any) -> str:
    """Serialize a value as compact JSON text, keeping non-ASCII characters."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def is_identifier(name: str) -> bool:
    """Check whether a property name can be written as a bare object key."""
    return bool(_IDENTIFIER_PATTERN.fullmatch(name)) and name not in TS_RESERVED_WORDS


def format_property_key(name: Any) -> str:
    """
    Format an object property key.

    Examples:
        "unquoted" -> unquoted
        "$" -> $
        "with-hyphen" -> "with-hyphen"
        "6" -> "6"
    """
    name = str(name)
    if is_identifier(name):
        return name
    return to_json(name)


def is_literal_value(value: Any) -> bool:
    """Check whether a value can be the argument of Type.Literal."""
    return isinstance(value, (str, bool, int, float))


def format_literal_value(value: Any) -> str:
    """
    Format a scalar as literal source text.

    Strings are quoted; numbers and booleans use their canonical JSON form.
    """
    return to_json(value)


def extract_options(schema: dict[str, Any]) -> dict[str, Any]:
    """Return the schema without its structural keys."""
    return {key: value for key, value in schema.items() if key not in STRUCTURAL_KEYS}


def format_options(options: dict[str, Any]) -> str:
    """Serialize constructor options. Every shape goes through this function."""
    return to_json(options)
