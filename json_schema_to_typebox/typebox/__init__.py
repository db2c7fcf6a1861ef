"""
TypeBox expression generation.
"""

from __future__ import annotations

from .builder import UNKNOWN, TypeBoxBuilder, schema_to_typebox
from .literals import extract_options, format_literal_value, format_options, format_property_key

__all__ = [
    "TypeBoxBuilder",
    "schema_to_typebox",
    "UNKNOWN",
    "extract_options",
    "format_literal_value",
    "format_options",
    "format_property_key",
]
