"""
JSON Schema shape classifier.

Decides which single shape a schema fragment is, by presence of keys.
Shapes overlap at the key level (a fragment may carry both `enum` and
`type`), so the rules are evaluated in a fixed order and the first match
wins: references, then enum/const, then the combinators, then the
declared `type`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from .nodes import (
    AllOfShape,
    AnyOfShape,
    ArrayShape,
    ConstShape,
    EnumShape,
    MultipleTypesShape,
    NotShape,
    ObjectShape,
    OneOfShape,
    PropertyEntry,
    RefShape,
    SchemaShape,
    TypeNameShape,
    UnknownShape,
)

logger = logging.getLogger(__name__)

Predicate = Callable[[dict[str, Any]], bool]


def _as_list(value: Any) -> list[Any]:
    """Coerce a malformed list-valued keyword into a list."""
    if isinstance(value, list):
        return value
    if value is None:
        return []
    return [value]


class SchemaClassifier:
    """Classifies raw schema fragments into shapes."""

    def __init__(self):
        # Order matters: first matching predicate wins.
        self.rules: list[tuple[str, Predicate, Callable[[dict[str, Any], str], SchemaShape]]] = [
            ("ref", lambda s: isinstance(s.get("$ref"), str), self._ref),
            ("enum", lambda s: "enum" in s, self._enum),
            ("const", lambda s: "const" in s, self._const),
            ("allOf", lambda s: "allOf" in s, self._all_of),
            ("anyOf", lambda s: "anyOf" in s, self._any_of),
            ("oneOf", lambda s: "oneOf" in s, self._one_of),
            ("not", lambda s: "not" in s, self._not),
            ("multipleTypes", lambda s: isinstance(s.get("type"), list), self._multiple_types),
            ("object", lambda s: s.get("type") == "object", self._object),
            ("array", lambda s: s.get("type") == "array", self._array),
        ]

    def classify(self, schema: Any, path: str = "#") -> SchemaShape:
        """
        Classify a schema fragment.

        Args:
            schema: The raw schema fragment (normally a dict)
            path: Location of the fragment in the source document

        Returns:
            The matching shape. Never raises: anything unrecognised becomes
            a TypeNameShape (or an UnknownShape for non-mapping fragments).
        """
        if not isinstance(schema, dict):
            logger.warning("Schema at %s is not an object (%r), using unknown type", path, schema)
            return UnknownShape(raw=schema, source_path=path)

        for name, predicate, factory in self.rules:
            if predicate(schema):
                logger.debug("Classified %s as %s", path, name)
                return factory(schema, path)

        return TypeNameShape(schema=schema, type_name=schema.get("type"), source_path=path)

    def _ref(self, schema: dict[str, Any], path: str) -> RefShape:
        return RefShape(schema=schema, ref_path=schema["$ref"], source_path=path)

    def _enum(self, schema: dict[str, Any], path: str) -> EnumShape:
        return EnumShape(schema=schema, values=_as_list(schema["enum"]), source_path=path)

    def _const(self, schema: dict[str, Any], path: str) -> ConstShape:
        return ConstShape(schema=schema, value=schema["const"], source_path=path)

    def _all_of(self, schema: dict[str, Any], path: str) -> AllOfShape:
        return AllOfShape(schema=schema, variants=_as_list(schema["allOf"]), source_path=path)

    def _any_of(self, schema: dict[str, Any], path: str) -> AnyOfShape:
        return AnyOfShape(schema=schema, variants=_as_list(schema["anyOf"]), source_path=path)

    def _one_of(self, schema: dict[str, Any], path: str) -> OneOfShape:
        return OneOfShape(schema=schema, variants=_as_list(schema["oneOf"]), source_path=path)

    def _not(self, schema: dict[str, Any], path: str) -> NotShape:
        return NotShape(schema=schema, negated=schema["not"], source_path=path)

    def _multiple_types(self, schema: dict[str, Any], path: str) -> MultipleTypesShape:
        return MultipleTypesShape(schema=schema, type_names=list(schema["type"]), source_path=path)

    def _object(self, schema: dict[str, Any], path: str) -> ObjectShape:
        """Parse an object node into its property entries."""
        properties = schema.get("properties")
        required = schema.get("required")
        if not isinstance(required, list):
            required = []

        entries = []
        if isinstance(properties, dict):
            for prop_name, prop_schema in properties.items():
                entries.append(
                    PropertyEntry(
                        name=prop_name,
                        value=prop_schema,
                        required=prop_name in required,
                    )
                )

        return ObjectShape(
            schema=schema,
            properties=entries,
            has_properties_key=isinstance(properties, dict),
            source_path=path,
        )

    def _array(self, schema: dict[str, Any], path: str) -> ArrayShape:
        return ArrayShape(schema=schema, items=schema.get("items"), source_path=path)
