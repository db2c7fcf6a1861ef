"""
TypeBox expression builder.

Turns classified schema shapes into TypeBox construction code
(`Type.Object(...)`, `Type.Union([...])`, ...). Nested fragments go back
through the classifier, so the whole translation is one recursive walk.

The builder is total: any JSON value produces an expression. Fragments
that cannot be expressed degrade to `Type.Unknown()`.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

from ..schema_ast import (
    AllOfShape,
    AnyOfShape,
    ArrayShape,
    ConstShape,
    EnumShape,
    MultipleTypesShape,
    NotShape,
    ObjectShape,
    OneOfShape,
    RefShape,
    SchemaClassifier,
    SchemaShape,
    TypeNameShape,
)
from .literals import (
    extract_options,
    format_literal_value,
    format_options,
    format_property_key,
    is_literal_value,
)

logger = logging.getLogger(__name__)

_LOCAL_REF_PATTERN = re.compile(r"#/(?:definitions|\$defs)/(.+)", re.DOTALL)

UNKNOWN = "Type.Unknown()"


class TypeBoxBuilder:
    """Builds TypeBox expressions from JSON Schema fragments."""

    SEPARATOR = ", "

    def __init__(
        self,
        definitions: Mapping[str, str] | None = None,
        classifier: SchemaClassifier | None = None,
    ):
        """
        Initialize the builder.

        Args:
            definitions: Already emitted named definitions, mapping the
                definition key to the identifier it was declared under
            classifier: Classifier used for every nested fragment
        """
        self.definitions: dict[str, str] = dict(definitions or {})
        self.classifier = classifier or SchemaClassifier()

        # Set once any expression needs the OneOf helper
        self.uses_one_of = False

    def build(self, schema: Any, path: str = "#") -> str:
        """Classify a schema fragment and build its expression."""
        return self.build_shape(self.classifier.classify(schema, path))

    def build_shape(self, shape: SchemaShape) -> str:
        match shape:
            case RefShape():
                return self.build_ref(shape)
            case EnumShape():
                return self.build_enum(shape)
            case ConstShape():
                return self.build_const(shape)
            case AllOfShape():
                return self._call("Type.Intersect", self._build_list(shape.variants, f"{shape.source_path}/allOf"), extract_options(shape.schema))
            case AnyOfShape():
                return self._call("Type.Union", self._build_list(shape.variants, f"{shape.source_path}/anyOf"), extract_options(shape.schema))
            case OneOfShape():
                self.uses_one_of = True
                return self._call("OneOf", self._build_list(shape.variants, f"{shape.source_path}/oneOf"), extract_options(shape.schema))
            case NotShape():
                return self.build_not(shape)
            case MultipleTypesShape():
                return self.build_multiple_types(shape)
            case ObjectShape():
                return self.build_object(shape)
            case ArrayShape():
                return self.build_array(shape)
            case TypeNameShape():
                return self.build_type_name(shape.type_name, extract_options(shape.schema), shape.source_path)
            case _:
                return UNKNOWN

    # ------------------------------------------------------------------
    # Shape handlers
    # ------------------------------------------------------------------

    def build_ref(self, shape: RefShape) -> str:
        """Reference an already emitted named definition by its identifier."""
        ref_match = _LOCAL_REF_PATTERN.fullmatch(shape.ref_path)
        if ref_match:
            # JSON pointer escapes: ~1 is "/", ~0 is "~"
            key = ref_match.group(1).replace("~1", "/").replace("~0", "~")
            if key in self.definitions:
                return self.definitions[key]

        logger.warning("Cannot resolve $ref %r at %s, using unknown type", shape.ref_path, shape.source_path)
        return UNKNOWN

    def build_enum(self, shape: EnumShape) -> str:
        """Always a union, even for a single value."""
        literals = [self._literal(value, shape.source_path) for value in shape.values]
        return self._call("Type.Union", self._list(literals), extract_options(shape.schema))

    def build_const(self, shape: ConstShape) -> str:
        options = extract_options(shape.schema)
        if isinstance(shape.value, list):
            literals = [self._literal(value, shape.source_path) for value in shape.value]
            return self._call("Type.Union", self._list(literals), options)
        return self._literal(shape.value, shape.source_path, options)

    def build_not(self, shape: NotShape) -> str:
        negated = self.build(shape.negated, f"{shape.source_path}/not")
        return self._call("Type.Not", negated, extract_options(shape.schema))

    def build_object(self, shape: ObjectShape, allow_empty: bool = False) -> str:
        """
        Build a Type.Object from the declared properties.

        Args:
            shape: The object shape
            allow_empty: Emit `Type.Object({})` for an empty `properties`
                mapping instead of falling back to unknown

        Returns:
            The object expression, or an unknown expression when the object
            declares no properties
        """
        options = extract_options(shape.schema)
        if not shape.properties and not (allow_empty and shape.has_properties_key):
            return self._call("Type.Unknown", options=options)

        members = []
        for prop in shape.properties:
            value = self.build(prop.value, f"{shape.source_path}/properties/{prop.name}")
            if not prop.required:
                value = f"Type.Optional({value})"
            members.append(f"{format_property_key(prop.name)}: {value}")

        return self._call("Type.Object", "{" + self.SEPARATOR.join(members) + "}", options)

    def build_array(self, shape: ArrayShape) -> str:
        """
        Build a Type.Array.

        Options come from the array fragment itself; options of the items
        stay on the item expression.
        """
        items = shape.items
        if items is None:
            element = UNKNOWN
        elif isinstance(items, list):
            element = self._call("Type.Union", self._build_list(items, f"{shape.source_path}/items"))
        else:
            element = self.build(items, f"{shape.source_path}/items")

        return self._call("Type.Array", element, extract_options(shape.schema))

    def build_multiple_types(self, shape: MultipleTypesShape) -> str:
        """
        Build a union out of a list of declared types.

        A single-entry list is the same as the bare type. "object" and
        "array" entries are translated from the whole fragment and keep its
        options; the remaining entries become plain primitive arms.
        """
        type_names = shape.type_names
        if len(type_names) == 1:
            return self.build(dict(shape.schema, type=type_names[0]), shape.source_path)

        options = extract_options(shape.schema)
        if not type_names:
            return self.build_type_name(None, options, shape.source_path)

        structured = "object" in type_names or "array" in type_names

        arms = []
        for type_name in type_names:
            if type_name == "object":
                object_shape = self.classifier.classify(dict(shape.schema, type="object"), shape.source_path)
                arms.append(self.build_object(object_shape, allow_empty=True))
            elif type_name == "array":
                arms.append(self.build(dict(shape.schema, type="array"), shape.source_path))
            else:
                arms.append(self.build_type_name(type_name, path=shape.source_path))

        return self._call("Type.Union", self._list(arms), None if structured else options)

    def build_type_name(self, type_name: Any, options: dict[str, Any] | None = None, path: str = "#") -> str:
        """Map a bare type token to its primitive constructor."""
        match type_name:
            case "number":
                constructor = "Type.Number"
            case "integer":
                constructor = "Type.Integer"
            case "string":
                constructor = "Type.String"
            case "boolean":
                constructor = "Type.Boolean"
            case "null":
                constructor = "Type.Null"
            case _:
                if type_name is not None:
                    logger.warning("Unknown type %r at %s, using unknown type", type_name, path)
                constructor = "Type.Unknown"

        return self._call(constructor, options=options)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _literal(self, value: Any, path: str, options: dict[str, Any] | None = None) -> str:
        if value is None:
            return self._call("Type.Null", options=options)
        if is_literal_value(value):
            return self._call("Type.Literal", format_literal_value(value), options)

        logger.warning("Cannot express %r as a literal at %s, using unknown type", value, path)
        return self._call("Type.Unknown", options=options)

    def _build_list(self, schemas: list[Any], path: str) -> str:
        return self._list([self.build(schema, f"{path}/{i}") for i, schema in enumerate(schemas)])

    def _list(self, expressions: list[str]) -> str:
        return "[" + self.SEPARATOR.join(expressions) + "]"

    def _call(self, constructor: str, argument: str = "", options: dict[str, Any] | None = None) -> str:
        """Compose a constructor call; options are appended only when non-empty."""
        arguments = [argument] if argument else []
        if options:
            arguments.append(format_options(options))
        return f"{constructor}({self.SEPARATOR.join(arguments)})"


def schema_to_typebox(schema: Any, definitions: Mapping[str, str] | None = None) -> str:
    """Translate one schema fragment into a TypeBox expression."""
    return TypeBoxBuilder(definitions).build(schema)
