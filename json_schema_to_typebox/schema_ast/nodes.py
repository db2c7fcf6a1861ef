"""
Classified schema shapes.

Each shape wraps the raw JSON Schema fragment it was classified from,
together with the already-extracted parts the builder needs. Shapes are
read-only views: the raw schema is never modified.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class SchemaShape:
    """Base class for all classified shapes."""

    # The raw schema fragment this shape was classified from
    schema: dict[str, Any] = field(default_factory=dict)

    # Location in the source document (for log messages)
    source_path: str = "#"


@dataclass
class RefShape(SchemaShape):
    """A `$ref` pointing at another schema."""

    ref_path: str = ""


@dataclass
class EnumShape(SchemaShape):
    """An `enum` list of allowed values."""

    values: list[Any] = field(default_factory=list)


@dataclass
class ConstShape(SchemaShape):
    """A `const` value. A list value is a union of its elements."""

    value: Any = None


@dataclass
class CombinatorShape(SchemaShape):
    """Base for the list combinators (allOf, anyOf, oneOf)."""

    variants: list[Any] = field(default_factory=list)


@dataclass
class AllOfShape(CombinatorShape):
    pass


@dataclass
class AnyOfShape(CombinatorShape):
    pass


@dataclass
class OneOfShape(CombinatorShape):
    pass


@dataclass
class NotShape(SchemaShape):
    """A negated sub-schema."""

    negated: Any = None


@dataclass
class MultipleTypesShape(SchemaShape):
    """A `type` declared as a list of type names."""

    type_names: list[Any] = field(default_factory=list)


@dataclass
class PropertyEntry:
    """One property of an object shape."""

    name: str
    value: Any
    required: bool = False


@dataclass
class ObjectShape(SchemaShape):
    """An object with (possibly no) declared properties."""

    properties: list[PropertyEntry] = field(default_factory=list)

    # Whether the schema carried a `properties` key at all
    has_properties_key: bool = False


@dataclass
class ArrayShape(SchemaShape):
    """An array. `items` is None, a single sub-schema or a list of them."""

    items: Any = None


@dataclass
class TypeNameShape(SchemaShape):
    """A bare type token such as "string" or "number", or anything else."""

    type_name: Any = None


@dataclass
class UnknownShape(SchemaShape):
    """A fragment that is not a mapping at all (e.g. a boolean schema)."""

    raw: Any = None
