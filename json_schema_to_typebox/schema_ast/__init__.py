"""
Schema AST module.

Contains the classified shape definitions and the classifier for JSON Schema.
"""

from __future__ import annotations

from .classifier import SchemaClassifier
from .nodes import (
    AllOfShape,
    AnyOfShape,
    ArrayShape,
    CombinatorShape,
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

__all__ = [
    "SchemaClassifier",
    "SchemaShape",
    "RefShape",
    "EnumShape",
    "ConstShape",
    "CombinatorShape",
    "AllOfShape",
    "AnyOfShape",
    "OneOfShape",
    "NotShape",
    "MultipleTypesShape",
    "ObjectShape",
    "PropertyEntry",
    "ArrayShape",
    "TypeNameShape",
    "UnknownShape",
]
