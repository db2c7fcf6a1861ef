"""JSON Schema to TypeBox Generator

A Python package for generating TypeBox (@sinclair/typebox) validator
declarations from JSON Schema definitions.
"""

__version__ = "1.0.0"

from .config import CodeGeneratorConfig, FormatterConfig, OutputConfig, OutputMode
from .generator import Declaration, TypeBoxGenerator, generate_typebox
from .loader import SchemaLoadError, load_schema
from .typebox import TypeBoxBuilder, schema_to_typebox
from .writer import AtomicWriter, OutputExistsError, write_output

__all__ = [
    "TypeBoxGenerator",
    "TypeBoxBuilder",
    "Declaration",
    "generate_typebox",
    "schema_to_typebox",
    "CodeGeneratorConfig",
    "FormatterConfig",
    "OutputConfig",
    "OutputMode",
    "SchemaLoadError",
    "load_schema",
    "OutputExistsError",
    "AtomicWriter",
    "write_output",
]
