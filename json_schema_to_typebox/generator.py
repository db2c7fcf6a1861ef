"""
TypeBox module generator.

Translates the named definitions of a JSON Schema document, then the
root schema, into TypeBox declarations and renders them as a TypeScript
module:

1. Collect named definitions (`definitions` / `$defs`) in declaration order
2. Build one TypeBox expression per definition and for the root schema
3. Render the prelude and the declarations through Jinja2 templates
4. Optionally format the result with prettier
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import jinja2

from . import __version__
from .config import CodeGeneratorConfig
from .formatters import PrettierFormatter
from .typebox import TypeBoxBuilder
from .typebox.literals import STRUCTURAL_KEYS
from .utils import to_type_name

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent.resolve() / "templates"

DEFINITION_KEYS = ("definitions", "$defs")

# Document-level keys that never become constructor options
DOCUMENT_KEYS = frozenset({"definitions", "$defs", "$schema"})

# Identifiers imported or declared by the module prelude
PRELUDE_NAMES = frozenset({"Static", "Type", "Kind", "SchemaOptions", "TSchema", "TUnion", "TypeRegistry", "Value", "OneOf"})


@dataclass
class Declaration:
    """A named TypeBox declaration."""

    name: str
    expression: str
    source_path: str = "#"


class TypeBoxGenerator:
    """Generates a TypeScript module of TypeBox declarations from a JSON Schema."""

    def __init__(
        self,
        schema: dict[str, Any],
        name: str | None = None,
        config: CodeGeneratorConfig | None = None,
        command_line: str | None = None,
    ):
        """
        Initialize the generator.

        Args:
            schema: The parsed JSON Schema document
            name: Name for the root declaration; defaults to the schema title
            config: Code generation configuration
            command_line: Command line shown in the generated-file banner
        """
        self.schema = schema
        self.config = config or CodeGeneratorConfig()
        self.command_line = command_line

        title = schema.get("title")
        self.root_name = to_type_name(name or (title if isinstance(title, str) else ""))

        self.builder = TypeBoxBuilder()
        self._used_names: set[str] = set()

        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
            lstrip_blocks=True,
            trim_blocks=True,
        )
        self.prefix_template = self.jinja_env.get_template("prefix.ts.jinja2")
        self.declaration_template = self.jinja_env.get_template("declaration.ts.jinja2")

    def collect_definitions(self) -> list[tuple[str, str, Any]]:
        """
        Collect named definitions in declaration order.

        Returns:
            (definition key, source path, definition schema) triples
        """
        collected = []
        for container in DEFINITION_KEYS:
            definitions = self.schema.get(container)
            if not isinstance(definitions, dict):
                continue
            for key, body in definitions.items():
                collected.append((key, f"#/{container}/{key}", body))
        return collected

    def build_declarations(self) -> list[Declaration]:
        """Build one declaration per named definition, then one for the root."""
        declarations = []
        self.builder = TypeBoxBuilder()

        # Reserve the root name first so definitions never shadow it
        self._used_names = set(PRELUDE_NAMES)
        root_name = self._unique_name(self.root_name)

        for key, path, body in self.collect_definitions():
            name = self._unique_name(to_type_name(key))
            expression = self.builder.build(self._strip_document_keys(body), path)
            # Later definitions (and the root) may now reference this one
            self.builder.definitions[key] = name
            declarations.append(Declaration(name=name, expression=expression, source_path=path))
            logger.debug("Built declaration %s from %s", name, path)

        if self._has_root_shape(declarations):
            expression = self.builder.build(self._strip_document_keys(self.schema), "#")
            declarations.append(Declaration(name=root_name, expression=expression))
            logger.debug("Built root declaration %s", root_name)

        return declarations

    def render(self, declarations: list[Declaration]) -> str:
        """Render the module prelude and declarations as TypeScript source."""
        parts = [
            self.prefix_template.render(
                add_generation_comment=self.config.add_generation_comment,
                version=__version__,
                command_line=self.command_line,
                uses_one_of=self.builder.uses_one_of,
                type_import_module=self.config.type_import_module,
            )
        ]
        for declaration in declarations:
            parts.append(
                self.declaration_template.render(
                    name=declaration.name,
                    expression=declaration.expression,
                    export_declarations=self.config.export_declarations,
                )
            )
        return "\n".join(part.strip("\n") + "\n" for part in parts)

    def generate(self) -> str:
        """
        Generate the TypeScript module.

        Returns:
            Generated code as a string
        """
        declarations = self.build_declarations()
        logger.info("Generated %d TypeBox declaration(s)", len(declarations))
        code = self.render(declarations)

        if self.config.formatter.enabled:
            code = PrettierFormatter(self.config.formatter).format(code)

        return code

    def _has_root_shape(self, declarations: list[Declaration]) -> bool:
        """A pure definitions container has no root declaration of its own."""
        if not declarations:
            return True
        return any(key in STRUCTURAL_KEYS for key in self.schema)

    def _strip_document_keys(self, schema: Any) -> Any:
        if not isinstance(schema, dict):
            return schema
        return {key: value for key, value in schema.items() if key not in DOCUMENT_KEYS}

    def _unique_name(self, name: str) -> str:
        candidate = name
        suffix = 2
        while candidate in self._used_names:
            candidate = f"{name}{suffix}"
            suffix += 1
        self._used_names.add(candidate)
        return candidate


def generate_typebox(schema: dict[str, Any], name: str | None = None, config: CodeGeneratorConfig | None = None) -> str:
    """Convenience function to generate a TypeBox module from a schema."""
    return TypeBoxGenerator(schema, name, config).generate()
