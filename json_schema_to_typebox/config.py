"""
Configuration for the TypeBox code generator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when the output file already exists.
    """

    ERROR_IF_EXISTS = "error"  # Default: raise error if file exists
    FORCE = "force"  # Overwrite


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        atomic_write: Whether to use atomic file writes
    """

    mode: OutputMode = OutputMode.ERROR_IF_EXISTS
    atomic_write: bool = True


@dataclass
class FormatterConfig:
    """Configuration for the post-processing formatter."""

    # Whether formatting is enabled
    enabled: bool = False

    # Line width passed to prettier
    print_width: int = 80

    # Command used to run prettier
    command: list[str] = field(default_factory=lambda: ["prettier"])


@dataclass
class CodeGeneratorConfig:
    """Configuration options for code generation."""

    # Add generation comment at top of file
    add_generation_comment: bool = True

    # Module the TypeBox builders are imported from
    type_import_module: str = "@sinclair/typebox"

    # Prefix the declarations with `export`
    export_declarations: bool = True

    # Formatter configuration
    formatter: FormatterConfig = field(default_factory=FormatterConfig)

    # Output configuration
    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary."""
        config = CodeGeneratorConfig()
        for k, v in d.items():
            if k == "formatter" and isinstance(v, dict):
                config.formatter = FormatterConfig(**v)
            elif k == "output" and isinstance(v, dict):
                mode = v.get("mode", OutputMode.ERROR_IF_EXISTS)
                if isinstance(mode, str):
                    mode = OutputMode(mode)
                config.output = OutputConfig(
                    mode=mode,
                    atomic_write=v.get("atomic_write", True),
                )
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "add_generation_comment": self.add_generation_comment,
            "type_import_module": self.type_import_module,
            "export_declarations": self.export_declarations,
            "formatter": {
                "enabled": self.formatter.enabled,
                "print_width": self.formatter.print_width,
                "command": self.formatter.command,
            },
            "output": {
                "mode": self.output.mode.value,
                "atomic_write": self.output.atomic_write,
            },
        }
