"""
Prettier formatter for TypeScript code.
"""

from __future__ import annotations

from .base import Formatter


class PrettierFormatter(Formatter):
    """Formatter using prettier for TypeScript code."""

    DEFAULT_COMMAND = ["prettier"]

    def build_arguments(self) -> list[str]:
        arguments = ["--parser", "typescript", "--stdin-filepath", "generated.ts"]
        if self.config.print_width:
            arguments.extend(["--print-width", str(self.config.print_width)])
        return arguments
