"""
Base class for formatters that run an external command over generated code.
"""

from __future__ import annotations

import logging
import subprocess
from abc import ABC, abstractmethod

from ..config import FormatterConfig

logger = logging.getLogger(__name__)


class Formatter(ABC):
    """Pipes generated source through a command and reads the result from stdout.

    A formatter never fails the generation: when the command is missing or
    exits with an error, the code is returned unchanged.
    """

    # Used when the configuration does not name a command
    DEFAULT_COMMAND: list[str] = []

    def __init__(self, config: FormatterConfig):
        self.config = config
        self.command = list(config.command or self.DEFAULT_COMMAND)
        self._available = None

    @abstractmethod
    def build_arguments(self) -> list[str]:
        """Arguments appended to the command to format stdin to stdout."""

    def is_available(self) -> bool:
        """Check if the command can be run."""
        if self._available is None:
            try:
                result = subprocess.run(
                    [*self.command, "--version"],
                    capture_output=True,
                    text=True,
                    timeout=5,
                )
                self._available = result.returncode == 0
            except (subprocess.SubprocessError, FileNotFoundError):
                self._available = False
        return self._available

    def format(self, code: str) -> str:
        """
        Format the given code.

        Args:
            code: The source code to format

        Returns:
            Formatted code, or the original code if the command is missing or fails
        """
        if not self.is_available():
            logger.warning("%s is not available, leaving generated code unformatted", " ".join(self.command))
            return code

        try:
            result = subprocess.run(
                [*self.command, *self.build_arguments()],
                input=code,
                capture_output=True,
                text=True,
                timeout=30,
            )
        except subprocess.SubprocessError as e:
            logger.warning("%s failed: %s", " ".join(self.command), e)
            return code

        if result.returncode == 0:
            return result.stdout

        logger.warning("%s exited with status %d: %s", " ".join(self.command), result.returncode, result.stderr.strip())
        return code
