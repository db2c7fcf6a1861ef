"""
Atomic file writer for generated code.

Ensures that file writes are atomic to prevent data corruption
from interrupted operations.
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path

from .config import OutputConfig, OutputMode

logger = logging.getLogger(__name__)


class OutputExistsError(FileExistsError):
    """Raised when the output file exists and overwriting is not allowed."""

    pass


class AtomicWriter:
    """Handles atomic file writes.

    Writes to a temporary file in the same directory, then replaces the
    target in one step, so an interrupted write never leaves the target
    file in an incomplete state.
    """

    def write(self, path: Path, content: str) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write

        Raises:
            OSError: If file operations fail
        """
        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )
        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)
            temp_path.replace(path)
        except Exception:
            temp_path.unlink(missing_ok=True)
            raise


def write_output(path: str | Path, content: str, config: OutputConfig) -> None:
    """
    Write generated code according to the output configuration.

    Raises:
        OutputExistsError: If the file exists and the mode is ERROR_IF_EXISTS
    """
    path = Path(path)
    if path.exists() and config.mode == OutputMode.ERROR_IF_EXISTS:
        raise OutputExistsError(f"Output file already exists: {path}. Use --force to overwrite.")

    if config.atomic_write:
        AtomicWriter().write(path, content)
    else:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")

    logger.debug("Wrote %d characters to %s", len(content), path)
