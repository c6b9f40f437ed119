"""
Atomic file writer for the generated declarations.

Ensures that an interrupted run never leaves a truncated output file.
"""

from __future__ import annotations

import tempfile
from pathlib import Path

from .errors import OutputWriteError


class AtomicWriter:
    """Handles atomic file writes.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Atomically replace the target file
    """

    def write(self, path: Path, content: str) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write

        Raises:
            OutputWriteError: If file operations fail
        """
        path = Path(path)
        temp_path = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)

            # Same directory ensures atomic rename on the same filesystem
            temp_fd, temp_path_str = tempfile.mkstemp(
                dir=path.parent,
                prefix=f".{path.name}.",
                suffix=".tmp",
                text=True,
            )
            temp_path = Path(temp_path_str)

            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)

            temp_path.replace(path)
        except OSError as e:
            if temp_path is not None and temp_path.exists():
                try:
                    temp_path.unlink()
                except OSError:
                    pass  # Best effort cleanup
            raise OutputWriteError(f"Cannot write output file {path}: {e}") from e
