"""
Fatal errors raised by the generation pipeline.

Anything that is not a GenerationError is recovered from where it is
detected (per branch, per element, or while loading overrides).
"""

from __future__ import annotations


class GenerationError(Exception):
    """Raised when a run cannot complete.

    This can happen when:
    - An input directory cannot be read
    - A fragment file does not contain a JSON object
    - The output artifact cannot be written
    """

    pass


class FragmentLoadError(GenerationError):
    """Raised when a fragment directory or file cannot be loaded."""

    pass


class OutputWriteError(GenerationError):
    """Raised when the output artifact cannot be written."""

    pass
