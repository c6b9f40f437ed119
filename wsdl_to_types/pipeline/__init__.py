"""
Pipeline - schema fragments to TypeScript declarations.

This module provides a multi-phase architecture for generating type
declarations from per-type schema fragment records:

1. Phase 1 (Classifier): Normalize each raw fragment into branch nodes
2. Phase 2 (Builder): Build a structured declaration per fragment,
   applying override rules
3. Phase 3 (Registry): Collect declarations in emission order
4. Phase 4 (Backend): Render declarations with Jinja2 templates
5. Phase 5 (Writer): Atomically write the output artifact
"""

from __future__ import annotations

from .atomic_writer import AtomicWriter
from .config import GeneratorConfig
from .errors import FragmentLoadError, GenerationError, OutputWriteError
from .generator import PipelineGenerator
from .overrides import OverrideStore
from .registry import TypeRegistry

__all__ = [
    "PipelineGenerator",
    "GeneratorConfig",
    "GenerationError",
    "FragmentLoadError",
    "OutputWriteError",
    "OverrideStore",
    "TypeRegistry",
    "AtomicWriter",
]
