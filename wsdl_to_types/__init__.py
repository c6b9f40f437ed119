"""WSDL Schema Fragments to Types

A Python package for generating TypeScript type declarations from the
schema definitions embedded in a WSDL document, once they have been split
into one JSON record per named type.
"""

__version__ = "1.0.0"

from .pipeline import (
    AtomicWriter,
    GenerationError,
    GeneratorConfig,
    OverrideStore,
    PipelineGenerator,
    TypeRegistry,
)

__all__ = [
    "PipelineGenerator",
    "GeneratorConfig",
    "GenerationError",
    "OverrideStore",
    "TypeRegistry",
    "AtomicWriter",
]
