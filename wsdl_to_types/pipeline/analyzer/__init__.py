"""
Analyzer module.

Contains the IR node definitions and the builder that turns classified
fragments into declarations.
"""

from __future__ import annotations

from .builder import BuildResult, DeclarationBuilder
from .ir_nodes import (
    BranchOutcome,
    Declaration,
    DeclarationKind,
    FieldDef,
    FragmentReport,
    SkippedMember,
)

__all__ = [
    "DeclarationBuilder",
    "BuildResult",
    "Declaration",
    "DeclarationKind",
    "FieldDef",
    "BranchOutcome",
    "SkippedMember",
    "FragmentReport",
]
