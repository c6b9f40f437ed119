"""
Schema fragment module.

Contains the classified fragment node definitions and the classifier that
builds them from raw fragment records.
"""

from __future__ import annotations

from .classifier import SchemaNodeClassifier
from .nodes import (
    Branch,
    ComplexExtensionNode,
    EnumerationNode,
    EnumValue,
    GroupNode,
    MemberDef,
    RestrictionNode,
    SchemaFragment,
    SimpleExtensionNode,
)

__all__ = [
    "Branch",
    "MemberDef",
    "EnumValue",
    "EnumerationNode",
    "RestrictionNode",
    "GroupNode",
    "ComplexExtensionNode",
    "SimpleExtensionNode",
    "SchemaFragment",
    "SchemaNodeClassifier",
]
