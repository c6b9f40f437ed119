"""
Node definitions for classified schema fragments.

These nodes represent one named schema type after its single-or-list
properties have been normalized, before any type mapping or rendering.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Branch(str, Enum):
    """Content-model branch of a fragment, in processing order."""

    ENUMERATION = "enumeration"
    COMPLEX_CONTENT = "complexContent"
    SEQUENCE = "sequence"
    RESTRICTION = "restriction"
    SIMPLE_CONTENT = "simpleContent"
    ATTRIBUTES = "attributes"


@dataclass
class MemberDef:
    """An element of a sequence/choice/all group, or an attribute."""

    name: str | None = None
    type_ref: str | None = None
    min_occurs: str | None = None
    max_occurs: str | None = None

    # Attribute "use" indicator ("optional", "required", "prohibited")
    use: str | None = None

    # Raw "xs:annotation" node
    annotation: Any = None

    # Whether the element comes from a choice group
    in_choice: bool = False

    # The record as found in the fragment (for warnings)
    raw: Any = None


@dataclass
class EnumValue:
    """One literal of an enumeration."""

    value: str = ""
    annotation: Any = None


@dataclass
class EnumerationNode:
    """A restriction to a fixed set of literal values."""

    base: str | None = None
    values: list[EnumValue] = field(default_factory=list)


@dataclass
class RestrictionNode:
    """A restriction without enumeration values."""

    base: str | None = None


@dataclass
class GroupNode:
    """Member elements of a sequence, choice or all group."""

    compositor: str = "sequence"
    elements: list[MemberDef] = field(default_factory=list)

    # Whether the group accepts arbitrary extra content (xs:any)
    has_any: bool = False


@dataclass
class ComplexExtensionNode:
    """Complex content extending a base type."""

    base: str | None = None
    groups: list[GroupNode] = field(default_factory=list)
    attributes: list[MemberDef] = field(default_factory=list)


@dataclass
class SimpleExtensionNode:
    """Simple content: a base scalar value plus attributes."""

    base: str | None = None
    attributes: list[MemberDef] = field(default_factory=list)


@dataclass
class SchemaFragment:
    """One named schema type, classified into content-model branches."""

    name: str = ""

    # Raw top-level "xs:annotation" node
    annotation: Any = None

    enumeration: EnumerationNode | None = None
    complex_extension: ComplexExtensionNode | None = None
    groups: list[GroupNode] = field(default_factory=list)
    restriction: RestrictionNode | None = None
    simple_extension: SimpleExtensionNode | None = None
    attributes: list[MemberDef] = field(default_factory=list)

    # Branches whose shape could not be read, with the error raised
    errors: dict[Branch, Exception] = field(default_factory=dict)

    # Origin of the record (for log messages)
    source_path: str = ""

    @property
    def is_enumeration(self) -> bool:
        return self.enumeration is not None

    @property
    def branches(self) -> list[Branch]:
        """Branches present in the fragment, in processing order."""
        present = {
            Branch.ENUMERATION: self.enumeration is not None,
            Branch.COMPLEX_CONTENT: self.complex_extension is not None,
            Branch.SEQUENCE: bool(self.groups),
            Branch.RESTRICTION: self.restriction is not None,
            Branch.SIMPLE_CONTENT: self.simple_extension is not None,
            Branch.ATTRIBUTES: bool(self.attributes),
        }
        return [branch for branch in Branch if present[branch] or branch in self.errors]
