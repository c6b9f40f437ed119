"""
IR (Intermediate Representation) node definitions.

These nodes represent generated declarations as structured field lists,
ready to be rendered by a backend, plus the per-fragment report of what
went wrong while building them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ..fragment.nodes import Branch


class DeclarationKind(str, Enum):
    """Kind of declaration in the IR."""

    ALIAS = "alias"  # type Name = <expression>
    STRUCTURED = "structured"  # interface Name [extends Base] { ... }


@dataclass
class FieldDef:
    """A field of a declaration body."""

    name: str = ""
    type_name: str = ""
    is_optional: bool = False
    is_array: bool = False

    # Single-line documentation attached to the field
    documentation: str | None = None

    # Catch-all field accepting arbitrary keys and values
    is_index_signature: bool = False


@dataclass
class Declaration:
    """A generated type declaration."""

    name: str = ""
    kind: DeclarationKind = DeclarationKind.STRUCTURED

    # Documentation block lines (one line per entry)
    documentation: list[str] = field(default_factory=list)

    # Base type for structured declarations
    extends: str | None = None

    # Aliased type expression (a union, primitive or referenced type)
    alias_target: str | None = None

    # Body fields, in emission order
    fields: list[FieldDef] = field(default_factory=list)

    # Comment lines emitted at the top of a structured body
    notes: list[str] = field(default_factory=list)

    def find_field(self, name: str) -> FieldDef | None:
        """Return the first field with the given name."""
        for f in self.fields:
            if f.name == name and not f.is_index_signature:
                return f
        return None


@dataclass
class BranchOutcome:
    """Result of processing one branch of a fragment."""

    branch: Branch = Branch.SEQUENCE
    ok: bool = True

    # Cause of the failure
    error: str | None = None


@dataclass
class SkippedMember:
    """An element or attribute dropped because it lacks a name or a type."""

    branch: Branch = Branch.SEQUENCE
    reason: str = ""
    raw: object = None


@dataclass
class FragmentReport:
    """Everything that happened while building one declaration."""

    name: str = ""
    outcomes: list[BranchOutcome] = field(default_factory=list)
    skipped: list[SkippedMember] = field(default_factory=list)

    # Override notes (ignored literal overrides, ignored field rules)
    notices: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return all(outcome.ok for outcome in self.outcomes) and not self.skipped

    @property
    def failed_branches(self) -> list[Branch]:
        return [outcome.branch for outcome in self.outcomes if not outcome.ok]
