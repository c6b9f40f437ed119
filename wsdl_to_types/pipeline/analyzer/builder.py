"""
Declaration builder.

Phase 2 of the pipeline: turn a classified SchemaFragment and its override
rule into a Declaration. Every branch is processed inside its own failure
boundary so that one malformed branch only degrades its own contribution.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from ..config import GeneratorConfig
from ..documentation import extract_documentation
from ..fragment.nodes import Branch, GroupNode, MemberDef, SchemaFragment
from ..overrides import OverrideRule
from ..type_mapper import UNKNOWN_TYPE, TypeMapper
from .ir_nodes import (
    BranchOutcome,
    Declaration,
    DeclarationKind,
    FieldDef,
    FragmentReport,
    SkippedMember,
)

logger = logging.getLogger(__name__)

# Name of the field holding the base value of simple content
VALUE_FIELD = "value"

# Value type of the catch-all field added for xs:any
ANY_VALUE_TYPE = "unknown"


@dataclass
class BuildResult:
    """A built declaration with its report."""

    declaration: Declaration = field(default_factory=Declaration)
    report: FragmentReport = field(default_factory=FragmentReport)


class DeclarationBuilder:
    """Builds one Declaration per schema fragment."""

    def __init__(self, type_mapper: TypeMapper | None = None, config: GeneratorConfig | None = None):
        """
        Initialize the builder.

        Args:
            type_mapper: Mapper for schema type references
            config: Generation configuration
        """
        self.config = config or GeneratorConfig()
        self.type_mapper = type_mapper or TypeMapper(self.config.schema_prefix, self.config.type_map)

        self._handlers: dict[Branch, Callable[[SchemaFragment, Declaration, FragmentReport], None]] = {
            Branch.ENUMERATION: self._build_enumeration,
            Branch.COMPLEX_CONTENT: self._build_complex_content,
            Branch.SEQUENCE: self._build_sequence,
            Branch.RESTRICTION: self._build_restriction,
            Branch.SIMPLE_CONTENT: self._build_simple_content,
            Branch.ATTRIBUTES: self._build_attributes,
        }

    def build(
        self,
        fragment: SchemaFragment,
        kind: DeclarationKind,
        override: OverrideRule | None = None,
    ) -> BuildResult:
        """
        Build the declaration of a fragment.

        Args:
            fragment: The classified fragment
            kind: Declaration kind used for non-enumeration fragments
            override: Override rule registered for the fragment name

        Returns:
            BuildResult holding the (possibly partial) declaration and its report
        """
        declaration = Declaration(name=fragment.name, kind=kind)
        report = FragmentReport(name=fragment.name)
        logger.debug(f"Generating {kind.value} declaration for: {fragment.name}")

        if fragment.is_enumeration:
            # Enumerations are complete on their own
            self._run_branch(Branch.ENUMERATION, fragment, declaration, report)
            if override is not None and override.fields:
                self._notice(report, f"Field overrides for enumeration {fragment.name} are ignored")
            elif override is not None and override.is_literal:
                self._notice(report, f"Literal override for {fragment.name} ignored: the schema defines it")
            return BuildResult(declaration=declaration, report=report)

        documentation = self._documentation(fragment.annotation)
        if documentation:
            declaration.documentation.append(documentation)

        for branch in fragment.branches:
            self._run_branch(branch, fragment, declaration, report)

        if override is not None:
            self.apply_override(declaration, override, report)

        return BuildResult(declaration=declaration, report=report)

    def apply_override(self, declaration: Declaration, override: OverrideRule, report: FragmentReport) -> None:
        """
        Apply an override rule to a schema-derived declaration.

        Field rules update the first matching field in place, dropping later
        fields of the same name, or append a new one. A literal override
        never replaces schema data.
        """
        if override.is_literal:
            self._notice(report, f"Literal override for {declaration.name} ignored: the schema defines it")
            return

        for field_name, field_override in override.fields.items():
            existing = declaration.find_field(field_name)
            if existing is not None:
                existing.type_name = field_override.type_expr
                existing.is_optional = field_override.optional
                existing.is_array = False
                declaration.fields = [
                    f for f in declaration.fields if f is existing or f.name != field_name or f.is_index_signature
                ]
            else:
                declaration.fields.append(
                    FieldDef(
                        name=field_name,
                        type_name=field_override.type_expr,
                        is_optional=field_override.optional,
                    )
                )
        logger.debug(f"Applied {len(override.fields)} field overrides for {declaration.name}")

    def synthesize(self, override: OverrideRule) -> Declaration | None:
        """
        Build a declaration for a name the schema does not define.

        Returns:
            The synthesized declaration, or None when the rule carries nothing
        """
        if override.is_literal:
            return Declaration(
                name=override.name,
                kind=DeclarationKind.ALIAS,
                alias_target=override.literal,
            )
        if not override.fields:
            return None
        return Declaration(
            name=override.name,
            kind=DeclarationKind.STRUCTURED,
            fields=[
                FieldDef(name=name, type_name=rule.type_expr, is_optional=rule.optional)
                for name, rule in override.fields.items()
            ],
        )

    def _run_branch(
        self,
        branch: Branch,
        fragment: SchemaFragment,
        declaration: Declaration,
        report: FragmentReport,
    ) -> None:
        """Process one branch, containing any error to that branch."""
        error = fragment.errors.get(branch)
        if error is None:
            try:
                self._handlers[branch](fragment, declaration, report)
                report.outcomes.append(BranchOutcome(branch=branch))
                return
            except Exception as e:
                error = e

        origin = f" ({fragment.source_path})" if fragment.source_path else ""
        logger.warning(f"Error processing {branch.value} for {fragment.name}{origin}: {error}")
        report.outcomes.append(BranchOutcome(branch=branch, ok=False, error=str(error)))

    # Branch handlers

    def _build_enumeration(self, fragment: SchemaFragment, declaration: Declaration, report: FragmentReport) -> None:
        values = fragment.enumeration.values
        declaration.kind = DeclarationKind.ALIAS
        declaration.alias_target = " | ".join(json.dumps(v.value, ensure_ascii=False) for v in values)

        if not self.config.strip_comments:
            declaration.documentation.append(f"{fragment.name} enum.")
            for value in values:
                documentation = extract_documentation(value.annotation, self.config.schema_prefix)
                if documentation:
                    declaration.documentation.append(documentation)

    def _build_complex_content(self, fragment: SchemaFragment, declaration: Declaration, report: FragmentReport) -> None:
        extension = fragment.complex_extension
        if extension.base:
            base = self.type_mapper.map_type(extension.base)
            if declaration.kind == DeclarationKind.STRUCTURED:
                declaration.extends = base
            else:
                logger.debug(f"Ignoring base type {base} of alias {fragment.name}")

        for group in extension.groups:
            self._add_group(group, Branch.COMPLEX_CONTENT, fragment, declaration, report)
        for attribute in extension.attributes:
            self._add_member(attribute, Branch.COMPLEX_CONTENT, fragment, declaration, report, is_attribute=True)

    def _build_sequence(self, fragment: SchemaFragment, declaration: Declaration, report: FragmentReport) -> None:
        logger.debug(f"Processing {sum(len(g.elements) for g in fragment.groups)} elements for {fragment.name}")
        for group in fragment.groups:
            self._add_group(group, Branch.SEQUENCE, fragment, declaration, report)

    def _build_restriction(self, fragment: SchemaFragment, declaration: Declaration, report: FragmentReport) -> None:
        base = fragment.restriction.base
        base_type = self.type_mapper.map_type(base) if base else UNKNOWN_TYPE
        if declaration.kind == DeclarationKind.ALIAS:
            declaration.alias_target = base_type
        elif not self.config.strip_comments:
            declaration.notes.append(f"Restriction of {base_type}")

    def _build_simple_content(self, fragment: SchemaFragment, declaration: Declaration, report: FragmentReport) -> None:
        extension = fragment.simple_extension
        if not extension.base:
            raise ValueError("missing base type in simple content extension")

        base = self.type_mapper.map_type(extension.base)
        if extension.attributes:
            for attribute in extension.attributes:
                self._add_member(attribute, Branch.SIMPLE_CONTENT, fragment, declaration, report, is_attribute=True)
            declaration.fields.append(FieldDef(name=VALUE_FIELD, type_name=base))
        elif declaration.kind == DeclarationKind.ALIAS:
            declaration.alias_target = base
        else:
            declaration.fields.append(FieldDef(name=VALUE_FIELD, type_name=base))

    def _build_attributes(self, fragment: SchemaFragment, declaration: Declaration, report: FragmentReport) -> None:
        for attribute in fragment.attributes:
            self._add_member(attribute, Branch.ATTRIBUTES, fragment, declaration, report, is_attribute=True)

    # Field helpers

    def _add_group(
        self,
        group: GroupNode,
        branch: Branch,
        fragment: SchemaFragment,
        declaration: Declaration,
        report: FragmentReport,
    ) -> None:
        for element in group.elements:
            self._add_member(element, branch, fragment, declaration, report)

        if group.has_any and not any(f.is_index_signature for f in declaration.fields):
            declaration.fields.append(FieldDef(name="key", type_name=ANY_VALUE_TYPE, is_index_signature=True))

    def _add_member(
        self,
        member: MemberDef,
        branch: Branch,
        fragment: SchemaFragment,
        declaration: Declaration,
        report: FragmentReport,
        is_attribute: bool = False,
    ) -> None:
        """Append the field of an element or attribute, skipping invalid ones."""
        if not member.name or not member.type_ref:
            what = "attribute" if is_attribute else "element"
            reason = f"{what} without {'name' if not member.name else 'type'}"
            logger.warning(f"Invalid {what} in {fragment.name}: {member.raw!r}")
            report.skipped.append(SkippedMember(branch=branch, reason=reason, raw=member.raw))
            return

        if is_attribute:
            is_optional = member.use == "optional"
            is_array = False
        else:
            is_optional = member.min_occurs == "0" or (self.config.optional_choice_members and member.in_choice)
            is_array = member.max_occurs == "unbounded"

        declaration.fields.append(
            FieldDef(
                name=member.name,
                type_name=self.type_mapper.map_type(member.type_ref),
                is_optional=is_optional,
                is_array=is_array,
                documentation=self._documentation(member.annotation),
            )
        )

    def _documentation(self, annotation: object) -> str | None:
        if self.config.strip_comments:
            return None
        return extract_documentation(annotation, self.config.schema_prefix)

    @staticmethod
    def _notice(report: FragmentReport, message: str) -> None:
        logger.info(message)
        report.notices.append(message)
