"""
Schema fragment classifier.

Phase 1 of the pipeline: inspect one raw fragment record and build a
SchemaFragment holding every content-model branch it carries, without
mapping types or validating element correctness.

Raw records come from an XML to JSON conversion in which XML attributes
are keys with a leading "@", child elements keep their prefixed tag name
("xs:sequence"), and repeated children are lists while single children
are plain objects.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ...utils import as_list, as_text
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

# Reserved key holding the type name
NAME_KEY = "@name"

# Group compositors, in the order they are read
COMPOSITORS = ("sequence", "choice", "all")


class SchemaNodeClassifier:
    """Classifies raw fragment records into SchemaFragment nodes."""

    def __init__(self, schema_prefix: str = "xs"):
        """
        Initialize the classifier.

        Args:
            schema_prefix: Namespace prefix of schema tags ("xs" -> "xs:sequence")
        """
        self.schema_prefix = schema_prefix

    def tag(self, local_name: str) -> str:
        """Return the JSON key of a schema child element."""
        return f"{self.schema_prefix}:{local_name}"

    def classify(self, raw: dict[str, Any], fallback_name: str = "", source_path: str = "") -> SchemaFragment:
        """
        Classify a fragment record.

        Args:
            raw: The fragment record
            fallback_name: Name used when the record has no "@name"
            source_path: Origin of the record, for messages

        Returns:
            SchemaFragment with one node per branch found
        """
        fragment = SchemaFragment(
            name=as_text(raw.get(NAME_KEY)) or fallback_name,
            annotation=raw.get(self.tag("annotation")),
            source_path=source_path,
        )

        restriction = raw.get(self.tag("restriction"))
        if restriction is not None:
            if isinstance(restriction, dict) and restriction.get(self.tag("enumeration")):
                self._read_branch(fragment, Branch.ENUMERATION, lambda: self._read_enumeration(fragment, restriction))
            else:
                self._read_branch(fragment, Branch.RESTRICTION, lambda: self._read_restriction(fragment, restriction))

        if self.tag("complexContent") in raw:
            self._read_branch(
                fragment,
                Branch.COMPLEX_CONTENT,
                lambda: self._read_complex_content(fragment, raw[self.tag("complexContent")]),
            )

        if any(self.tag(compositor) in raw for compositor in COMPOSITORS):
            self._read_branch(fragment, Branch.SEQUENCE, lambda: self._read_groups(fragment, raw))

        if self.tag("simpleContent") in raw:
            self._read_branch(
                fragment,
                Branch.SIMPLE_CONTENT,
                lambda: self._read_simple_content(fragment, raw[self.tag("simpleContent")]),
            )

        if self.tag("attribute") in raw:
            self._read_branch(
                fragment,
                Branch.ATTRIBUTES,
                lambda: fragment.attributes.extend(self._read_members(raw[self.tag("attribute")])),
            )

        return fragment

    def _read_branch(self, fragment: SchemaFragment, branch: Branch, reader: Callable[[], None]) -> None:
        """Run one branch reader, recording a shape error against that branch only."""
        try:
            reader()
        except Exception as e:
            fragment.errors[branch] = e

    def _read_enumeration(self, fragment: SchemaFragment, restriction: dict[str, Any]) -> None:
        base = as_text(restriction.get("@base"))

        # Unreadable values degrade to a plain restriction of the base
        fragment.restriction = RestrictionNode(base=base)

        values = []
        for item in as_list(restriction[self.tag("enumeration")]):
            if isinstance(item, dict):
                value = as_text(item.get("@value"))
                if value is None:
                    raise ValueError(f"enumeration value without '@value': {item!r}")
                values.append(EnumValue(value=value, annotation=item.get(self.tag("annotation"))))
            else:
                values.append(EnumValue(value=as_text(item) or ""))

        fragment.restriction = None
        fragment.enumeration = EnumerationNode(base=base, values=values)

    def _read_restriction(self, fragment: SchemaFragment, restriction: Any) -> None:
        if not isinstance(restriction, dict):
            fragment.restriction = RestrictionNode()
            raise TypeError(f"restriction must be an object, got {type(restriction).__name__}")
        fragment.restriction = RestrictionNode(base=as_text(restriction.get("@base")))

    def _read_complex_content(self, fragment: SchemaFragment, content: Any) -> None:
        extension = self._require_object(content, "complexContent").get(self.tag("extension"))
        if extension is None:
            raise ValueError("complexContent without an extension is not supported")
        extension = self._require_object(extension, "complexContent extension")

        fragment.complex_extension = ComplexExtensionNode(
            base=as_text(extension.get("@base")),
            groups=self._collect_groups(extension),
            attributes=self._read_members(extension.get(self.tag("attribute"))),
        )

    def _read_groups(self, fragment: SchemaFragment, raw: dict[str, Any]) -> None:
        fragment.groups.extend(self._collect_groups(raw))

    def _read_simple_content(self, fragment: SchemaFragment, content: Any) -> None:
        content = self._require_object(content, "simpleContent")
        extension = content.get(self.tag("extension"))
        if extension is None:
            extension = content.get(self.tag("restriction"))
        if extension is None:
            raise ValueError("simpleContent without an extension")
        extension = self._require_object(extension, "simpleContent extension")

        fragment.simple_extension = SimpleExtensionNode(
            base=as_text(extension.get("@base")),
            attributes=self._read_members(extension.get(self.tag("attribute"))),
        )

    def _collect_groups(self, parent: dict[str, Any]) -> list[GroupNode]:
        """Read the sequence/choice/all children of a node."""
        groups = []
        for compositor in COMPOSITORS:
            for node in as_list(parent.get(self.tag(compositor))):
                group = GroupNode(compositor=compositor)
                self._fill_group(group, node, in_choice=compositor == "choice")
                groups.append(group)
        return groups

    def _fill_group(self, group: GroupNode, node: Any, in_choice: bool) -> None:
        """Flatten a group and its nested groups into one element list."""
        node = self._require_object(node, group.compositor)

        for member in self._read_members(node.get(self.tag("element"))):
            member.in_choice = in_choice
            group.elements.append(member)

        if self.tag("any") in node:
            group.has_any = True

        for compositor in COMPOSITORS:
            for nested in as_list(node.get(self.tag(compositor))):
                self._fill_group(group, nested, in_choice=in_choice or compositor == "choice")

    def _read_members(self, value: Any) -> list[MemberDef]:
        """Read elements or attributes; malformed entries keep only their raw record."""
        members = []
        for item in as_list(value):
            if not isinstance(item, dict):
                members.append(MemberDef(raw=item))
                continue
            members.append(
                MemberDef(
                    name=as_text(item.get("@name")),
                    type_ref=as_text(item.get("@type")),
                    min_occurs=as_text(item.get("@minOccurs")),
                    max_occurs=as_text(item.get("@maxOccurs")),
                    use=as_text(item.get("@use")),
                    annotation=item.get(self.tag("annotation")),
                    raw=item,
                )
            )
        return members

    @staticmethod
    def _require_object(value: Any, what: str) -> dict[str, Any]:
        if not isinstance(value, dict):
            raise TypeError(f"{what} must be an object, got {type(value).__name__}")
        return value
