"""
TypeScript rendering backend.

Generates `export type` aliases and `export interface` declarations from IR.
"""

from __future__ import annotations

import json
import re
from typing import Any

from ..analyzer.ir_nodes import Declaration, FieldDef
from ..type_mapper import UNKNOWN_TYPE
from .base import DeclarationBackend

_IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


class TypeScriptBackend(DeclarationBackend):
    """TypeScript declaration backend."""

    TEMPLATE_LANG = "typescript"
    FILE_EXTENSION = "ts"

    def generate(self, declarations: list[Declaration], generation_comment: str = "") -> str:
        """Generate TypeScript code from declarations."""
        prefix = self.prefix_template.render(GENERATION_COMMENT=generation_comment)
        rendered = [self.declaration_template.render(self._prepare_declaration_context(d)) for d in declarations]
        return prefix + "\n".join(rendered)

    def format_field(self, field: FieldDef) -> str:
        """Render `name?: type` or the catch-all index signature."""
        if field.is_index_signature:
            return f"[{field.name}: string]: {field.type_name}"

        type_str = field.type_name or UNKNOWN_TYPE
        if field.is_array:
            if any(c in type_str for c in " |&"):
                type_str = f"({type_str})"
            type_str = f"{type_str}[]"

        optional = "?" if field.is_optional else ""
        return f"{self._property_name(field.name)}{optional}: {type_str}"

    def _prepare_declaration_context(self, declaration: Declaration) -> dict[str, Any]:
        context = super()._prepare_declaration_context(declaration)
        if context["TARGET"] is None and not context["FIELDS"]:
            context["TARGET"] = UNKNOWN_TYPE
        return context

    @staticmethod
    def _property_name(name: str) -> str:
        """Quote property names that are not valid identifiers ("xml:lang")."""
        if _IDENTIFIER_PATTERN.match(name):
            return name
        return json.dumps(name, ensure_ascii=False)
