"""
Base class for declaration rendering backends.

Defines the interface that all output dialects must implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import jinja2

from ..analyzer.ir_nodes import Declaration, FieldDef
from ..config import GeneratorConfig


class DeclarationBackend(ABC):
    """Abstract base class for declaration rendering backends."""

    # Template directory name
    TEMPLATE_LANG: str = ""

    # File extension
    FILE_EXTENSION: str = ""

    def __init__(self, config: GeneratorConfig):
        """
        Initialize the backend.

        Args:
            config: Generation configuration
        """
        self.config = config
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
        )

        self.prefix_template = self.jinja_env.get_template(f"prefix.{self.FILE_EXTENSION}.jinja2")
        self.declaration_template = self.jinja_env.get_template(f"declaration.{self.FILE_EXTENSION}.jinja2")

    @abstractmethod
    def generate(self, declarations: list[Declaration], generation_comment: str = "") -> str:
        """
        Render declarations into one source file.

        Args:
            declarations: Declarations in emission order
            generation_comment: Optional comment placed at the top of the file

        Returns:
            Generated code as a string
        """

    @abstractmethod
    def format_field(self, field: FieldDef) -> str:
        """
        Render the declaration of one field, without terminator.

        Args:
            field: The field definition

        Returns:
            Language-specific field declaration
        """

    def _get_comment_prefix(self) -> str:
        """Get the line comment prefix for the language."""
        return "//"

    def _prepare_declaration_context(self, declaration: Declaration) -> dict[str, Any]:
        """
        Prepare the template context for a declaration.

        Args:
            declaration: The declaration

        Returns:
            Dictionary of template variables
        """
        strip = self.config.strip_comments
        fields = [
            {
                "DECL": self.format_field(field),
                "DOC": None if strip else field.documentation,
            }
            for field in declaration.fields
        ]

        return {
            "NAME": declaration.name,
            "KIND": declaration.kind.value,
            "DOCUMENTATION": [] if strip else declaration.documentation,
            "EXTENDS": declaration.extends,
            "TARGET": declaration.alias_target,
            "NOTES": [] if strip else declaration.notes,
            "FIELDS": fields,
        }
