"""
Configuration for the type generation pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class GeneratorConfig:
    """Configuration options for type generation."""

    # Drop every documentation block from the output
    strip_comments: bool = False

    # Add generation comment at top of file
    add_generation_comment: bool = True

    # Namespace prefix of schema tags and primitive types ("xs" -> "xs:string")
    schema_prefix: str = "xs"

    # Extra primitive mappings, merged over the built-in table (e.g. {"gYear": "number"})
    type_map: dict[str, str] = field(default_factory=dict)

    # Pattern selecting fragment files inside an input directory
    fragment_glob: str = "*.json"

    # Render every member of a choice group as optional
    optional_choice_members: bool = False

    @staticmethod
    def from_dict(d: dict) -> GeneratorConfig:
        """Create a config from a dictionary."""
        config = GeneratorConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "strip_comments": self.strip_comments,
            "add_generation_comment": self.add_generation_comment,
            "schema_prefix": self.schema_prefix,
            "type_map": self.type_map,
            "fragment_glob": self.fragment_glob,
            "optional_choice_members": self.optional_choice_members,
        }
