"""
Pipeline generator: drives the whole fragments-to-declarations run.

For each input directory (structured types first, then simple types) the
fragments are loaded once and registered in two passes: enumerations
first, then everything else. Override rules naming types the schema does
not define are synthesized last.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from .. import __version__
from .analyzer.builder import DeclarationBuilder
from .analyzer.ir_nodes import DeclarationKind, FragmentReport
from .atomic_writer import AtomicWriter
from .backends.typescript_backend import TypeScriptBackend
from .config import GeneratorConfig
from .errors import FragmentLoadError
from .fragment.classifier import NAME_KEY, SchemaNodeClassifier
from .fragment.nodes import SchemaFragment
from .overrides import OverrideStore
from .registry import TypeRegistry
from .type_mapper import TypeMapper

logger = logging.getLogger(__name__)


@dataclass
class TypeDirectory:
    """An input directory and the kind of declaration its fragments produce."""

    path: Path
    kind: DeclarationKind


class PipelineGenerator:
    """Generates TypeScript declarations from directories of schema fragments."""

    def __init__(
        self,
        complex_dir: str | Path,
        simple_dir: str | Path,
        config: GeneratorConfig | None = None,
        overrides: OverrideStore | None = None,
    ):
        """
        Initialize the generator.

        Args:
            complex_dir: Directory of complex type fragments (rendered as interfaces)
            simple_dir: Directory of simple type fragments (rendered as type aliases)
            config: Generation configuration
            overrides: Override rules for this run
        """
        self.config = config or GeneratorConfig()
        self.directories = [
            TypeDirectory(Path(complex_dir), DeclarationKind.STRUCTURED),
            TypeDirectory(Path(simple_dir), DeclarationKind.ALIAS),
        ]
        self.overrides = overrides if overrides is not None else OverrideStore()

        self.classifier = SchemaNodeClassifier(self.config.schema_prefix)
        self.builder = DeclarationBuilder(
            TypeMapper(self.config.schema_prefix, self.config.type_map),
            self.config,
        )
        self.backend = TypeScriptBackend(self.config)

        self.registry = TypeRegistry()
        self.reports: list[FragmentReport] = []

    def build_registry(self) -> TypeRegistry:
        """
        Build the declarations of every fragment and override.

        Returns:
            The registry of this run

        Raises:
            FragmentLoadError: If a directory or fragment file cannot be read
        """
        self.registry = TypeRegistry()
        self.reports = []

        for directory in self.directories:
            fragments = self.load_fragments(directory.path)
            logger.info(f"Processing {len(fragments)} fragments from {directory.path}")

            # Enumerations first so that they precede the types using them
            for fragment in fragments:
                if fragment.is_enumeration:
                    self._register(fragment, directory.kind)
            for fragment in fragments:
                if not fragment.is_enumeration:
                    self._register(fragment, directory.kind)

        self._register_override_only()
        return self.registry

    def generate(self) -> str:
        """Generate the TypeScript source of all declarations."""
        registry = self.build_registry()
        return self.backend.generate(list(registry), self._generate_command_comment())

    def write(self, output_path: str | Path) -> str:
        """
        Generate and write the output artifact.

        Raises:
            GenerationError: If inputs cannot be read or the output cannot be written
        """
        code = self.generate()
        AtomicWriter().write(Path(output_path), code)
        logger.info(f"TypeScript type definitions generated and saved to: {output_path}")
        return code

    def load_fragments(self, directory: Path) -> list[SchemaFragment]:
        """
        Load and classify every fragment file of a directory, sorted by file name.

        Raises:
            FragmentLoadError: If the directory or one of its files cannot be read
        """
        try:
            entries = sorted(directory.iterdir())
        except OSError as e:
            raise FragmentLoadError(f"Cannot read input directory {directory}: {e}") from e

        fragments = []
        for path in entries:
            if path.name.startswith(".") or not path.is_file() or not path.match(self.config.fragment_glob):
                continue
            fragments.append(self._load_fragment(path))
        return fragments

    def _load_fragment(self, path: Path) -> SchemaFragment:
        try:
            with open(path, encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise FragmentLoadError(f"Cannot parse fragment file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise FragmentLoadError(f"Fragment file {path} must contain a JSON object, got {type(raw).__name__}")

        if not raw.get(NAME_KEY):
            logger.warning(f"Fragment {path} has no {NAME_KEY}, using file name {path.stem}")

        return self.classifier.classify(raw, fallback_name=path.stem, source_path=str(path))

    def _register(self, fragment: SchemaFragment, kind: DeclarationKind) -> None:
        result = self.builder.build(fragment, kind, self.overrides.get(fragment.name))
        self.registry.register(result.declaration)
        self.reports.append(result.report)

    def _register_override_only(self) -> None:
        """Synthesize declarations for overrides naming types the schema lacks."""
        for name, rule in self.overrides.items():
            if name in self.registry:
                continue
            declaration = self.builder.synthesize(rule)
            if declaration is None:
                logger.warning(f"Override for {name} defines neither a type nor fields, skipping")
                continue
            logger.debug(f"Generating declaration for {name} from overrides")
            self.registry.register(declaration)

    def _generate_command_comment(self) -> str:
        """Generate a simplified command line comment for the generated file"""
        if not self.config.add_generation_comment:
            return ""

        comment_prefix = self.backend._get_comment_prefix()

        # Reconstruct command line using CLI utilities
        try:
            from ..cli_utils import reconstruct_command_line
            from ..wsdl_to_types import wsdl_to_types as click_command  # noqa

            command_line = reconstruct_command_line(click_command)
        except (ImportError, AttributeError):
            # Fallback if Click command not available
            command_line = "wsdl_to_types"

        return f"{comment_prefix} Generated by wsdl_to_types v{__version__} : {command_line}"
