"""
User-supplied override rules.

The override file is a JSON object keyed by type name. Each value is either
a TypeScript type expression used when the schema does not define the type,
or an object with per-field rules:

    {
        "Bar": "string",
        "Foo": {"fields": {"bar": {"type": "number", "optional": false}}}
    }
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


@dataclass
class FieldOverride:
    """Replacement type and optionality for one field."""

    type_expr: str = ""

    # Fields are optional unless the rule says "optional": false
    optional: bool = True


@dataclass
class OverrideRule:
    """Override for one type name."""

    name: str = ""

    # Literal replacement type expression
    literal: str | None = None

    # Field name -> field override
    fields: dict[str, FieldOverride] = field(default_factory=dict)

    @property
    def is_literal(self) -> bool:
        return self.literal is not None


class OverrideStore:
    """Holds the override rules of one run."""

    def __init__(self, rules: dict[str, OverrideRule] | None = None):
        self._rules: dict[str, OverrideRule] = dict(rules or {})

    def load(self, path: str | Path | None) -> None:
        """
        Load override rules from a JSON file.

        A missing or malformed file leaves the store empty; it never
        aborts the run.

        Args:
            path: Path to the override file, or None for no overrides
        """
        self._rules = {}
        if path is None:
            return

        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.info(f"No overrides file found at {path}")
            return
        except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning(f"Error parsing overrides file {path}: {e}")
            return

        if not isinstance(data, dict):
            logger.warning(f"Overrides file {path} must contain a JSON object, got {type(data).__name__}")
            return

        for name, value in data.items():
            rule = self._parse_rule(name, value)
            if rule is not None:
                self._rules[name] = rule
        logger.info(f"Loaded {len(self._rules)} overrides from {path}")

    @staticmethod
    def from_dict(d: dict[str, Any]) -> OverrideStore:
        """Create a store from an already parsed override mapping."""
        store = OverrideStore()
        for name, value in d.items():
            rule = store._parse_rule(name, value)
            if rule is not None:
                store._rules[name] = rule
        return store

    def get(self, name: str) -> OverrideRule | None:
        return self._rules.get(name)

    def items(self) -> Iterator[tuple[str, OverrideRule]]:
        """Iterate over rules in file order."""
        return iter(self._rules.items())

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def _parse_rule(self, name: str, value: Any) -> OverrideRule | None:
        """Validate one entry of the override file."""
        if isinstance(value, str):
            return OverrideRule(name=name, literal=value)

        if not isinstance(value, dict):
            logger.warning(f"Ignoring override for {name}: expected a string or an object")
            return None

        rule = OverrideRule(name=name)
        fields = value.get("fields") or {}
        if not isinstance(fields, dict):
            logger.warning(f"Ignoring field overrides for {name}: 'fields' must be an object")
            return rule

        for field_name, field_value in fields.items():
            if not isinstance(field_value, dict) or not isinstance(field_value.get("type"), str):
                logger.warning(f"Ignoring override for field {name}.{field_name}: missing 'type'")
                continue
            rule.fields[field_name] = FieldOverride(
                type_expr=field_value["type"],
                optional=field_value.get("optional") is not False,
            )
        return rule
