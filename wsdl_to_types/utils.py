"""
Utility functions for the WSDL fragments to types generator.
"""

import re
from typing import Any

# Line breaks together with the indentation around them
_LINE_BREAK_PATTERN = re.compile(r"\s*[\r\n]+\s*")


def as_list(value: Any) -> list:
    """Coerce a single-or-list property to a list.

    The upstream XML to JSON conversion stores one child as a plain object
    and several children as a list of objects.

    Examples:
        None -> []
        {"@name": "a"} -> [{"@name": "a"}]
        [{"@name": "a"}, {"@name": "b"}] -> unchanged
    """
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def as_text(value: Any) -> str | None:
    """Convert a scalar revived by the upstream parser back to its XML text.

    Examples:
        0 -> "0"
        True -> "true"
        "unbounded" -> "unbounded"
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def collapse_whitespace(text: str) -> str:
    """Collapse line breaks and the indentation around them to single spaces."""
    return _LINE_BREAK_PATTERN.sub(" ", text).strip()
