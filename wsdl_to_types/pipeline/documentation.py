"""
Documentation extraction from schema annotation nodes.
"""

from __future__ import annotations

from typing import Any

from ..utils import collapse_whitespace

# Key holding the text content of a structured documentation node
TEXT_KEY = "#text"


def extract_documentation(annotation: Any, schema_prefix: str = "xs") -> str | None:
    """
    Flatten an annotation node into a single documentation line.

    The documentation is either a plain string or a structured node whose
    "#text" entry comes first, followed by every other string-valued entry
    in document order. Several documentation nodes are joined in order.

    Args:
        annotation: The "xs:annotation" node of an element, attribute or type
        schema_prefix: Namespace prefix of schema tags

    Returns:
        Whitespace-normalized documentation, or None when there is none
    """
    if not isinstance(annotation, dict):
        return None

    doc = annotation.get(f"{schema_prefix}:documentation")
    if not doc:
        return None

    nodes = doc if isinstance(doc, list) else [doc]
    parts = [part for part in (_flatten_node(node) for node in nodes) if part]
    if not parts:
        return None

    text = collapse_whitespace(" ".join(parts))
    # Keep the text from closing the surrounding comment block
    return text.replace("*/", "*\\/") or None


def _flatten_node(node: Any) -> str | None:
    """Flatten one documentation node."""
    if isinstance(node, str):
        return node
    if isinstance(node, dict):
        parts = []
        if isinstance(node.get(TEXT_KEY), str):
            parts.append(node[TEXT_KEY])
        for key, value in node.items():
            if key != TEXT_KEY and isinstance(value, str):
                parts.append(value)
        return " ".join(parts)
    return None
