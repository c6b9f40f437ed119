"""
Mapping from XML Schema primitive types to TypeScript types.
"""

from __future__ import annotations

# Sentinel for primitives missing from the table
UNKNOWN_TYPE = "unknown"


class TypeMapper:
    """Maps schema type references to TypeScript type names."""

    # Type mapping from schema primitives (without prefix) to TypeScript types
    TYPE_MAP: dict[str, str] = {
        # String-like
        "string": "string",
        "token": "string",
        "normalizedString": "string",
        "anyURI": "string",
        "duration": "string",
        "base64Binary": "string",
        "hexBinary": "string",
        "NMTOKEN": "string",
        "ID": "string",
        "IDREF": "string",
        "Name": "string",
        "NCName": "string",
        "QName": "string",
        "language": "string",
        # Numeric
        "int": "number",
        "integer": "number",
        "long": "number",
        "short": "number",
        "byte": "number",
        "decimal": "number",
        "float": "number",
        "double": "number",
        "positiveInteger": "number",
        "nonNegativeInteger": "number",
        "negativeInteger": "number",
        "nonPositiveInteger": "number",
        "unsignedInt": "number",
        "unsignedLong": "number",
        "unsignedShort": "number",
        "unsignedByte": "number",
        # Boolean
        "boolean": "boolean",
        # Dates
        "date": "Date",
        "time": "Date",
        "dateTime": "Date",
    }

    def __init__(self, schema_prefix: str = "xs", extra_types: dict[str, str] | None = None):
        """
        Initialize the mapper.

        Args:
            schema_prefix: Namespace prefix marking schema primitives
            extra_types: Additional primitive mappings, taking precedence over TYPE_MAP
        """
        self.primitive_prefix = f"{schema_prefix}:"
        self.type_map = {**self.TYPE_MAP, **(extra_types or {})}

    def map_type(self, type_ref: str) -> str:
        """
        Translate a schema type reference to a TypeScript type.

        Primitives are looked up in the table, unknown primitives become
        the "unknown" sentinel. Anything else is a reference to another
        generated declaration and only loses its namespace prefix.

        Args:
            type_ref: Type reference such as "xs:string" or "ns:Foo"

        Returns:
            TypeScript type name
        """
        if type_ref.startswith(self.primitive_prefix):
            return self.type_map.get(type_ref[len(self.primitive_prefix) :], UNKNOWN_TYPE)
        return strip_prefix(type_ref)


def strip_prefix(type_ref: str) -> str:
    """Remove a namespace prefix ("ns:Foo" -> "Foo")."""
    return type_ref.rsplit(":", 1)[-1]
