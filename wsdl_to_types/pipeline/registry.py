"""
Insertion-ordered registry of generated declarations.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from .analyzer.ir_nodes import Declaration

logger = logging.getLogger(__name__)


class TypeRegistry:
    """Maps type names to declarations, in registration order.

    Registering an existing name replaces its declaration but keeps the
    position of the first registration.
    """

    def __init__(self):
        self._declarations: dict[str, Declaration] = {}

    def register(self, declaration: Declaration) -> None:
        if declaration.name in self._declarations:
            logger.debug(f"Replacing existing declaration for {declaration.name}")
        self._declarations[declaration.name] = declaration

    def get(self, name: str) -> Declaration | None:
        return self._declarations.get(name)

    def names(self) -> list[str]:
        return list(self._declarations)

    def __contains__(self, name: object) -> bool:
        return name in self._declarations

    def __iter__(self) -> Iterator[Declaration]:
        return iter(self._declarations.values())

    def __len__(self) -> int:
        return len(self._declarations)
