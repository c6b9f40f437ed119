"""
Rendering backends.

Backends turn IR declarations into source text of one output dialect.
"""

from __future__ import annotations

from .base import DeclarationBackend
from .typescript_backend import TypeScriptBackend

__all__ = [
    "DeclarationBackend",
    "TypeScriptBackend",
]
