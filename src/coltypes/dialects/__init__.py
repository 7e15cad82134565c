"""Dialect type tables.

Importing this package registers the bundled dialects.
"""

from __future__ import annotations

from .registry import (
    DialectTypeEntry,
    DialectTypeTable,
    available,
    get_dialect_types,
    normalize_type_name,
    register,
)
from . import sqlite  # noqa: F401  (registers the sqlite table)

__all__ = [
    "DialectTypeEntry",
    "DialectTypeTable",
    "available",
    "get_dialect_types",
    "normalize_type_name",
    "register",
]
