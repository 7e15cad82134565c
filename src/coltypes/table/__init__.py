"""Table schema definitions."""

from __future__ import annotations

from .schema import ColumnDef, TableSchema, column

__all__ = ["ColumnDef", "TableSchema", "column"]
