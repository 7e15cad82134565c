"""SQL text generation."""

from __future__ import annotations

from .ddl import compile_create_table, compile_drop_table

__all__ = ["compile_create_table", "compile_drop_table"]
