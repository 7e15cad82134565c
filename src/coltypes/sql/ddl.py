"""DDL (Data Definition Language) SQL generation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..dialects.registry import DialectTypeTable
from ..table.schema import TableSchema
from .builders import comma_separated, format_literal, quote_identifier

if TYPE_CHECKING:
    from ..table.schema import ColumnDef


def compile_create_table(schema: TableSchema, types: DialectTypeTable) -> str:
    """Compile a TableSchema into a CREATE TABLE statement."""
    table_name = quote_identifier(schema.name)

    parts = ["CREATE"]
    if schema.temporary:
        parts.append("TEMPORARY")
    parts.append("TABLE")
    if schema.if_not_exists:
        parts.append("IF NOT EXISTS")
    parts.append(table_name)

    column_defs = []
    primary_keys = []

    for col_def in schema.columns:
        column_defs.append(_compile_column_def(col_def, types))
        if col_def.primary_key:
            primary_keys.append(quote_identifier(col_def.name))

    body = comma_separated(column_defs)
    if primary_keys:
        body += f", PRIMARY KEY ({comma_separated(primary_keys)})"
    parts.append(f"({body})")

    return " ".join(parts)


def compile_drop_table(table_name: str, if_exists: bool = True) -> str:
    """Compile a DROP TABLE statement."""
    parts = ["DROP TABLE"]
    if if_exists:
        parts.append("IF EXISTS")
    parts.append(quote_identifier(table_name))

    return " ".join(parts)


def _compile_column_def(col_def: "ColumnDef", types: DialectTypeTable) -> str:
    """Compile a single column definition."""
    parts = [quote_identifier(col_def.name), types.render(col_def.data_type)]

    if not col_def.nullable:
        parts.append("NOT NULL")

    if col_def.default is not None:
        parts.append(f"DEFAULT {format_literal(col_def.default)}")

    return " ".join(parts)
