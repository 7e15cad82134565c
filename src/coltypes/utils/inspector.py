"""Schema inspector utilities.

Reads the declared column types of an existing table and maps each native
type name back onto the abstract type keys of a dialect type table.

SQLAlchemy's reflection folds SQLite declarations into type affinities
(``VARCHAR BINARY(10)`` comes back as ``TEXT``), so the declared text is read
from ``PRAGMA table_info`` instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from sqlalchemy import inspect as sa_inspect
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from ..dialects.registry import DialectTypeTable
from ..sql.builders import quote_identifier


@dataclass
class ColumnInfo:
    """Information about a database column.

    Attributes:
        name: The name of the column
        type_name: The SQL type name as declared (e.g., "INTEGER", "VARCHAR(255)")
        candidates: Abstract type keys the type name maps back to. Empty when
            the dialect table does not know the name; more than one entry when
            the name is shared (``TINYINT`` is both TINYINT and BOOLEAN).
        nullable: Whether the column allows NULL values
        primary_key: Whether the column is part of the primary key
    """

    name: str
    type_name: str
    candidates: Tuple[str, ...] = ()
    nullable: bool = True
    primary_key: bool = False

    @property
    def key(self) -> str | None:
        """The single abstract type key, or None when absent or ambiguous."""
        return self.candidates[0] if len(self.candidates) == 1 else None


def get_table_columns(
    engine: Engine, table_name: str, types: DialectTypeTable
) -> List[ColumnInfo]:
    """Get column information for a table from the database.

    Args:
        engine: SQLAlchemy engine connected to a SQLite database
        table_name: Name of the table to inspect, optionally schema-qualified
            ("main.users")
        types: Dialect type table used to map native names back to type keys

    Returns:
        List of ColumnInfo objects in column order

    Raises:
        RuntimeError: If table does not exist or cannot be inspected

    Example:
        >>> columns = get_table_columns(engine, "users", get_dialect_types("sqlite"))
        >>> # Returns: [ColumnInfo(name='id', type_name='INTEGER', candidates=('INTEGER',)), ...]
    """
    schema, _, name = table_name.rpartition(".")
    # The schema prefixes the pragma itself: PRAGMA "main".table_info("t")
    pragma = f"PRAGMA {quote_identifier(schema)}." if schema else "PRAGMA "
    pragma += f"table_info({quote_identifier(name)})"
    try:
        if not sa_inspect(engine).has_table(name, schema=schema or None):
            raise RuntimeError(f"Failed to inspect table '{table_name}': table does not exist")
        with engine.connect() as conn:
            rows = conn.execute(text(pragma))
            columns = rows.mappings().all()
    except SQLAlchemyError as e:
        raise RuntimeError(f"Failed to inspect table '{table_name}': {e}") from e

    result: List[ColumnInfo] = []
    for col_info in columns:
        type_name = col_info["type"] or ""
        result.append(
            ColumnInfo(
                name=col_info["name"],
                type_name=type_name,
                candidates=types.keys_for(type_name),
                nullable=not col_info["notnull"],
                primary_key=bool(col_info["pk"]),
            )
        )
    return result
