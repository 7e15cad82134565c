"""Public coltypes API."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import TypesConfig, create_config
from .dialects import DialectTypeEntry, DialectTypeTable, get_dialect_types, register
from .table.schema import ColumnDef, TableSchema, column

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

    from .engine.execution import TypedExecutor

__version__ = "0.1.0"

__all__ = [
    "ColumnDef",
    "DialectTypeEntry",
    "DialectTypeTable",
    "TableSchema",
    "TypesConfig",
    "__version__",
    "column",
    "connect",
    "create_config",
    "get_dialect_types",
    "register",
]


def connect(
    dsn: str | None = None,
    engine: "Engine | None" = None,
    **options: object,
) -> "TypedExecutor":
    """Connect to a database and return a :class:`TypedExecutor`.

    Configuration can be provided via arguments or environment variables:
    - COLTYPES_DSN: Database connection string (if dsn is None)
    - COLTYPES_DIALECT: Dialect type table to use (default "sqlite")
    - COLTYPES_TIMEZONE: Offset appended to DATE values stored without one
    - COLTYPES_ECHO: Enable SQLAlchemy echo mode (true/false)

    Args:
        dsn: Database connection string, e.g. "sqlite:///path/to/database.db"
        engine: Existing SQLAlchemy Engine to use instead of a DSN
        **options: Passed to :func:`create_config`

    Raises:
        ValueError: If both or neither of dsn / engine are available
    """
    from .engine.connection import ConnectionManager
    from .engine.execution import TypedExecutor

    if dsn is not None and engine is not None:
        raise ValueError(
            "Cannot provide both 'dsn' and 'engine'. Provide either a connection string or an Engine instance."
        )
    if dsn is not None:
        options["dsn"] = dsn
    config = create_config(**options)
    if engine is None and config.dsn is None:
        raise ValueError(
            "Either 'dsn' or 'engine' must be provided as argument, or COLTYPES_DSN environment variable must be set"
        )
    if engine is not None:
        config.dsn = None
    return TypedExecutor(ConnectionManager(config, engine=engine), config)
