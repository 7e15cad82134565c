"""Execution helpers for running DDL and reading typed rows."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Union

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from ..config import TypesConfig
from ..dialects.registry import DialectTypeTable, get_dialect_types
from ..sql.ddl import compile_create_table, compile_drop_table
from ..table.schema import TableSchema
from ..types.base import AbstractType
from ..utils.exceptions import ExecutionError
from ..utils.inspector import ColumnInfo, get_table_columns
from .connection import ConnectionManager

logger = logging.getLogger(__name__)

ColumnTypes = Mapping[str, Union[AbstractType, str]]


@dataclass
class QueryResult:
    rows: Optional[List[Dict[str, object]]]
    rowcount: Optional[int]


class TypedExecutor:
    """Runs SQL through SQLAlchemy and parses result values by column type."""

    def __init__(self, connection_manager: ConnectionManager, config: TypesConfig):
        self._connections = connection_manager
        self._config = config
        self.types: DialectTypeTable = get_dialect_types(config.dialect)

    def _sql_preview(self, sql: str) -> str:
        return sql[:200] if len(sql) > 200 else sql

    def execute(self, sql: str, params: Optional[Dict[str, Any]] = None) -> QueryResult:
        """Execute a non-SELECT SQL statement (DDL, INSERT, UPDATE, DELETE).

        Raises:
            ExecutionError: If SQL execution fails
        """
        logger.debug("Executing statement: %s", self._sql_preview(sql))
        try:
            with self._connections.connect() as conn:
                result = conn.execute(text(sql), params or {})
                rowcount = result.rowcount or 0
                logger.debug("Statement affected %d rows", rowcount)
                return QueryResult(rows=None, rowcount=rowcount)
        except SQLAlchemyError as exc:
            logger.error("SQL execution failed: %s", exc, exc_info=True)
            raise ExecutionError(
                f"Failed to execute statement: {exc}", context={"sql": self._sql_preview(sql)}
            ) from exc

    def create_table(self, schema: TableSchema) -> str:
        """Create ``schema`` and return the DDL that was executed."""
        sql = compile_create_table(schema, self.types)
        self.execute(sql)
        return sql

    def drop_table(self, table_name: str, if_exists: bool = True) -> str:
        sql = compile_drop_table(table_name, if_exists=if_exists)
        self.execute(sql)
        return sql

    def fetch(
        self,
        sql: str,
        column_types: Optional[ColumnTypes] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> QueryResult:
        """Execute a SELECT query and parse each value by its column's type.

        Args:
            sql: SQL text to execute
            column_types: Column name to abstract type (or type key). Columns
                not listed are returned as the driver produced them.
            params: Optional parameter dictionary for the query

        Returns:
            QueryResult containing parsed rows and rowcount

        Raises:
            ExecutionError: If SQL execution fails
        """
        logger.debug("Executing query: %s", self._sql_preview(sql))
        start_time = time.perf_counter()
        try:
            with self._connections.connect() as conn:
                result = conn.execute(text(sql), params or {})
                raw_rows = result.mappings().all()
        except SQLAlchemyError as exc:
            elapsed = time.perf_counter() - start_time
            logger.error("SQL execution failed after %.3f seconds: %s", elapsed, exc, exc_info=True)
            raise ExecutionError(
                f"SQL execution failed: {exc}",
                context={"sql": self._sql_preview(sql), "elapsed_seconds": elapsed},
            ) from exc

        keys = {
            name: (data_type if isinstance(data_type, str) else data_type.key)
            for name, data_type in (column_types or {}).items()
        }
        options = self._config.parse_options()
        rows = [self._parse_row(row, keys, options) for row in raw_rows]

        elapsed = time.perf_counter() - start_time
        logger.debug("Query returned %d rows in %.3f seconds", len(rows), elapsed)
        return QueryResult(rows=rows, rowcount=len(rows))

    def _parse_row(
        self, row: Mapping[str, Any], keys: Mapping[str, str], options: Dict[str, Any]
    ) -> Dict[str, object]:
        parsed: Dict[str, object] = {}
        for name, value in row.items():
            key = keys.get(name)
            parsed[name] = value if key is None else self.types.parse(key, value, options)
        return parsed

    def reflect(self, table_name: str) -> List[ColumnInfo]:
        """Read ``table_name``'s declared columns back as abstract type candidates."""
        return get_table_columns(self._connections.engine, table_name, self.types)
