"""Schema definition primitives for table creation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ..types.base import AbstractType


@dataclass(frozen=True)
class ColumnDef:
    """Definition of a single table column."""

    name: str
    data_type: AbstractType
    nullable: bool = True
    default: object | None = None
    primary_key: bool = False


@dataclass(frozen=True)
class TableSchema:
    """Complete schema definition for a table."""

    name: str
    columns: Sequence[ColumnDef]
    if_not_exists: bool = True
    temporary: bool = False

    def column_types(self) -> dict[str, AbstractType]:
        """Map each column name to its declared type."""
        return {col.name: col.data_type for col in self.columns}


def column(
    name: str,
    data_type: AbstractType,
    nullable: bool = True,
    default: object | None = None,
    primary_key: bool = False,
) -> ColumnDef:
    """Convenience helper for creating column definitions.

    Example:
        >>> from coltypes.types import STRING
        >>> col = column("email", STRING(120), nullable=False)
    """
    return ColumnDef(
        name=name,
        data_type=data_type,
        nullable=nullable,
        default=default,
        primary_key=primary_key,
    )
