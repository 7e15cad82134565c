"""Abstract column types."""

from __future__ import annotations

from .base import (
    BASE_TYPES,
    BIGINT,
    BLOB,
    BOOLEAN,
    CHAR,
    CITEXT,
    DATE,
    DATEONLY,
    DECIMAL,
    DOUBLE,
    ENUM,
    FLOAT,
    GEOMETRY,
    INTEGER,
    JSON,
    MEDIUMINT,
    NUMBER,
    REAL,
    SMALLINT,
    STRING,
    TEXT,
    TIME,
    TINYINT,
    UUID,
    AbstractType,
)

__all__ = [
    "AbstractType",
    "BASE_TYPES",
    "BIGINT",
    "BLOB",
    "BOOLEAN",
    "CHAR",
    "CITEXT",
    "DATE",
    "DATEONLY",
    "DECIMAL",
    "DOUBLE",
    "ENUM",
    "FLOAT",
    "GEOMETRY",
    "INTEGER",
    "JSON",
    "MEDIUMINT",
    "NUMBER",
    "REAL",
    "SMALLINT",
    "STRING",
    "TEXT",
    "TIME",
    "TINYINT",
    "UUID",
]
