"""SQLite renderings and value parsers for the abstract column types.

See https://www.sqlite.org/datatype3.html
"""

from __future__ import annotations

import json
import math
import re
from datetime import datetime
from typing import Any, Dict, Optional

from ...types import base
from ..registry import DialectTypeEntry, DialectTypeTable, register

DOCS_URL = "https://www.sqlite.org/datatype3.html"

# A space is allowed between the time and its offset ("2020-01-01 10:00:00.000 +00:00")
_OFFSET_GAP = re.compile(r"\s+(?=[+-]\d{2}:?\d{2}$)")


def warn(message: str) -> None:
    base.AbstractType.warn(DOCS_URL, message)


def _remove_unsupported_integer_options(data_type: base.NUMBER) -> None:
    """Clear UNSIGNED and ZEROFILL, which SQLite integers cannot carry."""
    if data_type._zerofill or data_type._unsigned:
        warn(
            f"SQLite does not support '{data_type.key}' with UNSIGNED or ZEROFILL. "
            f"Plain '{data_type.key}' will be used instead."
        )
        data_type._unsigned = False
        data_type._zerofill = False
        data_type.options.pop("unsigned", None)
        data_type.options.pop("zerofill", None)


def _to_datetime(text: str) -> datetime:
    return datetime.fromisoformat(_OFFSET_GAP.sub("", text.strip()))


class JSONTYPE(base.JSON):
    @staticmethod
    def parse(data: Any, options: Optional[Dict[str, Any]] = None) -> Any:
        return json.loads(data)


class DATE(base.DATE):
    @staticmethod
    def parse(date: str, options: Optional[Dict[str, Any]] = None) -> datetime:
        if "+" not in date:
            # Rows written before offsets were stored carry no timezone
            timezone = (options or {}).get("timezone", "+00:00")
            return _to_datetime(date + timezone)
        return _to_datetime(date)


class DATEONLY(base.DATEONLY):
    @staticmethod
    def parse(date: str, options: Optional[Dict[str, Any]] = None) -> str:
        return date


class STRING(base.STRING):
    def to_sql(self) -> str:
        if self._binary:
            return f"VARCHAR BINARY({self._length})"
        return super().to_sql()


class CHAR(base.CHAR):
    def to_sql(self) -> str:
        if self._binary:
            return f"CHAR BINARY({self._length})"
        return super().to_sql()


class TEXT(base.TEXT):
    def to_sql(self) -> str:
        if self._length:
            warn("SQLite does not support TEXT with options. Plain `TEXT` will be used instead.")
            self._length = None
            self.options.pop("length", None)
        return "TEXT"


class CITEXT(base.CITEXT):
    def to_sql(self) -> str:
        return "TEXT COLLATE NOCASE"


class NUMBER(base.NUMBER):
    def to_sql(self) -> str:
        result = self.key
        if self._unsigned:
            result += " UNSIGNED"
        if self._zerofill:
            result += " ZEROFILL"
        return result + self._length_clause()


class _PlainInteger:
    """Integer behaviour shared by the SQLite integer types."""

    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)  # type: ignore[call-arg]
        _remove_unsupported_integer_options(self)  # type: ignore[arg-type]

    @property
    def UNSIGNED(self) -> Any:
        self._unsigned = True
        _remove_unsupported_integer_options(self)  # type: ignore[arg-type]
        return self

    @property
    def ZEROFILL(self) -> Any:
        self._zerofill = True
        _remove_unsupported_integer_options(self)  # type: ignore[arg-type]
        return self

    def to_sql(self) -> str:
        return NUMBER.to_sql(self)  # type: ignore[arg-type]


class TINYINT(_PlainInteger, base.TINYINT):
    pass


class SMALLINT(_PlainInteger, base.SMALLINT):
    pass


class MEDIUMINT(_PlainInteger, base.MEDIUMINT):
    pass


class INTEGER(_PlainInteger, base.INTEGER):
    pass


class BIGINT(_PlainInteger, base.BIGINT):
    pass


def _parse_floating(value: Any, options: Optional[Dict[str, Any]] = None) -> Any:
    if isinstance(value, str):
        if value == "NaN":
            return math.nan
        if value == "Infinity":
            return math.inf
        if value == "-Infinity":
            return -math.inf
    return value


class FLOAT(base.FLOAT):
    parse = staticmethod(_parse_floating)

    def to_sql(self) -> str:
        return NUMBER.to_sql(self)


class DOUBLE(base.DOUBLE):
    parse = staticmethod(_parse_floating)

    def to_sql(self) -> str:
        return NUMBER.to_sql(self)


class REAL(base.REAL):
    parse = staticmethod(_parse_floating)

    def to_sql(self) -> str:
        return NUMBER.to_sql(self)


class ENUM(base.ENUM):
    def to_sql(self) -> str:
        return "TEXT"


DATA_TYPES = {
    "DATE": DATE,
    "DATEONLY": DATEONLY,
    "STRING": STRING,
    "CHAR": CHAR,
    "NUMBER": NUMBER,
    "FLOAT": FLOAT,
    "REAL": REAL,
    "DOUBLE PRECISION": DOUBLE,
    "TINYINT": TINYINT,
    "SMALLINT": SMALLINT,
    "MEDIUMINT": MEDIUMINT,
    "INTEGER": INTEGER,
    "BIGINT": BIGINT,
    "TEXT": TEXT,
    "ENUM": ENUM,
    "JSON": JSONTYPE,
    "CITEXT": CITEXT,
}

# Native names each type is read back from; False marks types SQLite cannot express.
# TINYINT is listed for both TINYINT and BOOLEAN; callers pick one with ``expected``.
ALIASES = {
    "DATE": ["DATETIME"],
    "STRING": ["VARCHAR", "VARCHAR BINARY"],
    "CHAR": ["CHAR", "CHAR BINARY"],
    "TEXT": ["TEXT"],
    "TINYINT": ["TINYINT"],
    "SMALLINT": ["SMALLINT"],
    "MEDIUMINT": ["MEDIUMINT"],
    "INTEGER": ["INTEGER"],
    "BIGINT": ["BIGINT"],
    "FLOAT": ["FLOAT"],
    "TIME": ["TIME"],
    "DATEONLY": ["DATE"],
    "BOOLEAN": ["TINYINT"],
    "BLOB": ["TINYBLOB", "BLOB", "LONGBLOB"],
    "DECIMAL": ["DECIMAL"],
    "UUID": ["UUID"],
    "ENUM": False,
    "REAL": ["REAL"],
    "DOUBLE PRECISION": ["DOUBLE PRECISION"],
    "GEOMETRY": False,
    "JSON": ["JSON", "JSONB"],
}


def _build_table() -> DialectTypeTable:
    classes = {**base.BASE_TYPES, **DATA_TYPES}
    entries = {
        key: DialectTypeEntry.for_class(type_class, ALIASES.get(key, False))
        for key, type_class in classes.items()
    }
    return DialectTypeTable(name="sqlite", entries=entries, docs_url=DOCS_URL)


SQLITE_TYPES = register(_build_table())
