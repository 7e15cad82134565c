"""Dialect-neutral column type classes.

Each class describes an abstract column type together with the options it
was declared with. Dialect modules subclass these to override rendering and
to attach value parsers; the classes here provide the default rendering used
when a dialect has nothing more specific to say.

Constructors accept either positional options or a single options dict, so
``STRING(10, True)`` and ``STRING({"length": 10, "binary": True})`` are the
same declaration. The dict form is what :meth:`AbstractType.extend` uses to
clone a declaration into another class.
"""

from __future__ import annotations

import logging
import warnings
from typing import Any, Callable, ClassVar, Dict, Optional, Sequence

from ..utils.exceptions import UnsupportedOptionWarning, ValidationError

logger = logging.getLogger(__name__)


class AbstractType:
    """Base class for every column type."""

    key: ClassVar[str] = "ABSTRACT"
    #: Converts a raw driver value into a Python value; ``None`` means pass-through.
    parse: ClassVar[Optional[Callable[..., Any]]] = None

    def __init__(self, options: Optional[Dict[str, Any]] = None):
        self.options: Dict[str, Any] = dict(options or {})

    def to_sql(self) -> str:
        return self.key

    @staticmethod
    def warn(url: str, message: str) -> None:
        """Report a non-fatal problem with a type declaration."""
        logger.debug("Type warning: %s (%s)", message, url)
        warnings.warn(f"{message} \n>> Check: {url}", UnsupportedOptionWarning, stacklevel=3)

    @classmethod
    def extend(cls, old_type: "AbstractType") -> "AbstractType":
        """Build an instance of ``cls`` carrying the options of ``old_type``."""
        return cls(old_type.options)

    def __str__(self) -> str:
        return self.to_sql()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.options!r})"


def _options(first: Any, **named: Any) -> Dict[str, Any]:
    if isinstance(first, dict):
        return dict(first)
    return named


class STRING(AbstractType):
    key = "STRING"

    def __init__(self, length: Any = None, binary: bool = False):
        options = _options(length, length=length, binary=binary)
        super().__init__(options)
        self._length = options.get("length") or 255
        self._binary = bool(options.get("binary"))

    def to_sql(self) -> str:
        return f"VARCHAR({self._length}){' BINARY' if self._binary else ''}"

    @property
    def BINARY(self) -> "STRING":
        self._binary = True
        self.options["binary"] = True
        return self


class CHAR(STRING):
    key = "CHAR"

    def to_sql(self) -> str:
        return f"CHAR({self._length}){' BINARY' if self._binary else ''}"


class TEXT(AbstractType):
    key = "TEXT"

    def __init__(self, length: Any = None):
        options = _options(length, length=length)
        super().__init__(options)
        self._length = options.get("length")

    def to_sql(self) -> str:
        length = self._length.lower() if isinstance(self._length, str) else None
        if length == "tiny":
            return "TINYTEXT"
        if length == "medium":
            return "MEDIUMTEXT"
        if length == "long":
            return "LONGTEXT"
        return self.key


class CITEXT(AbstractType):
    key = "CITEXT"


class NUMBER(AbstractType):
    """Numeric types with optional display length, decimals and MySQL-style flags."""

    key = "NUMBER"

    def __init__(
        self,
        length: Any = None,
        decimals: Optional[int] = None,
        unsigned: bool = False,
        zerofill: bool = False,
    ):
        options = _options(
            length, length=length, decimals=decimals, unsigned=unsigned, zerofill=zerofill
        )
        super().__init__(options)
        self._length = options.get("length")
        self._decimals = options.get("decimals")
        self._unsigned = bool(options.get("unsigned"))
        self._zerofill = bool(options.get("zerofill"))

    def _length_clause(self) -> str:
        if not self._length:
            return ""
        if isinstance(self._decimals, int) and not isinstance(self._decimals, bool):
            return f"({self._length},{self._decimals})"
        return f"({self._length})"

    def to_sql(self) -> str:
        result = self.key + self._length_clause()
        if self._unsigned:
            result += " UNSIGNED"
        if self._zerofill:
            result += " ZEROFILL"
        return result

    @property
    def UNSIGNED(self) -> "NUMBER":
        self._unsigned = True
        self.options["unsigned"] = True
        return self

    @property
    def ZEROFILL(self) -> "NUMBER":
        self._zerofill = True
        self.options["zerofill"] = True
        return self


class TINYINT(NUMBER):
    key = "TINYINT"


class SMALLINT(NUMBER):
    key = "SMALLINT"


class MEDIUMINT(NUMBER):
    key = "MEDIUMINT"


class INTEGER(NUMBER):
    key = "INTEGER"


class BIGINT(NUMBER):
    key = "BIGINT"


class FLOAT(NUMBER):
    key = "FLOAT"


class DOUBLE(NUMBER):
    key = "DOUBLE PRECISION"


class REAL(NUMBER):
    key = "REAL"


class DECIMAL(NUMBER):
    key = "DECIMAL"

    def __init__(self, precision: Any = None, scale: Optional[int] = None):
        options = _options(precision, precision=precision, scale=scale)
        super().__init__(options)
        self._precision = options.get("precision")
        self._scale = options.get("scale")

    def to_sql(self) -> str:
        if self._precision or self._scale:
            return f"DECIMAL({self._precision},{self._scale or 0})"
        return self.key


class BOOLEAN(AbstractType):
    key = "BOOLEAN"

    def to_sql(self) -> str:
        return "TINYINT(1)"


class TIME(AbstractType):
    key = "TIME"


class DATE(AbstractType):
    key = "DATE"

    def __init__(self, length: Any = None):
        options = _options(length, length=length)
        super().__init__(options)
        self._length = options.get("length")

    def to_sql(self) -> str:
        if self._length:
            return f"DATETIME({self._length})"
        return "DATETIME"


class DATEONLY(AbstractType):
    key = "DATEONLY"

    def to_sql(self) -> str:
        return "DATE"


class BLOB(AbstractType):
    key = "BLOB"

    def __init__(self, length: Any = None):
        options = _options(length, length=length)
        super().__init__(options)
        self._length = options.get("length")

    def to_sql(self) -> str:
        length = self._length.lower() if isinstance(self._length, str) else None
        if length == "tiny":
            return "TINYBLOB"
        if length == "medium":
            return "MEDIUMBLOB"
        if length == "long":
            return "LONGBLOB"
        return self.key


class UUID(AbstractType):
    key = "UUID"


class ENUM(AbstractType):
    """Column restricted to a fixed set of string values."""

    key = "ENUM"

    def __init__(self, *values: Any):
        if len(values) == 1 and isinstance(values[0], dict):
            options = dict(values[0])
        elif len(values) == 1 and isinstance(values[0], (list, tuple)):
            options = {"values": list(values[0])}
        else:
            options = {"values": list(values)}
        super().__init__(options)
        self.values: Sequence[str] = list(options.get("values") or [])
        if not self.values:
            raise ValidationError(
                "ENUM requires at least one value", context={"options": options}
            )


class JSON(AbstractType):
    key = "JSON"


class GEOMETRY(AbstractType):
    key = "GEOMETRY"

    def __init__(self, type: Any = None, srid: Optional[int] = None):
        options = _options(type, type=type, srid=srid)
        super().__init__(options)
        self.type = options.get("type")
        self.srid = options.get("srid")


BASE_TYPES: Dict[str, type] = {
    cls.key: cls
    for cls in (
        STRING,
        CHAR,
        TEXT,
        CITEXT,
        NUMBER,
        TINYINT,
        SMALLINT,
        MEDIUMINT,
        INTEGER,
        BIGINT,
        FLOAT,
        DOUBLE,
        REAL,
        DECIMAL,
        BOOLEAN,
        TIME,
        DATE,
        DATEONLY,
        BLOB,
        UUID,
        ENUM,
        JSON,
        GEOMETRY,
    )
}
