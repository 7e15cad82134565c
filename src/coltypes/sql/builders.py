"""Helper utilities for SQL generation."""

from __future__ import annotations

import math
from typing import Iterable

from ..utils.exceptions import ValidationError


def comma_separated(values: Iterable[str]) -> str:
    return ", ".join(values)


def quote_identifier(identifier: str, quote_char: str = '"') -> str:
    if not identifier or not identifier.strip():
        raise ValidationError("Identifier cannot be empty")
    parts = identifier.split(".")
    quoted = [
        f"{quote_char}{part.replace(quote_char, quote_char * 2)}{quote_char}"
        for part in parts
        if part
    ]
    return ".".join(quoted)


def format_literal(value: object) -> str:
    if value is None:
        return "NULL"
    if isinstance(value, bool):
        # SQLite stores booleans as 0/1
        return "1" if value else "0"
    if isinstance(value, float) and not math.isfinite(value):
        # Mirrors the strings the float parsers turn back into specials
        if math.isnan(value):
            return "'NaN'"
        return "'Infinity'" if value > 0 else "'-Infinity'"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        escaped = value.replace("'", "''")
        return f"'{escaped}'"
    raise TypeError(f"Unsupported literal type: {type(value)!r}")
