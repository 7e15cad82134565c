"""SQLite dialect."""

from __future__ import annotations

from . import data_types
from .data_types import SQLITE_TYPES

__all__ = ["SQLITE_TYPES", "data_types"]
