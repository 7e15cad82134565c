"""Engine helpers built on SQLAlchemy."""

from __future__ import annotations

from .connection import ConnectionManager
from .execution import QueryResult, TypedExecutor

__all__ = ["ConnectionManager", "QueryResult", "TypedExecutor"]
