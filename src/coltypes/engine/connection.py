"""SQLAlchemy connection helpers."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.engine import Connection, Engine

from ..config import TypesConfig


class ConnectionManager:
    """Creates and caches the SQLAlchemy engine for a config."""

    def __init__(self, config: TypesConfig, engine: Engine | None = None):
        self.config = config
        self._engine: Engine | None = engine

    def _create_engine(self) -> Engine:
        if self.config.dsn is None:
            raise ValueError("Either 'dsn' or an Engine must be provided")
        return create_engine(self.config.dsn, echo=self.config.echo)

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            self._engine = self._create_engine()
        return self._engine

    @contextmanager
    def connect(self) -> Iterator[Connection]:
        """Yield an auto-committing connection."""
        with self.engine.begin() as connection:
            yield connection

    def close(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
