"""Pytest configuration helpers."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from sqlalchemy import create_engine

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def sqlite_types():
    """The registered SQLite type table."""
    from coltypes.dialects import get_dialect_types

    return get_dialect_types("sqlite")


@pytest.fixture
def sqlite_db(tmp_path):
    """Create a temporary SQLite database for testing."""
    from coltypes import connect

    db_path = tmp_path / "test.db"
    # Use as_posix() to ensure forward slashes for SQLite URLs (required on Windows)
    executor = connect(f"sqlite:///{db_path.as_posix()}")
    yield executor
    executor._connections.close()


@pytest.fixture
def sqlite_engine(tmp_path):
    """A bare SQLAlchemy engine on a temporary SQLite file."""
    engine = create_engine(f"sqlite:///{(tmp_path / 'engine.db').as_posix()}")
    yield engine
    engine.dispose()
