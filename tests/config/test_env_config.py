"""Tests for environment variable configuration."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from coltypes.config import TypesConfig, create_config


def test_defaults():
    with patch.dict(os.environ, {}, clear=True):
        config = create_config()
    assert config.dialect == "sqlite"
    assert config.timezone == "+00:00"
    assert config.dsn is None
    assert config.echo is False


def test_env_timezone():
    with patch.dict(os.environ, {"COLTYPES_TIMEZONE": "-05:00"}):
        config = create_config()
        assert config.timezone == "-05:00"


def test_kwargs_override_env():
    with patch.dict(os.environ, {"COLTYPES_TIMEZONE": "-05:00", "COLTYPES_DIALECT": "other"}):
        config = create_config(timezone="+01:00", dialect="sqlite")
        assert config.timezone == "+01:00"
        assert config.dialect == "sqlite"


def test_env_echo():
    with patch.dict(os.environ, {"COLTYPES_ECHO": "true"}):
        assert create_config().echo is True

    with patch.dict(os.environ, {"COLTYPES_ECHO": "false"}):
        assert create_config().echo is False


def test_env_dsn():
    with patch.dict(os.environ, {"COLTYPES_DSN": "sqlite:///test.db"}):
        assert create_config().dsn == "sqlite:///test.db"


def test_invalid_timezone():
    with pytest.raises(ValueError, match="timezone must be an offset"):
        TypesConfig(timezone="UTC")


def test_extra_options_reach_parsers():
    with patch.dict(os.environ, {}, clear=True):
        config = create_config(timezone="+02:00", strict=True)
    assert config.options == {"strict": True}
    assert config.parse_options() == {"strict": True, "timezone": "+02:00"}
