"""Tests for the dialect-neutral column types."""

from __future__ import annotations

import logging

import pytest

from coltypes.types import base
from coltypes.utils.exceptions import UnsupportedOptionWarning, ValidationError


def test_default_renderings():
    assert base.STRING().to_sql() == "VARCHAR(255)"
    assert base.STRING(10, True).to_sql() == "VARCHAR(10) BINARY"
    assert base.CHAR(3).to_sql() == "CHAR(3)"
    assert base.CITEXT().to_sql() == "CITEXT"
    assert base.BOOLEAN().to_sql() == "TINYINT(1)"
    assert base.DATE().to_sql() == "DATETIME"
    assert base.DATE(6).to_sql() == "DATETIME(6)"
    assert base.DATEONLY().to_sql() == "DATE"
    assert base.ENUM("a").to_sql() == "ENUM"
    assert base.GEOMETRY("POINT", 4326).to_sql() == "GEOMETRY"


def test_text_lengths():
    assert base.TEXT().to_sql() == "TEXT"
    assert base.TEXT("tiny").to_sql() == "TINYTEXT"
    assert base.TEXT("MEDIUM").to_sql() == "MEDIUMTEXT"
    assert base.TEXT({"length": "long"}).to_sql() == "LONGTEXT"


def test_blob_lengths():
    assert base.BLOB().to_sql() == "BLOB"
    assert base.BLOB("tiny").to_sql() == "TINYBLOB"
    assert base.BLOB("medium").to_sql() == "MEDIUMBLOB"


def test_number_renders_length_before_flags():
    data_type = base.INTEGER(11, unsigned=True, zerofill=True)
    assert data_type.to_sql() == "INTEGER(11) UNSIGNED ZEROFILL"


def test_number_builders_chain():
    data_type = base.BIGINT(20).UNSIGNED.ZEROFILL
    assert data_type.options["unsigned"] is True
    assert data_type.options["zerofill"] is True
    assert data_type.to_sql() == "BIGINT(20) UNSIGNED ZEROFILL"


def test_decimals_ignored_without_length():
    assert base.FLOAT(None, 2).to_sql() == "FLOAT"


def test_decimal():
    assert base.DECIMAL().to_sql() == "DECIMAL"
    assert base.DECIMAL(10, 2).to_sql() == "DECIMAL(10,2)"
    assert base.DECIMAL({"precision": 6}).to_sql() == "DECIMAL(6,0)"


def test_enum_requires_values():
    with pytest.raises(ValidationError, match="at least one value"):
        base.ENUM()


def test_enum_accepts_options_dict():
    assert base.ENUM({"values": ["on", "off"]}).values == ["on", "off"]


def test_extend_builds_new_instance():
    original = base.TEXT("tiny")
    copy = base.TEXT.extend(original)
    assert copy is not original
    assert copy.options == {"length": "tiny"}


def test_options_are_copied():
    options = {"length": 8}
    data_type = base.STRING(options)
    data_type.BINARY
    assert options == {"length": 8}


def test_str_renders_sql():
    assert str(base.CHAR(2)) == "CHAR(2)"
    assert repr(base.CHAR(2)) == "CHAR({'length': 2, 'binary': False})"


def test_warn_issues_warning_and_logs(caplog):
    with caplog.at_level(logging.DEBUG, logger="coltypes.types.base"):
        with pytest.warns(UnsupportedOptionWarning, match=r"Check: https://example\.test"):
            base.AbstractType.warn("https://example.test", "Something was dropped")
    assert "Something was dropped" in caplog.text


def test_base_types_keyed():
    assert base.BASE_TYPES["DOUBLE PRECISION"] is base.DOUBLE
    assert all(key == cls.key for key, cls in base.BASE_TYPES.items())
