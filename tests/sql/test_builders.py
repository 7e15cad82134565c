"""Tests for SQL builder utilities."""

from __future__ import annotations

import math

import pytest

from coltypes.sql.builders import comma_separated, format_literal, quote_identifier
from coltypes.utils.exceptions import ValidationError


def test_comma_separated():
    """Test comma_separated helper."""
    assert comma_separated(["a", "b", "c"]) == "a, b, c"
    assert comma_separated(["x"]) == "x"
    assert comma_separated([]) == ""


def test_format_literal():
    """Test format_literal helper."""
    assert format_literal(None) == "NULL"
    assert format_literal(True) == "1"
    assert format_literal(False) == "0"
    assert format_literal(42) == "42"
    assert format_literal(3.14) == "3.14"
    assert format_literal("hello") == "'hello'"
    assert format_literal("it's") == "'it''s'"  # SQL escaping


def test_format_literal_float_specials():
    assert format_literal(math.nan) == "'NaN'"
    assert format_literal(math.inf) == "'Infinity'"
    assert format_literal(-math.inf) == "'-Infinity'"


def test_format_literal_unsupported():
    """Test format_literal with unsupported types."""
    with pytest.raises(TypeError, match="Unsupported literal type"):
        format_literal([])


def test_quote_identifier_basic():
    """Test basic identifier quoting."""
    assert quote_identifier("table") == '"table"'
    assert quote_identifier("table", quote_char="`") == "`table`"
    assert quote_identifier("main.table") == '"main"."table"'
    assert quote_identifier('odd"name') == '"odd""name"'


def test_quote_identifier_empty():
    """Test that empty identifiers raise ValidationError."""
    with pytest.raises(ValidationError, match="cannot be empty"):
        quote_identifier("")

    with pytest.raises(ValidationError, match="cannot be empty"):
        quote_identifier("   ")
