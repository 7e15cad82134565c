"""Tests for exception hierarchy."""

from __future__ import annotations

from coltypes.utils.exceptions import (
    AmbiguousTypeError,
    ColtypesError,
    ExecutionError,
    UnknownDialectError,
    UnknownTypeError,
    UnsupportedOptionWarning,
    UnsupportedTypeError,
    ValidationError,
)


def test_exception_hierarchy():
    """Test that all exceptions inherit from ColtypesError."""
    assert issubclass(ValidationError, ColtypesError)
    assert issubclass(UnknownDialectError, ColtypesError)
    assert issubclass(UnknownTypeError, ColtypesError)
    assert issubclass(AmbiguousTypeError, UnknownTypeError)
    assert issubclass(UnsupportedTypeError, ColtypesError)
    assert issubclass(ExecutionError, ColtypesError)
    assert issubclass(UnsupportedOptionWarning, UserWarning)


def test_error_with_context():
    error = ColtypesError("Test error", context={"key1": "value1", "key2": 42})
    error_str = str(error)
    assert "Test error" in error_str
    assert "key1=value1" in error_str
    assert "key2=42" in error_str


def test_error_with_suggestion():
    error = ColtypesError("Test error", suggestion="Try this fix")
    assert "Suggestion: Try this fix" in str(error)


def test_ambiguous_auto_suggestion():
    error = AmbiguousTypeError("TINYINT maps to several types")
    assert "expected='BOOLEAN'" in str(error)


def test_validation_enum_suggestion():
    error = ValidationError("ENUM requires at least one value")
    assert "ENUM('active', 'disabled')" in str(error)


def test_execution_no_such_table_suggestion():
    error = ExecutionError("no such table: users")
    assert "does not exist" in str(error)


def test_exception_chaining():
    cause = ValueError("Original error")
    try:
        raise ExecutionError("Wrapped error") from cause
    except ExecutionError as error:
        assert error.__cause__ is cause
        assert str(error) == "Wrapped error"
