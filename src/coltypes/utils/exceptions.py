"""Custom exception hierarchy."""

from typing import Optional


class ColtypesError(Exception):
    """Base exception for coltypes-specific failures."""

    def __init__(
        self, message: str, suggestion: Optional[str] = None, context: Optional[dict] = None
    ):
        """Initialize exception with message, optional suggestion, and context.

        Args:
            message: Error message
            suggestion: Optional suggestion for fixing the error
            context: Optional dictionary with additional context
        """
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion
        self.context = context or {}

    def __str__(self) -> str:
        """Return formatted error message with suggestion if available."""
        msg = self.message
        if self.suggestion:
            msg += f"\n\nSuggestion: {self.suggestion}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            msg += f"\n\nContext: {context_str}"
        return msg


class ValidationError(ColtypesError):
    """Raised when type construction options are invalid."""

    def __init__(
        self, message: str, suggestion: Optional[str] = None, context: Optional[dict] = None
    ):
        if suggestion is None:
            if "enum" in message.lower():
                suggestion = "Pass the allowed values, e.g. ENUM('active', 'disabled')."
            elif "required" in message.lower() or "missing" in message.lower():
                suggestion = "Check that all required parameters are provided."
        super().__init__(message, suggestion, context)


class UnknownDialectError(ColtypesError):
    """Raised when no type table is registered under a dialect name."""


class UnknownTypeError(ColtypesError):
    """Raised when a type key or native SQL type name cannot be mapped."""


class AmbiguousTypeError(UnknownTypeError):
    """Raised when a native SQL type name maps to several abstract types."""

    def __init__(
        self, message: str, suggestion: Optional[str] = None, context: Optional[dict] = None
    ):
        if suggestion is None:
            suggestion = (
                "Pass the abstract type you expect for this column, "
                "e.g. resolve('TINYINT', expected='BOOLEAN')."
            )
        super().__init__(message, suggestion, context)


class UnsupportedTypeError(ColtypesError):
    """Raised when a dialect cannot natively express an abstract type."""

    def __init__(
        self, message: str, suggestion: Optional[str] = None, context: Optional[dict] = None
    ):
        if suggestion is None:
            suggestion = (
                "This type has no native representation in the dialect. "
                "Read the column as its storage type (e.g. TEXT) instead."
            )
        super().__init__(message, suggestion, context)


class ExecutionError(ColtypesError):
    """Raised when SQL execution fails."""

    def __init__(
        self, message: str, suggestion: Optional[str] = None, context: Optional[dict] = None
    ):
        if suggestion is None:
            if "no such table" in message.lower():
                suggestion = (
                    "The table does not exist. Check the table name spelling and "
                    "ensure the table has been created."
                )
            elif "syntax error" in message.lower():
                suggestion = (
                    "There's a SQL syntax error. Use compile_create_table() to "
                    "inspect the generated DDL."
                )
        super().__init__(message, suggestion, context)


class UnsupportedOptionWarning(UserWarning):
    """Emitted when a type option is dropped because the dialect lacks it."""
