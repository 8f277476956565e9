"""
Error hierarchy raised by dialects and the dialect registry.
"""

from __future__ import annotations

from typing import Any


class DialectError(RuntimeError):
    """Base error for dialect-related failures."""


class DialectConfigurationError(DialectError):
    """Raised when settings supplied through the environment are invalid."""


class UnknownDialectError(DialectError, LookupError):
    """
    Raised when no dialect is registered for a connection kind.

    Recoverable: register a dialect for ``kind`` and resolve again.
    """

    def __init__(self, kind: str, available: tuple[str, ...] = ()) -> None:
        self.kind = kind
        self.available = available
        message = f"Unknown dialect for connection kind '{kind}'"
        if available:
            message += f". Registered kinds: {', '.join(available)}"
        super().__init__(message)


class UnsupportedTypeError(DialectError, LookupError):
    """
    Raised when a dialect has no type name for an abstract classifier.
    """

    def __init__(self, db_type: Any, dialect: str) -> None:
        self.db_type = db_type
        self.dialect = dialect
        super().__init__(f"Dialect '{dialect}' has no type mapping for '{db_type}'")


class UnsupportedLiteralError(DialectError, TypeError):
    """
    Raised in strict mode when a value has no SQL literal form.
    """

    def __init__(self, value_type: type, dialect: str) -> None:
        self.value_type = value_type
        self.dialect = dialect
        super().__init__(
            f"Dialect '{dialect}' cannot render a literal for {value_type.__qualname__} values"
        )


class UnsupportedFeatureError(DialectError):
    """Raised when rendering requires a capability the dialect lacks."""
