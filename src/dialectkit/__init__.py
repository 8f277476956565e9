"""
dialectkit public package initialization.

Exposes the dialect contract, the built-in backend profiles and the
registry that resolves a dialect for a connection.
"""

from .dialects import (  # noqa: F401
    BaseDialect,
    DbType,
    Dialect,
    DialectCapabilities,
    MySQLDialect,
    PostgresDialect,
    SQLiteDialect,
    SqlServerDialect,
)
from .errors import (  # noqa: F401
    DialectConfigurationError,
    DialectError,
    UnknownDialectError,
    UnsupportedFeatureError,
    UnsupportedLiteralError,
    UnsupportedTypeError,
)
from .registry import DialectRegistry, connection_kind  # noqa: F401

__all__ = [
    "BaseDialect",
    "DbType",
    "Dialect",
    "DialectCapabilities",
    "DialectRegistry",
    "connection_kind",
    "MySQLDialect",
    "PostgresDialect",
    "SQLiteDialect",
    "SqlServerDialect",
    "DialectError",
    "DialectConfigurationError",
    "UnknownDialectError",
    "UnsupportedFeatureError",
    "UnsupportedLiteralError",
    "UnsupportedTypeError",
]
