"""
Dialect strategy implementations.
"""

from .base import BaseDialect, Dialect, DialectCapabilities
from .mysql import MySQLDialect
from .postgres import PostgresDialect
from .sqlite import SQLiteDialect
from .sqlserver import SqlServerDialect
from .types import DbType

__all__ = [
    "BaseDialect",
    "DbType",
    "Dialect",
    "DialectCapabilities",
    "MySQLDialect",
    "PostgresDialect",
    "SQLiteDialect",
    "SqlServerDialect",
]
