"""
SQLite dialect implementation.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import ClassVar, Mapping

from .base import BaseDialect, DialectCapabilities
from .types import DbType


@dataclass(frozen=True)
class SQLiteDialect(BaseDialect):
    """
    SQLite dialect for embedded file databases.

    Type names carry no sizes, so length, precision and scale are ignored.
    """

    name: ClassVar[str] = "sqlite"
    param_style: ClassVar[str] = "qmark"
    capabilities: ClassVar[DialectCapabilities] = DialectCapabilities(
        identity_column_requires_explicit_type=False,
        supports_schema_namespaces=False,
    )

    identity_column_clause: ClassVar[str] = "integer primary key autoincrement"
    identity_retrieval_statement: ClassVar[str] = "select last_insert_rowid()"

    type_names: ClassVar[Mapping[DbType, str]] = MappingProxyType(
        {
            DbType.BINARY: "BLOB",
            DbType.BYTE: "TINYINT",
            DbType.INT16: "SMALLINT",
            DbType.INT32: "INT",
            DbType.INT64: "BIGINT",
            DbType.SBYTE: "INTEGER",
            DbType.UINT16: "INTEGER",
            DbType.UINT32: "INTEGER",
            DbType.UINT64: "INTEGER",
            DbType.CURRENCY: "NUMERIC",
            DbType.DECIMAL: "NUMERIC",
            DbType.DOUBLE: "DOUBLE",
            DbType.SINGLE: "DOUBLE",
            DbType.VAR_NUMERIC: "NUMERIC",
            DbType.ANSI_STRING: "TEXT",
            DbType.STRING: "TEXT",
            DbType.ANSI_STRING_FIXED_LENGTH: "TEXT",
            DbType.STRING_FIXED_LENGTH: "TEXT",
            DbType.DATE: "DATE",
            DbType.DATETIME: "DATETIME",
            DbType.TIME: "TIME",
            DbType.BOOLEAN: "BOOL",
            DbType.GUID: "UNIQUEIDENTIFIER",
        }
    )

    def render_pagination(self, sql: str, offset: int, limit: int) -> str:
        self._check_page_bounds(offset, limit)
        if not offset and not limit:
            return sql
        # SQLite only accepts OFFSET after a LIMIT; -1 is unbounded
        parts = [sql, f"limit {limit if limit else -1}"]
        if offset:
            parts.append(f"offset {offset}")
        return " ".join(parts)
