"""
Microsoft SQL Server dialect implementation.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import ClassVar, Mapping

from .base import BaseDialect, DialectCapabilities
from .types import DbType


@dataclass(frozen=True)
class SqlServerDialect(BaseDialect):
    """
    SQL Server dialect for client/server deployments.

    Sizes are fixed in the type table; length, precision and scale are ignored.
    Identity columns always carry a type (``Id INT IDENTITY NOT NULL``), so
    ``identity_column_requires_explicit_type`` is on even though the base rules
    leave it off.
    """

    name: ClassVar[str] = "sqlserver"
    param_style: ClassVar[str] = "qmark"
    capabilities: ClassVar[DialectCapabilities] = DialectCapabilities(
        identity_column_requires_explicit_type=True,
        supports_schema_namespaces=True,
    )

    identity_column_clause: ClassVar[str] = "IDENTITY NOT NULL"
    identity_retrieval_statement: ClassVar[str] = "select SCOPE_IDENTITY()"

    type_names: ClassVar[Mapping[DbType, str]] = MappingProxyType(
        {
            DbType.GUID: "UNIQUEIDENTIFIER",
            DbType.BINARY: "VARBINARY(8000)",
            DbType.TIME: "DATETIME",
            DbType.DATE: "DATETIME",
            DbType.DATETIME: "DATETIME",
            DbType.BOOLEAN: "BIT",
            DbType.BYTE: "TINYINT",
            DbType.CURRENCY: "MONEY",
            DbType.DECIMAL: "DECIMAL(19,5)",
            DbType.DOUBLE: "FLOAT(53)",
            DbType.INT16: "SMALLINT",
            DbType.INT32: "INT",
            DbType.INT64: "BIGINT",
            DbType.SINGLE: "REAL",
            DbType.ANSI_STRING_FIXED_LENGTH: "CHAR(255)",
            DbType.ANSI_STRING: "VARCHAR(255)",
            DbType.STRING_FIXED_LENGTH: "NCHAR(255)",
            DbType.STRING: "NVARCHAR(255)",
        }
    )

    def render_pagination(self, sql: str, offset: int, limit: int) -> str:
        self._check_page_bounds(offset, limit)
        parts = [sql]
        if offset:
            parts.append(f"OFFSET {offset}")
        if limit:
            parts.append(f"FETCH FIRST {limit} ROWS ONLY")
        return " ".join(parts)
