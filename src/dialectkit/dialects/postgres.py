"""
PostgreSQL dialect implementation.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import ClassVar, Mapping

from .base import BaseDialect, DialectCapabilities
from .types import DbType


@dataclass(frozen=True)
class PostgresDialect(BaseDialect):
    """
    PostgreSQL dialect using percent placeholders and sized type names.
    """

    name: ClassVar[str] = "postgresql"
    param_style: ClassVar[str] = "pyformat"
    capabilities: ClassVar[DialectCapabilities] = DialectCapabilities(
        identity_column_requires_explicit_type=True,
        supports_if_exists_before_table_name=True,
        supports_schema_namespaces=True,
    )

    identity_column_clause: ClassVar[str] = "generated by default as identity"
    identity_retrieval_statement: ClassVar[str] = "select lastval()"
    cascade_constraints_clause: ClassVar[str] = " cascade"

    type_names: ClassVar[Mapping[DbType, str]] = MappingProxyType(
        {
            DbType.BINARY: "bytea",
            DbType.BYTE: "smallint",
            DbType.SBYTE: "smallint",
            DbType.INT16: "smallint",
            DbType.INT32: "integer",
            DbType.INT64: "bigint",
            DbType.UINT16: "integer",
            DbType.UINT32: "bigint",
            DbType.UINT64: "numeric(20,0)",
            DbType.CURRENCY: "numeric(19,4)",
            DbType.DECIMAL: "numeric({precision},{scale})",
            DbType.DOUBLE: "double precision",
            DbType.SINGLE: "real",
            DbType.VAR_NUMERIC: "numeric",
            DbType.ANSI_STRING: "varchar({length})",
            DbType.STRING: "varchar({length})",
            DbType.ANSI_STRING_FIXED_LENGTH: "char({length})",
            DbType.STRING_FIXED_LENGTH: "char({length})",
            DbType.DATE: "date",
            DbType.DATETIME: "timestamp",
            DbType.DATETIME_OFFSET: "timestamptz",
            DbType.TIME: "time",
            DbType.BOOLEAN: "boolean",
            DbType.GUID: "uuid",
            DbType.XML: "xml",
        }
    )

    def render_pagination(self, sql: str, offset: int, limit: int) -> str:
        self._check_page_bounds(offset, limit)
        parts = [sql]
        if limit:
            parts.append(f"limit {limit}")
        if offset:
            parts.append(f"offset {offset}")
        return " ".join(parts)
