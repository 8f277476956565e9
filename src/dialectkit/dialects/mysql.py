"""
MySQL dialect implementation.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import ClassVar, Mapping

from .base import BaseDialect, DialectCapabilities
from .types import DbType

# Largest LIMIT MySQL accepts; stands in for "no limit" when only an offset is set
_UNBOUNDED_LIMIT = 18446744073709551615


@dataclass(frozen=True)
class MySQLDialect(BaseDialect):
    """
    MySQL dialect using backtick quoting and percent-style placeholders.
    """

    name: ClassVar[str] = "mysql"
    param_style: ClassVar[str] = "pyformat"
    capabilities: ClassVar[DialectCapabilities] = DialectCapabilities(
        identity_column_requires_explicit_type=True,
        supports_if_exists_before_table_name=True,
        supports_schema_namespaces=True,
    )

    identifier_quote_open: ClassVar[str] = "`"
    identifier_quote_close: ClassVar[str] = "`"

    identity_column_clause: ClassVar[str] = "auto_increment"
    identity_retrieval_statement: ClassVar[str] = "select last_insert_id()"

    type_names: ClassVar[Mapping[DbType, str]] = MappingProxyType(
        {
            DbType.BINARY: "varbinary({length})",
            DbType.BYTE: "tinyint unsigned",
            DbType.SBYTE: "tinyint",
            DbType.INT16: "smallint",
            DbType.INT32: "int",
            DbType.INT64: "bigint",
            DbType.UINT16: "smallint unsigned",
            DbType.UINT32: "int unsigned",
            DbType.UINT64: "bigint unsigned",
            DbType.CURRENCY: "decimal(19,4)",
            DbType.DECIMAL: "decimal({precision},{scale})",
            DbType.DOUBLE: "double",
            DbType.SINGLE: "float",
            DbType.VAR_NUMERIC: "decimal({precision},{scale})",
            DbType.ANSI_STRING: "varchar({length})",
            DbType.STRING: "varchar({length})",
            DbType.ANSI_STRING_FIXED_LENGTH: "char({length})",
            DbType.STRING_FIXED_LENGTH: "char({length})",
            DbType.DATE: "date",
            DbType.DATETIME: "datetime",
            DbType.TIME: "time",
            DbType.BOOLEAN: "tinyint(1)",
            DbType.GUID: "char(36)",
        }
    )

    def render_drop_foreign_key_constraint(self, name: str) -> str:
        return f" drop foreign key {name}"

    def render_pagination(self, sql: str, offset: int, limit: int) -> str:
        self._check_page_bounds(offset, limit)
        if not offset and not limit:
            return sql
        parts = [sql, f"limit {limit if limit else _UNBOUNDED_LIMIT}"]
        if offset:
            parts.append(f"offset {offset}")
        return " ".join(parts)
