"""
Dialect contract and the shared rendering rules every backend profile extends.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence, Set
from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any, ClassVar, Protocol

from ..errors import UnsupportedFeatureError, UnsupportedLiteralError, UnsupportedTypeError
from ..utils import get_logger
from .types import DbType

logger = get_logger("dialects")

# Values with no scalar SQL literal form
_UNRECOGNIZED_TYPES = (bytes, bytearray, memoryview, complex, Mapping, Set, list, tuple)


@dataclass(frozen=True)
class DialectCapabilities:
    """
    Feature flags describing backend capabilities.
    """

    supports_unique_constraints: bool = True
    supports_identity_columns: bool = True
    identity_column_requires_explicit_type: bool = False
    supports_if_exists_before_table_name: bool = False
    supports_if_exists_after_table_name: bool = False
    supports_foreign_key_in_alter_table: bool = True
    supports_schema_namespaces: bool = False


class Dialect(Protocol):
    """
    Strategy interface consumed by query and schema builders.
    """

    @property
    def name(self) -> str: ...

    @property
    def param_style(self) -> str: ...

    @property
    def capabilities(self) -> DialectCapabilities: ...

    @property
    def create_table_keyword(self) -> str: ...

    @property
    def primary_key_keyword(self) -> str: ...

    @property
    def null_column_marker(self) -> str: ...

    @property
    def supports_unique_constraints(self) -> bool: ...

    @property
    def supports_identity_columns(self) -> bool: ...

    @property
    def identity_column_requires_explicit_type(self) -> bool: ...

    @property
    def identity_column_clause(self) -> str: ...

    @property
    def identity_retrieval_statement(self) -> str: ...

    def resolve_type_name(
        self,
        db_type: DbType | str,
        length: int | None = None,
        precision: int = 0,
        scale: int = 0,
    ) -> str: ...

    def format_literal(self, value: Any) -> str: ...

    def quote_identifier(self, identifier: str) -> str: ...

    def quote_table_name(self, table_name: str) -> str: ...

    def quote_column_name(self, column_name: str) -> str: ...

    def unquote_identifier(self, quoted: str) -> str: ...

    def format_table(self, table_name: str) -> str: ...

    def parameter_placeholder(self, position: int | None = None) -> str: ...

    def render_column_definition(self, column: str, column_type: str, *, nullable: bool) -> str: ...

    def render_identity_column(self, column: str, db_type: DbType | str = DbType.INT32) -> str: ...

    def render_drop_table(self, name: str) -> str: ...

    def render_add_foreign_key_constraint(
        self,
        name: str,
        source_columns: Sequence[str],
        target_table: str,
        target_columns: Sequence[str],
        target_is_primary_key: bool,
    ) -> str: ...

    def render_drop_foreign_key_constraint(self, name: str) -> str: ...

    def render_pagination(self, sql: str, offset: int, limit: int) -> str: ...


@dataclass(frozen=True)
class BaseDialect(ABC):
    """
    Portable SQL defaults for every contract operation.

    Profiles subclass this once and override class attributes or methods only
    where their backend diverges. The type table and the identity retrieval
    statement have no portable form, so every profile must supply them.

    ``strict_literals`` makes :meth:`format_literal` raise for values with no
    SQL literal form instead of rendering ``null``.
    """

    strict_literals: bool = False

    name: ClassVar[str] = "ansi"
    param_style: ClassVar[str] = "qmark"
    capabilities: ClassVar[DialectCapabilities] = DialectCapabilities()

    create_table_keyword: ClassVar[str] = "create table"
    primary_key_keyword: ClassVar[str] = "primary key"
    null_column_marker: ClassVar[str] = ""
    null_literal: ClassVar[str] = "null"
    identity_column_clause: ClassVar[str] = "IDENTITY NOT NULL"
    cascade_constraints_clause: ClassVar[str] = ""

    identifier_quote_open: ClassVar[str] = '"'
    identifier_quote_close: ClassVar[str] = '"'
    literal_quote: ClassVar[str] = "'"

    default_length: ClassVar[int] = 255
    default_precision: ClassVar[int] = 19
    default_scale: ClassVar[int] = 5

    @property
    @abstractmethod
    def type_names(self) -> Mapping[DbType, str]:
        """Immutable mapping of classifier to backend type name."""

    @property
    @abstractmethod
    def identity_retrieval_statement(self) -> str:
        """Statement returning the identity generated by the last insert."""

    # ------------------------------------------------------------------ #
    # Capability flags
    # ------------------------------------------------------------------ #
    @property
    def supports_unique_constraints(self) -> bool:
        return self.capabilities.supports_unique_constraints

    @property
    def supports_identity_columns(self) -> bool:
        return self.capabilities.supports_identity_columns

    @property
    def identity_column_requires_explicit_type(self) -> bool:
        return self.capabilities.identity_column_requires_explicit_type

    # ------------------------------------------------------------------ #
    # Types
    # ------------------------------------------------------------------ #
    def resolve_type_name(
        self,
        db_type: DbType | str,
        length: int | None = None,
        precision: int = 0,
        scale: int = 0,
    ) -> str:
        """
        Translate an abstract classifier into this backend's type name.

        ``length`` defaults to :attr:`default_length`; ``precision == 0``
        means unset and selects :attr:`default_precision` and
        :attr:`default_scale`. Type names without placeholders ignore all
        three.
        """

        key = self._coerce_db_type(db_type)
        template = self.type_names.get(key) if key is not None else None
        if template is None:
            raise UnsupportedTypeError(key if key is not None else db_type, self.name)
        if precision:
            precision_value, scale_value = precision, scale
        else:
            precision_value, scale_value = self.default_precision, self.default_scale
        return template.format(
            length=length or self.default_length,
            precision=precision_value,
            scale=scale_value,
        )

    @staticmethod
    def _coerce_db_type(db_type: DbType | str) -> DbType | None:
        if isinstance(db_type, DbType):
            return db_type
        if isinstance(db_type, str):
            try:
                return DbType(db_type.strip().lower())
            except ValueError:
                return None
        return None

    # ------------------------------------------------------------------ #
    # Literals
    # ------------------------------------------------------------------ #
    def format_literal(self, value: Any) -> str:
        if value is None:
            return self.null_literal
        if isinstance(value, bool):
            return "1" if value else "0"
        if isinstance(value, Enum):
            return self.format_literal(value.value)
        if isinstance(value, str):
            return self.quote_literal(value)
        if isinstance(value, (int, float, Decimal)):
            return self._format_number(value)
        if isinstance(value, (date, time)):
            return self.quote_literal(self._format_temporal(value))
        if isinstance(value, _UNRECOGNIZED_TYPES):
            return self._unrecognized_literal(value)
        return self.quote_literal(str(value))

    def quote_literal(self, text: str) -> str:
        quote = self.literal_quote
        return quote + text.replace(quote, quote * 2) + quote

    def _format_number(self, value: int | float | Decimal) -> str:
        # str/repr/format never consult the process locale
        if isinstance(value, int):
            return str(int(value))
        if isinstance(value, float):
            if not math.isfinite(value):
                return self._unrecognized_literal(value)
            return repr(value)
        if not value.is_finite():
            return self._unrecognized_literal(value)
        return format(value, "f")

    @staticmethod
    def _format_temporal(value: date | time) -> str:
        if isinstance(value, datetime):
            return value.isoformat(sep=" ")
        return value.isoformat()

    def _unrecognized_literal(self, value: Any) -> str:
        value_type = type(value)
        if self.strict_literals:
            raise UnsupportedLiteralError(value_type, self.name)
        logger.warning(
            "No SQL literal form for %s value; rendering %s",
            value_type.__qualname__,
            self.null_literal,
            extra={"dialect": self.name, "value_type": value_type.__qualname__},
        )
        return self.null_literal

    # ------------------------------------------------------------------ #
    # Identifiers
    # ------------------------------------------------------------------ #
    def quote_identifier(self, identifier: str) -> str:
        close = self.identifier_quote_close
        escaped = identifier.replace(close, close * 2)
        return f"{self.identifier_quote_open}{escaped}{close}"

    def unquote_identifier(self, quoted: str) -> str:
        opening, close = self.identifier_quote_open, self.identifier_quote_close
        if len(quoted) < 2 or not quoted.startswith(opening) or not quoted.endswith(close):
            raise ValueError(f"Not a quoted identifier: {quoted!r}")
        return quoted[len(opening) : -len(close)].replace(close * 2, close)

    def quote_table_name(self, table_name: str) -> str:
        return self.quote_identifier(table_name)

    def quote_column_name(self, column_name: str) -> str:
        return self.quote_identifier(column_name)

    def format_table(self, table_name: str) -> str:
        if self.capabilities.supports_schema_namespaces and "." in table_name:
            schema, table = table_name.split(".", 1)
            return f"{self.quote_identifier(schema)}.{self.quote_table_name(table)}"
        return self.quote_table_name(table_name)

    def parameter_placeholder(self, position: int | None = None) -> str:
        return "%s" if self.param_style in ("format", "pyformat") else "?"

    # ------------------------------------------------------------------ #
    # DDL fragments
    # ------------------------------------------------------------------ #
    def render_column_definition(self, column: str, column_type: str, *, nullable: bool) -> str:
        rendered = f"{self.quote_column_name(column)} {column_type}"
        if not nullable:
            return f"{rendered} not null"
        if self.null_column_marker:
            return f"{rendered} {self.null_column_marker}"
        return rendered

    def render_identity_column(self, column: str, db_type: DbType | str = DbType.INT32) -> str:
        if not self.supports_identity_columns:
            raise UnsupportedFeatureError(f"Dialect '{self.name}' does not support identity columns")
        quoted = self.quote_column_name(column)
        if self.identity_column_requires_explicit_type:
            return f"{quoted} {self.resolve_type_name(db_type)} {self.identity_column_clause}"
        return f"{quoted} {self.identity_column_clause}"

    def render_drop_table(self, name: str) -> str:
        parts = ["drop table "]
        if self.capabilities.supports_if_exists_before_table_name:
            parts.append("if exists ")
        parts.append(name)
        parts.append(self.cascade_constraints_clause)
        if self.capabilities.supports_if_exists_after_table_name:
            parts.append(" if exists")
        return "".join(parts)

    def render_add_foreign_key_constraint(
        self,
        name: str,
        source_columns: Sequence[str],
        target_table: str,
        target_columns: Sequence[str],
        target_is_primary_key: bool,
    ) -> str:
        parts: list[str] = []
        if self.capabilities.supports_foreign_key_in_alter_table:
            parts.append(" add")
        parts.append(
            f" constraint {name} foreign key ({', '.join(source_columns)}) references {target_table}"
        )
        if not target_is_primary_key:
            parts.append(f" ({', '.join(target_columns)})")
        return "".join(parts)

    def render_drop_foreign_key_constraint(self, name: str) -> str:
        return f" drop constraint {name}"

    # ------------------------------------------------------------------ #
    # Pagination
    # ------------------------------------------------------------------ #
    def render_pagination(self, sql: str, offset: int, limit: int) -> str:
        """
        Append SQL:2008 ``offset``/``fetch first`` clauses; ``0`` means unset.
        """

        self._check_page_bounds(offset, limit)
        parts = [sql]
        if offset:
            parts.append(f"offset {offset} rows")
        if limit:
            parts.append(f"fetch first {limit} rows only")
        return " ".join(parts)

    @staticmethod
    def _check_page_bounds(offset: int, limit: int) -> None:
        if offset < 0:
            raise ValueError(f"offset must be zero or positive, got {offset}")
        if limit < 0:
            raise ValueError(f"limit must be zero or positive, got {limit}")
