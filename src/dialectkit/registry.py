"""
Registry binding connection kinds to dialect instances.
"""

from __future__ import annotations

from threading import RLock
from typing import Any, Dict, Iterable

from .dialects import MySQLDialect, PostgresDialect, SQLiteDialect, SqlServerDialect
from .dialects.base import Dialect
from .dsns import dsn_kind, mask_password
from .errors import UnknownDialectError
from .settings import resolve_strict_literals
from .utils import get_logger

DIALECT_KIND_ATTRIBUTE = "dialect_kind"

DEFAULT_KINDS: Dict[str, tuple[str, ...]] = {
    SQLiteDialect.name: ("sqlite", "sqlite3"),
    PostgresDialect.name: ("postgres", "postgresql", "psycopg", "psycopg2"),
    MySQLDialect.name: ("mysql", "mariadb", "pymysql", "mysqldb"),
    SqlServerDialect.name: ("mssql", "sqlserver", "pymssql", "pyodbc"),
}


def normalize_kind(kind: str) -> str:
    """
    Lower-case and strip a connection kind; ``str`` subclasses such as
    ``(str, Enum)`` tags are accepted.
    """

    if not isinstance(kind, str):
        raise TypeError(f"Connection kind must be a string, got {type(kind).__qualname__}")
    normalized = str.strip(kind).lower()
    if not normalized:
        raise ValueError("Connection kind must be a non-empty string")
    return normalized


def connection_kind(connection: Any) -> str:
    """
    Derive the registry key for a live connection handle.

    A ``dialect_kind`` attribute set when the connection wrapper was built
    takes precedence; otherwise the top-level package of the connection's
    type is used, so ``sqlite3.Connection`` maps to ``sqlite3``.
    """

    tagged = getattr(connection, DIALECT_KIND_ATTRIBUTE, None)
    if isinstance(tagged, str) and tagged.strip():
        return normalize_kind(tagged)
    module = type(connection).__module__ or ""
    return normalize_kind(module.split(".", 1)[0] or type(connection).__name__)


class DialectRegistry:
    """
    Thread-safe mapping from connection kind to dialect.

    Registration overwrites any previous binding for the same kind.
    """

    def __init__(self, entries: Iterable[tuple[str, Dialect]] = ()) -> None:
        self._dialects: Dict[str, Dialect] = {}
        self._lock = RLock()
        self.logger = get_logger("registry")
        for kind, dialect in entries:
            self.register(kind, dialect)

    @classmethod
    def with_defaults(cls, *, strict_literals: bool | None = None) -> "DialectRegistry":
        """
        Build a registry holding the built-in profiles under their driver aliases.
        """

        strict = resolve_strict_literals(strict_literals)
        registry = cls()
        for dialect in (
            SQLiteDialect(strict_literals=strict),
            PostgresDialect(strict_literals=strict),
            MySQLDialect(strict_literals=strict),
            SqlServerDialect(strict_literals=strict),
        ):
            for kind in DEFAULT_KINDS[dialect.name]:
                registry.register(kind, dialect)
        return registry

    def register(self, kind: str, dialect: Dialect) -> None:
        """
        Bind ``kind`` to ``dialect``, replacing any earlier binding.

        Raises ``ValueError`` for a blank kind and ``TypeError`` for a non-string one;
        every other call succeeds.
        """

        key = normalize_kind(kind)
        with self._lock:
            previous = self._dialects.get(key)
            self._dialects[key] = dialect
        if previous is not None and previous is not dialect:
            self.logger.info(
                "Replaced dialect for '%s': %s -> %s", key, previous.name, dialect.name
            )
        else:
            self.logger.debug("Registered dialect %s for '%s'", dialect.name, key)

    def resolve(self, connection: Any) -> Dialect:
        return self.resolve_kind(connection_kind(connection))

    def resolve_kind(self, kind: str) -> Dialect:
        key = normalize_kind(kind)
        with self._lock:
            dialect = self._dialects.get(key)
            available = tuple(sorted(self._dialects)) if dialect is None else ()
        if dialect is None:
            self.logger.debug("No dialect registered for '%s'", key)
            raise UnknownDialectError(key, available)
        return dialect

    def resolve_dsn(self, dsn: str) -> Dialect:
        self.logger.debug("Resolving dialect for %s", mask_password(dsn))
        return self.resolve_kind(dsn_kind(dsn))

    def kinds(self) -> list[str]:
        with self._lock:
            return sorted(self._dialects)

    def __contains__(self, kind: object) -> bool:
        if not isinstance(kind, str) or not kind.strip():
            return False
        with self._lock:
            return normalize_kind(kind) in self._dialects

    def __len__(self) -> int:
        with self._lock:
            return len(self._dialects)
