"""Helpers for picking a dialect from a connection URL."""

from __future__ import annotations

from urllib.parse import urlsplit, urlunsplit


def dsn_kind(dsn: str) -> str:
    """
    Backend part of a DSN scheme, e.g. ``mssql`` for ``mssql+pyodbc://...``.
    """

    scheme = urlsplit(dsn).scheme
    if not scheme:
        raise ValueError("DSN must start with a scheme such as 'sqlite://'")
    return scheme.split("+", 1)[0].lower()


def mask_password(dsn: str) -> str:
    """
    Return ``dsn`` with any password replaced by ``***`` for logging.
    """

    parts = urlsplit(dsn)
    if parts.password is None:
        return dsn
    userinfo, _, hostinfo = parts.netloc.rpartition("@")
    username = userinfo.split(":", 1)[0]
    return urlunsplit(parts._replace(netloc=f"{username}:***@{hostinfo}"))
