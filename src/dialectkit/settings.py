"""
Environment-driven settings for dialect construction.
"""

from __future__ import annotations

import os

from .errors import DialectConfigurationError

STRICT_LITERALS_ENV = "DIALECTKIT_STRICT_LITERALS"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def parse_bool(value: str, *, key: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise DialectConfigurationError(f"Invalid boolean value for '{key}': {value!r}")


def resolve_strict_literals(override: bool | None = None, *, env_var: str = STRICT_LITERALS_ENV) -> bool:
    """
    Decide whether unrecognized literal values raise instead of rendering ``null``.

    An explicit ``override`` wins; otherwise ``env_var`` is consulted and
    defaults to ``False`` when unset or blank.
    """

    if override is not None:
        return override
    value = os.getenv(env_var)
    if value is None or not value.strip():
        return False
    return parse_bool(value, key=env_var)
