"""
Abstract column type classifiers shared by every dialect.
"""

from __future__ import annotations

from enum import Enum


class DbType(str, Enum):
    """
    Backend-neutral data type classifier used as the key of type tables.
    """

    BINARY = "binary"
    BYTE = "byte"
    SBYTE = "sbyte"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    CURRENCY = "currency"
    DECIMAL = "decimal"
    DOUBLE = "double"
    SINGLE = "single"
    VAR_NUMERIC = "var_numeric"
    ANSI_STRING = "ansi_string"
    STRING = "string"
    ANSI_STRING_FIXED_LENGTH = "ansi_string_fixed_length"
    STRING_FIXED_LENGTH = "string_fixed_length"
    DATE = "date"
    DATETIME = "datetime"
    DATETIME_OFFSET = "datetime_offset"
    TIME = "time"
    BOOLEAN = "boolean"
    GUID = "guid"
    XML = "xml"

    def __str__(self) -> str:
        return self.value
