"""Typed values carried by symbols and parameters, and their text forms."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import Enum, auto
from typing import Union

__all__ = [
    "ValueType",
    "Value",
    "Parameter",
    "format_value",
    "format_value_for_file",
]

Data = Union[int, float, str, bool, None]


class ValueType(Enum):
    """The type tag of a value."""

    INT = auto()
    FLOAT = auto()
    STRING = auto()
    BOOL = auto()
    VOID = auto()


@dataclass
class Value:
    """A typed value with optional code-generation attributes."""

    type: ValueType
    data: Data = None
    place: str | None = None
    false_label: str | None = None
    end_label: str | None = None
    is_constant: bool = False


@dataclass
class Parameter:
    """A named function parameter."""

    name: str
    value: Value | None = None


def _to_int32(number: int) -> int:
    return (number + 2**31) % 2**32 - 2**31


def _to_float32(number: float) -> float:
    return struct.unpack("f", struct.pack("f", number))[0]


def _render(value: Value | None, null_text: str) -> str:
    if value is None:
        return null_text
    if value.type is ValueType.INT:
        return str(_to_int32(int(value.data or 0)))
    if value.type is ValueType.FLOAT:
        return "%f" % _to_float32(float(value.data or 0.0))
    if value.type is ValueType.STRING:
        return f'"{value.data}"'
    if value.type is ValueType.BOOL:
        return "true" if value.data else "false"
    return "unknown"


def format_value(value: Value | None) -> str:
    """Return the console text of a value; a missing value shows as NULL."""
    return _render(value, "NULL")


def format_value_for_file(value: Value | None) -> str:
    """Return the file text of a value; a missing value shows as null."""
    return _render(value, "null")