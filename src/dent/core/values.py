"""
Value model for parsed Dent documents.

Dent values are plain Python objects:

    none   -> None
    str    -> str
    int    -> int (signed 64-bit range)
    float  -> float
    bool   -> bool
    list   -> list of values
    dict   -> dict of str to value

The helpers here never raise on a missing key or index; reads fall back to a
default (``None`` unless given).
"""

from __future__ import annotations

import copy
from enum import StrEnum
from typing import Any, TypeAlias

Value: TypeAlias = None | str | int | float | bool | list[Any] | dict[str, Any]


class ValueKind(StrEnum):
    """Type tags of Dent values."""

    NONE = "none"
    STR = "str"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    LIST = "list"
    DICT = "dict"


def kind_of(value: Value) -> ValueKind:
    """Return the Dent type tag of a value.

    Raises:
        TypeError: If the object is not a Dent value.
    """
    if value is None:
        return ValueKind.NONE
    # bool is a subclass of int, check it first
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, int):
        return ValueKind.INT
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.STR
    if isinstance(value, list):
        return ValueKind.LIST
    if isinstance(value, dict):
        return ValueKind.DICT
    raise TypeError(f"Not a Dent value: {type(value).__name__}")


def get(value: Value, key: str, default: Value = None) -> Value:
    """Look up a dictionary key, returning ``default`` for a miss or non-dict."""
    if isinstance(value, dict):
        return value.get(key, default)
    return default


def index(value: Value, i: int, default: Value = None) -> Value:
    """Look up a list index, returning ``default`` when out of range or non-list."""
    if isinstance(value, list) and 0 <= i < len(value):
        return value[i]
    return default


def length(value: Value) -> int | None:
    """Number of elements of a list or dict; ``None`` for scalars."""
    if isinstance(value, (list, dict)):
        return len(value)
    return None


def is_empty(value: Value) -> bool:
    """True only for an empty list or dict."""
    if isinstance(value, (list, dict)):
        return not value
    return False


def clone(value: Value) -> Value:
    """Return an independent deep copy of a value tree."""
    if isinstance(value, (list, dict)):
        return copy.deepcopy(value)
    return value


def to_text(value: Value) -> str:
    """Render a value in canonical text form.

    Lists render as ``[ 1 2 ]`` and dicts as ``{ a: 1 b: 2 }``; empty
    containers render as ``[ ]`` and ``{ }``. Floats use ``repr`` so ``2.0``
    keeps its trailing ``.0``. Dict order follows the dict's iteration order.
    """
    if value is None:
        return "none"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, list):
        parts = ["["]
        parts.extend(to_text(item) for item in value)
        parts.append("]")
        return " ".join(parts)
    if isinstance(value, dict):
        parts = ["{"]
        parts.extend(f"{key}: {to_text(item)}" for key, item in value.items())
        parts.append("}")
        return " ".join(parts)
    raise TypeError(f"Not a Dent value: {type(value).__name__}")
