"""ValueKind StrEnum and helpers classifying plain Python JSON values.

JSON values are the plain objects produced by ``json.loads``: ``dict``,
``list``, ``str``, ``int``, ``float``, ``bool`` and ``None``.  The comparator
never mutates them; every dispatch on the shape of a value goes through
``kind_of`` so the set of shapes stays closed.
"""

from __future__ import annotations

import json
import math
from enum import StrEnum, auto
from typing import Any

__all__ = [
    "JsonValue",
    "ValueKind",
    "as_double",
    "describe",
    "is_simple",
    "kind_of",
    "render",
    "scalar_key",
]

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


class ValueKind(StrEnum):
    """Enumeration of the six JSON value kinds.

    - NULL    -> "null"    : JSON null (``None``)
    - BOOLEAN -> "boolean" : true / false
    - NUMBER  -> "number"  : integer or floating point number
    - STRING  -> "string"  : JSON string
    - ARRAY   -> "array"   : JSON array (``list``)
    - OBJECT  -> "object"  : JSON object (``dict``)
    """

    NULL = auto()
    BOOLEAN = auto()
    NUMBER = auto()
    STRING = auto()
    ARRAY = auto()
    OBJECT = auto()


def kind_of(value: Any) -> ValueKind:
    """Return the ValueKind of a JSON value.

    Raises:
        TypeError: If value is not a valid JSON type.
    """
    # bool MUST be checked before int: bool subclasses int in Python
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, list):
        return ValueKind.ARRAY
    if isinstance(value, dict):
        return ValueKind.OBJECT
    msg = f"Unsupported JSON value type: {type(value)!r}"
    raise TypeError(msg)


def is_simple(value: Any) -> bool:
    """Return True for values that are neither arrays nor objects (null included)."""
    return kind_of(value) not in (ValueKind.ARRAY, ValueKind.OBJECT)


def as_double(value: int | float) -> float:
    """Convert a JSON number to a double.

    Integers beyond the double range become signed infinity instead of
    raising ``OverflowError``.
    """
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def scalar_key(value: Any) -> tuple[ValueKind, Any]:
    """Return a hashable identity for a simple value.

    Numbers are folded to float, so ``1`` and ``1.0`` share a key while
    ``True`` and ``1`` (equal and equally hashed in Python) do not.
    """
    kind = kind_of(value)
    match kind:
        case ValueKind.NUMBER:
            return kind, as_double(value)
        case ValueKind.ARRAY | ValueKind.OBJECT:
            msg = f"Not a simple JSON value: {kind}"
            raise TypeError(msg)
        case _:
            return kind, value


def describe(value: Any) -> str:
    """Human-readable rendering of a value for diff messages."""
    match kind_of(value):
        case ValueKind.ARRAY:
            return "a JSON array"
        case ValueKind.OBJECT:
            return "a JSON object"
        case ValueKind.NULL:
            return "null"
        case ValueKind.BOOLEAN:
            return "true" if value else "false"
        case _:
            return str(value)


def render(value: Any) -> str:
    """Compact JSON text of any value."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
