"""Path and array helpers shared by the comparators.

Path grammar (part of the diff message contract):
- object member: ``prefix.key`` (just ``key`` at the root)
- array element: ``prefix[index]``
- correlated element: ``prefix[field=value]``
- array as a whole (multiset, length checks): ``prefix[]``
"""

from __future__ import annotations

import json
from typing import Any

from json_equivalence.tree.nodes import ValueKind, describe, is_simple, kind_of, scalar_key

__all__ = [
    "all_objects",
    "all_simple_values",
    "array_of_objects_to_map",
    "array_path",
    "cardinality_map",
    "element_path",
    "find_unique_key",
    "format_unique_key",
    "is_usable_as_unique_key",
    "multiset_key",
    "qualify",
]


def qualify(prefix: str, key: str) -> str:
    return key if prefix == "" else f"{prefix}.{key}"


def element_path(prefix: str, index: int) -> str:
    return f"{prefix}[{index}]"


def array_path(prefix: str) -> str:
    return f"{prefix}[]"


def format_unique_key(prefix: str, field: str, value: Any) -> str:
    return f"{prefix}[{field}={describe(value)}]"


def all_simple_values(array: list[Any]) -> bool:
    return all(is_simple(item) for item in array)


def all_objects(array: list[Any]) -> bool:
    return all(kind_of(item) is ValueKind.OBJECT for item in array)


def multiset_key(value: Any) -> tuple[ValueKind, Any]:
    """Hashable identity of any value for cardinality counting.

    Simple values use ``scalar_key``; arrays and objects are keyed by their
    canonical JSON text.
    """
    if is_simple(value):
        return scalar_key(value)
    return kind_of(value), json.dumps(value, sort_keys=True, separators=(",", ":"))


def cardinality_map(values: list[Any]) -> dict[tuple[ValueKind, Any], tuple[Any, int]]:
    """Count occurrences of values.

    Returns:
        Insertion-ordered mapping ``multiset_key(value) -> (first value seen, count)``.
    """
    counts: dict[tuple[ValueKind, Any], tuple[Any, int]] = {}
    for value in values:
        key = multiset_key(value)
        first, count = counts.get(key, (value, 0))
        counts[key] = (first, count + 1)
    return counts


def is_usable_as_unique_key(candidate: str, array: list[Any]) -> bool:
    """Return True if ``candidate`` identifies every element of ``array``.

    True iff every element is an object holding ``candidate`` whose value is
    simple and non-null, and no two of those values are equal.
    """
    seen: set[tuple[ValueKind, Any]] = set()
    for item in array:
        if kind_of(item) is not ValueKind.OBJECT or candidate not in item:
            return False
        value = item[candidate]
        if value is None or not is_simple(value):
            return False
        key = scalar_key(value)
        if key in seen:
            return False
        seen.add(key)
    return True


def find_unique_key(expected: list[Any]) -> str | None:
    """Find a field of the first expected object usable as a correlation key.

    Candidates are tried in sorted order.  Returns None when no field works.
    """
    for candidate in sorted(expected[0]):
        if is_usable_as_unique_key(candidate, expected):
            return candidate
    return None


def array_of_objects_to_map(
    array: list[dict[str, Any]], field: str
) -> dict[tuple[ValueKind, Any], dict[str, Any]]:
    """Index objects by the value of ``field`` (insertion ordered)."""
    return {scalar_key(item[field]): item for item in array}
