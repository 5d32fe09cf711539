"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible documents. No random values.
Each fixture yields an (expected, actual) pair that is equivalent under
LENIENT mode, so the benchmarks time a full traversal rather than an
early exit.
"""

from __future__ import annotations

from typing import Any

import pytest


def generate_flat_object(num_keys: int, prefix: str = "key") -> dict[str, Any]:
    """Generate a flat dict with deterministic string values."""
    return {f"{prefix}_{i}": f"value_{i}" for i in range(num_keys)}


def _make_nested(depth: int, width: int) -> dict[str, Any]:
    """Generate a tree of ``width`` keys per level, ``depth`` levels deep."""
    if depth == 0:
        return generate_flat_object(width)
    return {f"level_{depth}_{i}": _make_nested(depth - 1, width) for i in range(width)}


def _make_simple_arrays(size: int) -> tuple[dict[str, Any], dict[str, Any]]:
    """Multiset comparison: the same numbers and strings, reversed."""
    values: list[Any] = [i % 97 for i in range(size)] + [f"s{i % 13}" for i in range(size)]
    return {"values": values}, {"values": list(reversed(values))}


def _make_keyed_objects(size: int) -> tuple[dict[str, Any], dict[str, Any]]:
    """Correlation by unique key: records with an ``id`` field, reversed."""
    records = [{"id": i, "name": f"item {i}", "tags": ["a", "b"]} for i in range(size)]
    return {"records": records}, {"records": list(reversed(records))}


def _make_mixed_array(size: int) -> tuple[list[Any], list[Any]]:
    """Exhaustive matching: objects without a unique field, interleaved with arrays."""
    expected: list[Any] = []
    for i in range(size):
        expected.append({"group": i % 3, "payload": {"n": i}})
        expected.append([i, i + 1])
    return expected, list(reversed(expected))


@pytest.fixture
def pair_nested() -> tuple[dict[str, Any], dict[str, Any]]:
    """4 levels x 6 keys: ~1,500 leaf values."""
    return _make_nested(3, 6), _make_nested(3, 6)


@pytest.fixture
def pair_simple_arrays() -> tuple[dict[str, Any], dict[str, Any]]:
    """2,000-element array of scalars."""
    return _make_simple_arrays(1000)


@pytest.fixture
def pair_keyed_objects() -> tuple[dict[str, Any], dict[str, Any]]:
    """500 records correlated by id."""
    return _make_keyed_objects(500)


@pytest.fixture
def pair_mixed_array() -> tuple[list[Any], list[Any]]:
    """60-element mixed array resolved by exhaustive matching."""
    return _make_mixed_array(30)
