"""Public API functions for json-equivalence.

This module provides the user-facing functions: compare, compare_json,
is_equivalent, assert_json_equals and assert_json_not_equals.  Each call
creates a fresh ``DiffResult``; comparators passed in are only read, so one
instance may serve any number of calls.

``mode_or_comparator`` everywhere accepts a ``CompareMode``, a comparator
(anything satisfying ``JSONComparator``) or a bool (True for STRICT, False
for LENIENT).
"""

from __future__ import annotations

from typing import Any

from json_equivalence.algorithm.config import CompareMode
from json_equivalence.comparator import DefaultComparator
from json_equivalence.protocols import JSONComparator
from json_equivalence.result import DiffResult
from json_equivalence.tree.nodes import ValueKind, describe, kind_of
from json_equivalence.tree.parser import JsonLiteral, parse_json

__all__ = [
    "assert_json_equals",
    "assert_json_not_equals",
    "compare",
    "compare_json",
    "is_equivalent",
]

ModeOrComparator = CompareMode | JSONComparator | bool


def _comparator_for(mode_or_comparator: ModeOrComparator) -> JSONComparator:
    if isinstance(mode_or_comparator, bool):
        return DefaultComparator(CompareMode.of(mode_or_comparator))
    if isinstance(mode_or_comparator, CompareMode):
        return DefaultComparator(mode_or_comparator)
    if isinstance(mode_or_comparator, JSONComparator):
        return mode_or_comparator
    msg = f"Expected a CompareMode, a comparator or a bool, got {mode_or_comparator!r}"
    raise TypeError(msg)


def _shape_mismatch(expected: Any, actual: Any) -> DiffResult:
    return DiffResult().fail(
        "",
        f"Expected {describe(expected)} but got {describe(actual)}",
        expected=expected,
        actual=actual,
    )


def compare(
    expected: Any,
    actual: Any,
    mode_or_comparator: ModeOrComparator = CompareMode.STRICT,
) -> DiffResult:
    """Compare two JSON values and return the accumulated differences.

    Args:
        expected:           Expected JSON value (dict, list, str, int, float, bool, None).
        actual:             Actual JSON value.
        mode_or_comparator: Strictness preset or comparator.  Defaults to
                            ``CompareMode.STRICT``.

    Returns:
        A ``DiffResult``; ``failed()`` is False when the values are equivalent.
        When one value is an object and the other an array (or one is a
        container and the other a scalar) the result holds a single failure
        at the root path and no recursive comparison takes place.
    """
    comparator = _comparator_for(mode_or_comparator)
    expected_kind = kind_of(expected)
    actual_kind = kind_of(actual)
    containers = (ValueKind.OBJECT, ValueKind.ARRAY)
    if (expected_kind in containers or actual_kind in containers) and (
        expected_kind is not actual_kind
    ):
        return _shape_mismatch(expected, actual)
    return comparator.compare_json(expected, actual)


def compare_json(
    expected_text: str,
    actual_text: str,
    mode_or_comparator: ModeOrComparator = CompareMode.STRICT,
) -> DiffResult:
    """Parse two JSON texts and compare them.

    Top-level literal tokens (quoted strings, numbers, ``true``, ``false``,
    ``null``) are compared by their text.

    Raises:
        JSONParseError: If either text is malformed.  Parse errors are never
            reported as diff entries.
    """
    comparator = _comparator_for(mode_or_comparator)
    expected = parse_json(expected_text)
    actual = parse_json(actual_text)

    if isinstance(expected, JsonLiteral) and isinstance(actual, JsonLiteral):
        result = DiffResult()
        if expected.text != actual.text:
            result.fail(
                "",
                f"Expected {expected.text} but got {actual.text}",
                expected=expected.text,
                actual=actual.text,
            )
        return result
    if isinstance(expected, JsonLiteral) or isinstance(actual, JsonLiteral):
        expected_desc = expected.text if isinstance(expected, JsonLiteral) else describe(expected)
        actual_desc = actual.text if isinstance(actual, JsonLiteral) else describe(actual)
        return DiffResult().fail("", f"Expected {expected_desc} but got {actual_desc}")
    if kind_of(expected) is not kind_of(actual):
        return _shape_mismatch(expected, actual)
    return comparator.compare_json(expected, actual)


def _compare_any(
    expected: Any, actual: Any, mode_or_comparator: ModeOrComparator
) -> DiffResult:
    if isinstance(expected, str) and isinstance(actual, str):
        return compare_json(expected, actual, mode_or_comparator)
    if isinstance(expected, str):
        expected = _decode(expected)
    if isinstance(actual, str):
        actual = _decode(actual)
    return compare(expected, actual, mode_or_comparator)


def _decode(text: str) -> Any:
    parsed = parse_json(text)
    return parsed.value() if isinstance(parsed, JsonLiteral) else parsed


def _combined_message(msg: str, details: str) -> str:
    return f"{msg}\n{details}" if msg else details


def is_equivalent(
    expected: Any,
    actual: Any,
    mode_or_comparator: ModeOrComparator = CompareMode.STRICT,
) -> bool:
    """Return True if ``compare(expected, actual, mode_or_comparator)`` passes."""
    return compare(expected, actual, mode_or_comparator).passed()


def assert_json_equals(
    expected: Any,
    actual: Any,
    mode_or_comparator: ModeOrComparator = CompareMode.STRICT,
    msg: str = "",
) -> None:
    """Assert that two JSON documents are equivalent.

    ``str`` arguments are parsed as JSON text; anything else is taken as an
    already-parsed JSON value.

    Raises:
        AssertionError: With ``msg`` and the diff message when they differ.
        JSONParseError: If a text argument is malformed.
    """
    result = _compare_any(expected, actual, mode_or_comparator)
    if result.failed():
        raise AssertionError(_combined_message(msg, result.message()))


def assert_json_not_equals(
    expected: Any,
    actual: Any,
    mode_or_comparator: ModeOrComparator = CompareMode.STRICT,
    msg: str = "",
) -> None:
    """Assert that two JSON documents are NOT equivalent.

    Raises:
        AssertionError: When the documents are equivalent.
        JSONParseError: If a text argument is malformed.
    """
    result = _compare_any(expected, actual, mode_or_comparator)
    if result.passed():
        raise AssertionError(_combined_message(msg, "Two JSON documents are equal"))
