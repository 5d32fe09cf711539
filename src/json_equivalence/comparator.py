"""Comparators: mode-driven recursive comparison of JSON value trees.

``DefaultComparator`` walks expected and actual together and writes every
discrepancy into a ``DiffResult``:

- Objects: every expected key must be present in actual; unless the mode is
  extensible, actual keys absent from expected are reported too.
- Arrays: equal lengths are required, then one of four strategies runs,
  chosen by priority: positional (strict order), multiset (all expected
  elements simple), key correlation (all expected elements objects sharing a
  unique field), exhaustive matching (everything else).
- Values: numbers compare as floats, other scalars by equality, differing
  kinds never match.

``CustomComparator`` consults an ordered list of ``Customization`` before
comparing a value.  ``ArraySizeComparator`` replaces array comparison by a
length check.

Comparators hold only their construction-time configuration, so a single
instance can be shared by concurrent comparisons.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Any

import numpy as np

from json_equivalence.algorithm.arrays import (
    all_objects,
    all_simple_values,
    array_of_objects_to_map,
    array_path,
    cardinality_map,
    element_path,
    find_unique_key,
    format_unique_key,
    is_usable_as_unique_key,
    qualify,
)
from json_equivalence.algorithm.config import ArrayMatching, CompareMode
from json_equivalence.algorithm.matcher import compatible_assignment
from json_equivalence.exceptions import ValueMatcherError
from json_equivalence.protocols import MatchOutcome
from json_equivalence.result import DiffResult
from json_equivalence.tree.nodes import ValueKind, as_double, describe, kind_of, render

if TYPE_CHECKING:
    from json_equivalence.matchers import Customization

__all__ = ["ArraySizeComparator", "CustomComparator", "DefaultComparator"]

logger = logging.getLogger(__name__)


def _is_finite_number(value: Any) -> bool:
    return kind_of(value) is ValueKind.NUMBER and math.isfinite(as_double(value))


def _occurrences(expected_count: int, value: Any, actual_count: int) -> str:
    return (
        f"Expected {expected_count} occurrence(s) of {describe(value)} "
        f"but got {actual_count} occurrence(s)"
    )


class DefaultComparator:
    """Comparator driven by a ``CompareMode``.

    Example::

        from json_equivalence import CompareMode, DefaultComparator

        cmp = DefaultComparator(CompareMode.LENIENT)
        result = cmp.compare_json({"a": 1}, {"a": 1, "b": 2})
        result.passed()   # True: LENIENT is extensible
    """

    def __init__(
        self,
        mode: CompareMode = CompareMode.STRICT,
        array_matching: ArrayMatching = ArrayMatching.GREEDY,
    ) -> None:
        """Initialise the comparator.

        Args:
            mode:           Strictness preset.  Defaults to ``CompareMode.STRICT``.
            array_matching: Pairing used by the exhaustive array fallback.
                Defaults to ``ArrayMatching.GREEDY`` (first fit, no backtracking).
        """
        self._mode = mode
        self._array_matching = array_matching

    @property
    def mode(self) -> CompareMode:
        return self._mode

    @property
    def array_matching(self) -> ArrayMatching:
        return self._array_matching

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compare_json(self, expected: Any, actual: Any) -> DiffResult:
        """Compare two JSON values from the root and return a fresh result."""
        result = DiffResult()
        expected_kind = kind_of(expected)
        actual_kind = kind_of(actual)
        if expected_kind is ValueKind.OBJECT and actual_kind is ValueKind.OBJECT:
            self.compare_object("", expected, actual, result)
        elif expected_kind is ValueKind.ARRAY and actual_kind is ValueKind.ARRAY:
            self.compare_array("", expected, actual, result)
        else:
            self.compare_values("", expected, actual, result)
        return result

    def compare_object(
        self,
        prefix: str,
        expected: dict[str, Any],
        actual: dict[str, Any],
        result: DiffResult,
    ) -> None:
        # Check that actual contains all the expected values
        for key in sorted(expected):
            path = qualify(prefix, key)
            if key in actual:
                self.compare_values(path, expected[key], actual[key], result)
            else:
                result.missing(path, expected[key])

        # If not extensible, check for vice-versa
        if not self._mode.extensible:
            for key in sorted(actual):
                if key not in expected:
                    result.unexpected(qualify(prefix, key), actual[key])

    def compare_array(
        self, prefix: str, expected: list[Any], actual: list[Any], result: DiffResult
    ) -> None:
        if len(expected) != len(actual):
            result.fail(
                array_path(prefix),
                f"Expected {len(expected)} values but got {len(actual)}",
                expected=expected,
                actual=actual,
            )
            return
        if not expected:
            return  # Nothing to compare

        if self._mode.strict_order:
            self.compare_array_with_strict_order(prefix, expected, actual, result)
        elif all_simple_values(expected):
            self.compare_array_of_simple_values(prefix, expected, actual, result)
        elif all_objects(expected):
            self.compare_array_of_objects(prefix, expected, actual, result)
        else:
            logger.debug("%s: mixed array, using exhaustive matching", array_path(prefix))
            self.compare_array_recursively(prefix, expected, actual, result)

    def compare_values(
        self, prefix: str, expected: Any, actual: Any, result: DiffResult
    ) -> None:
        expected_kind = kind_of(expected)
        actual_kind = kind_of(actual)
        match expected_kind, actual_kind:
            case ValueKind.NULL, ValueKind.NULL:
                return
            case ValueKind.NUMBER, ValueKind.NUMBER:
                if as_double(expected) != as_double(actual):
                    result.mismatch(prefix, expected, actual)
            case ValueKind.OBJECT, ValueKind.OBJECT:
                self.compare_object(prefix, expected, actual, result)
            case ValueKind.ARRAY, ValueKind.ARRAY:
                self.compare_array(prefix, expected, actual, result)
            case _ if expected_kind is actual_kind:
                if expected != actual:
                    result.mismatch(prefix, expected, actual)
            case _:
                result.mismatch(prefix, expected, actual)

    # ------------------------------------------------------------------
    # Array strategies
    # ------------------------------------------------------------------

    def compare_array_with_strict_order(
        self, prefix: str, expected: list[Any], actual: list[Any], result: DiffResult
    ) -> None:
        """Compare elements position by position."""
        for index, (expected_item, actual_item) in enumerate(
            zip(expected, actual, strict=True)
        ):
            self.compare_values(element_path(prefix, index), expected_item, actual_item, result)

    def compare_array_of_simple_values(
        self, prefix: str, expected: list[Any], actual: list[Any], result: DiffResult
    ) -> None:
        """Compare arrays as multisets.

        One entry is recorded per missing or surplus occurrence, so the entry
        count equals the size of the multiset symmetric difference.
        """
        path = array_path(prefix)
        expected_counts = cardinality_map(expected)
        actual_counts = cardinality_map(actual)
        for key, (value, expected_count) in expected_counts.items():
            actual_count = actual_counts[key][1] if key in actual_counts else 0
            message = _occurrences(expected_count, value, actual_count)
            for _ in range(expected_count - actual_count):
                result.missing(path, value, message=message)
        for key, (value, actual_count) in actual_counts.items():
            expected_count = expected_counts[key][1] if key in expected_counts else 0
            message = _occurrences(expected_count, value, actual_count)
            for _ in range(actual_count - expected_count):
                result.unexpected(path, value, message=message)

    def compare_array_of_objects(
        self,
        prefix: str,
        expected: list[dict[str, Any]],
        actual: list[Any],
        result: DiffResult,
    ) -> None:
        """Correlate objects by a field whose values identify each element.

        Falls back to exhaustive matching when no field of the expected
        objects is unique, or when that field does not identify the actual
        elements as well.
        """
        unique_key = find_unique_key(expected) if expected else None
        if unique_key is None or not is_usable_as_unique_key(unique_key, actual):
            logger.debug(
                "%s: no usable correlation key, using exhaustive matching",
                array_path(prefix),
            )
            self.compare_array_recursively(prefix, expected, actual, result)
            return

        logger.debug("%s: correlating elements by %r", array_path(prefix), unique_key)
        expected_by_id = array_of_objects_to_map(expected, unique_key)
        actual_by_id = array_of_objects_to_map(actual, unique_key)
        for identity, expected_item in expected_by_id.items():
            path = format_unique_key(prefix, unique_key, expected_item[unique_key])
            if identity not in actual_by_id:
                result.missing(path, expected_item)
                continue
            self.compare_values(path, expected_item, actual_by_id[identity], result)
        for identity, actual_item in actual_by_id.items():
            if identity not in expected_by_id:
                path = format_unique_key(prefix, unique_key, actual_item[unique_key])
                result.unexpected(path, actual_item)

    def compare_array_recursively(
        self, prefix: str, expected: list[Any], actual: list[Any], result: DiffResult
    ) -> None:
        """Pair every expected element with a distinct equivalent actual element.

        The expensive last resort: quadratic in the array length, each pair
        costing a full sub-comparison.  Stops at the first expected element
        left without a partner.
        """
        if self._array_matching is ArrayMatching.OPTIMAL:
            self._match_optimally(prefix, expected, actual, result)
            return

        consumed: set[int] = set()
        for index, expected_item in enumerate(expected):
            path = element_path(prefix, index)
            for candidate, actual_item in enumerate(actual):
                if candidate in consumed:
                    continue
                if self._elements_match(path, expected_item, actual_item):
                    consumed.add(candidate)
                    break
            else:
                self._no_match(path, expected_item, result)
                return

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _match_optimally(
        self, prefix: str, expected: list[Any], actual: list[Any], result: DiffResult
    ) -> None:
        compatible = np.array(
            [
                [
                    self._elements_match(element_path(prefix, index), expected_item, actual_item)
                    for actual_item in actual
                ]
                for index, expected_item in enumerate(expected)
            ],
            dtype=bool,
        ).reshape(len(expected), len(actual))
        assignment = compatible_assignment(compatible)
        for index, expected_item in enumerate(expected):
            if index not in assignment:
                self._no_match(element_path(prefix, index), expected_item, result)
                return

    def _elements_match(self, path: str, expected: Any, actual: Any) -> bool:
        if expected is actual:
            return True
        expected_kind = kind_of(expected)
        if expected_kind is not kind_of(actual):
            return False
        if expected_kind is ValueKind.NULL:
            return True
        trial = DiffResult()
        self.compare_values(path, expected, actual, trial)
        return trial.passed()

    @staticmethod
    def _no_match(path: str, expected: Any, result: DiffResult) -> None:
        result.fail(
            path,
            f"Could not find match for element {render(expected)}",
            expected=expected,
        )


class CustomComparator(DefaultComparator):
    """DefaultComparator with path-scoped value matchers.

    Customizations are consulted in registration order before each value
    comparison; the first one whose path pattern applies wins.  Paths with
    no customization are compared as by ``DefaultComparator``.

    Example::

        from json_equivalence import CompareMode, CustomComparator, Customization

        cmp = CustomComparator(
            CompareMode.STRICT,
            Customization("**.timestamp", lambda actual, expected: True),
        )
    """

    def __init__(
        self,
        mode: CompareMode,
        *customizations: Customization,
        array_matching: ArrayMatching = ArrayMatching.GREEDY,
    ) -> None:
        super().__init__(mode, array_matching=array_matching)
        self._customizations: tuple[Customization, ...] = customizations

    @property
    def customizations(self) -> tuple[Customization, ...]:
        return self._customizations

    def get_customization(self, path: str) -> Customization | None:
        for customization in self._customizations:
            if customization.applies_to(path):
                return customization
        return None

    def compare_values(
        self, prefix: str, expected: Any, actual: Any, result: DiffResult
    ) -> None:
        customization = self.get_customization(prefix)
        if customization is None:
            super().compare_values(prefix, expected, actual, result)
            return

        try:
            outcome = customization.matcher.match(prefix, actual, expected, result)
        except ValueMatcherError as ex:
            logger.debug("%s: value matcher failed: %s", prefix, ex.message)
            result.fail_matcher(prefix, ex)
            return

        if not isinstance(outcome, MatchOutcome):
            msg = f"Value matcher for {prefix!r} returned {outcome!r}, expected a MatchOutcome"
            raise TypeError(msg)
        if outcome is MatchOutcome.NOT_MATCHED:
            result.mismatch(prefix, expected, actual)


class ArraySizeComparator(DefaultComparator):
    """Comparator checking array sizes instead of array contents.

    Each expected array holds either one number (the exact size) or two
    numbers (inclusive minimum and maximum size) of the actual array.  For
    ``{"a": [7, 8, 9]}``:

    - ``{"a": [3]}`` passes (exactly 3 elements);
    - ``{"a": [2, 6]}`` passes (between 2 and 6 elements).

    The mode has no effect on arrays; it governs everything else.
    """

    def compare_array(
        self, prefix: str, expected: list[Any], actual: list[Any], result: DiffResult
    ) -> None:
        path = array_path(prefix)
        if not 1 <= len(expected) <= 2:
            result.fail(
                path,
                "invalid expectation: expected array should contain either 1 or 2 "
                f"elements but contains {len(expected)} elements",
            )
            return
        ranged = len(expected) == 2
        if not _is_finite_number(expected[0]):
            qualifier = "minimum " if ranged else ""
            result.fail(
                path,
                f"invalid expectation: {qualifier}expected array size "
                f"'{describe(expected[0])}' not a number",
            )
            return
        if ranged and not _is_finite_number(expected[1]):
            result.fail(
                path,
                "invalid expectation: maximum expected array size "
                f"'{describe(expected[1])}' not a number",
            )
            return
        min_length = int(expected[0])
        if min_length < 0:
            result.fail(
                path,
                f"invalid expectation: minimum expected array size '{min_length}' negative",
            )
            return
        max_length = int(expected[1]) if ranged else min_length
        if max_length < min_length:
            result.fail(
                path,
                f"invalid expectation: maximum expected array size '{max_length}' "
                f"less than minimum expected array size '{min_length}'",
            )
            return
        if not min_length <= len(actual) <= max_length:
            bounds = f"{min_length} to {max_length}" if ranged else f"{min_length}"
            result.mismatch(
                path, f"array size of {bounds} elements", f"{len(actual)} elements"
            )
