"""Customizations and stock value matchers.

A ``Customization`` binds a path pattern to a ``ValueMatcher``; a
``CustomComparator`` consults its customizations, in order, before comparing
a value.

Path patterns:

- literal text matches that exact path, e.g. ``"a.b[0].id"``;
- ``*`` matches one path segment (any run of characters except ``.``),
  e.g. ``"a[*].id"`` or ``"*.id"``;
- ``**.`` matches any number (including zero) of leading segments, e.g.
  ``"**.id"`` matches ``"id"`` and ``"a.b[2].id"``;
- ``**`` elsewhere matches any run of characters.
"""

from __future__ import annotations

import re
import threading
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from cachetools import LRUCache, cached

from json_equivalence.algorithm.arrays import element_path
from json_equivalence.exceptions import ValueMatcherError
from json_equivalence.protocols import MatchOutcome, ValueMatcher
from json_equivalence.tree.nodes import ValueKind, describe, kind_of

if TYPE_CHECKING:
    from json_equivalence.protocols import JSONComparator
    from json_equivalence.result import DiffResult

__all__ = [
    "ArrayValueMatcher",
    "Customization",
    "PredicateMatcher",
    "RegularExpressionValueMatcher",
    "compile_path_pattern",
]

# Wildcards by decreasing precedence; the literal text around each one is escaped.
_WILDCARDS: tuple[tuple[str, str], ...] = (
    ("**.", r"(?:.+\.)?"),
    ("**", r".+"),
    ("*", r"[^.]+"),
)


def _translate(pattern: str, level: int = 0) -> str:
    if level == len(_WILDCARDS):
        return re.escape(pattern)
    token, replacement = _WILDCARDS[level]
    return replacement.join(_translate(part, level + 1) for part in pattern.split(token))


def compile_path_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a customization path pattern into a full-match regular expression.

    Raises:
        ValueError: If the pattern is empty.
    """
    if not pattern:
        msg = "Customization path pattern must not be empty"
        raise ValueError(msg)
    return re.compile(_translate(pattern))


class PredicateMatcher:
    """Adapts a plain ``(actual, expected) -> bool`` callable to ``ValueMatcher``."""

    def __init__(self, predicate: Callable[[Any, Any], bool]) -> None:
        self._predicate = predicate

    def match(
        self, path: str, actual: Any, expected: Any, result: DiffResult
    ) -> MatchOutcome:
        if self._predicate(actual, expected):
            return MatchOutcome.MATCHED
        return MatchOutcome.NOT_MATCHED


class Customization:
    """Associates a path pattern (or path predicate) with a value matcher.

    Args:
        path:    A path pattern (see module docstring) or a callable
                 ``(path) -> bool``.
        matcher: A ``ValueMatcher`` or a plain ``(actual, expected) -> bool``
                 callable.

    Raises:
        ValueError: If the path pattern is empty.
        TypeError:  If matcher is neither a ValueMatcher nor callable.
    """

    def __init__(
        self,
        path: str | Callable[[str], bool],
        matcher: ValueMatcher | Callable[[Any, Any], bool],
    ) -> None:
        if isinstance(path, str):
            regex = compile_path_pattern(path)
            self._applies: Callable[[str], bool] = lambda p: regex.fullmatch(p) is not None
        elif callable(path):
            self._applies = path
        else:
            msg = f"Unsupported customization path: {path!r}"
            raise TypeError(msg)

        if isinstance(matcher, ValueMatcher):
            self._matcher: ValueMatcher = matcher
        elif callable(matcher):
            self._matcher = PredicateMatcher(matcher)
        else:
            msg = f"Unsupported value matcher: {matcher!r}"
            raise TypeError(msg)
        self._path = path

    @property
    def path(self) -> str | Callable[[str], bool]:
        return self._path

    @property
    def matcher(self) -> ValueMatcher:
        return self._matcher

    def applies_to(self, path: str) -> bool:
        return bool(self._applies(path))

    def __repr__(self) -> str:
        return f"Customization(path={self._path!r}, matcher={self._matcher!r})"


class ArrayValueMatcher:
    """Matches actual array elements against a cycle of expected patterns.

    Works like a STRICT_ORDER array comparison, except that when the expected
    array is shorter than the compared range, expected elements are reused
    from the start: actual element ``i`` is compared with expected element
    ``(i - from_index) % len(expected)``.  A single expected element thus
    means "every element must match this"; two alternate; and so on.  A
    non-array expected value is treated as a one-element array.

    Given ``{"a": [{"id": 1, "type": "row"}, {"id": 2, "type": "row"}]}``:

    - ``Customization("a", ArrayValueMatcher(DefaultComparator(CompareMode.LENIENT)))``
      with expected ``{"a": {"type": "row"}}`` checks every element's type;
    - ``ArrayValueMatcher.at(comparator, 0)`` with expected ``{"a": [{"id": 1}]}``
      checks the first element only.

    Differences are written to the result by the comparator, so ``match``
    returns ``MatchOutcome.RECORDED``.
    """

    def __init__(
        self,
        comparator: JSONComparator,
        from_index: int = 0,
        to_index: int | None = None,
    ) -> None:
        """Initialise the matcher.

        Args:
            comparator: Comparator used for each element pairing.
            from_index: First actual index compared (inclusive).  Defaults to 0.
            to_index:   Last actual index compared (inclusive).  None means
                the end of the actual array.

        Raises:
            ValueError: If ``from_index < 0`` or ``to_index < from_index``.
        """
        if from_index < 0:
            msg = f"from_index must be >= 0, got {from_index}"
            raise ValueError(msg)
        if to_index is not None and to_index < from_index:
            msg = f"to_index ({to_index}) must be >= from_index ({from_index})"
            raise ValueError(msg)
        self._comparator = comparator
        self._from = from_index
        self._to = to_index

    @classmethod
    def at(cls, comparator: JSONComparator, index: int) -> ArrayValueMatcher:
        """Matcher comparing the single actual element at ``index``."""
        return cls(comparator, index, index)

    def match(
        self, path: str, actual: Any, expected: Any, result: DiffResult
    ) -> MatchOutcome:
        if kind_of(actual) is not ValueKind.ARRAY:
            msg = "ArrayValueMatcher applied to non-array actual value"
            raise TypeError(msg)
        patterns = expected if kind_of(expected) is ValueKind.ARRAY else [expected]
        if not patterns:
            return MatchOutcome.NOT_MATCHED if actual else MatchOutcome.MATCHED

        last = len(actual) - 1 if self._to is None else min(len(actual) - 1, self._to)
        for index in range(self._from, last + 1):
            self._comparator.compare_values(
                element_path(path, index),
                patterns[(index - self._from) % len(patterns)],
                actual[index],
                result,
            )
        return MatchOutcome.RECORDED

    def __repr__(self) -> str:
        return f"ArrayValueMatcher(from_index={self._from}, to_index={self._to})"


@cached(cache=LRUCache(maxsize=256), lock=threading.Lock())
def _compile_dynamic(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern)


class RegularExpressionValueMatcher:
    """Matches the text of the actual value against a regular expression.

    With a constant pattern, every actual value must match it and the
    expected value is ignored.  Without one, the expected value itself is the
    pattern.  The whole text must match.  Failures raise
    ``ValueMatcherError`` so the diff shows the pattern, not the expected
    placeholder.

    Raises:
        ValueError: If a constant pattern is not a valid regular expression.
    """

    def __init__(self, pattern: str | None = None) -> None:
        try:
            self._pattern = None if pattern is None else re.compile(pattern)
        except re.error as ex:
            msg = f"Constant expected pattern invalid: {ex}"
            raise ValueError(msg) from ex

    @property
    def is_static(self) -> bool:
        return self._pattern is not None

    def _pattern_type(self) -> str:
        return "Constant" if self.is_static else "Dynamic"

    def match(
        self, path: str, actual: Any, expected: Any, result: DiffResult
    ) -> MatchOutcome:
        actual_text = describe(actual)
        expected_text = describe(expected)
        if self._pattern is not None:
            pattern = self._pattern
        else:
            try:
                pattern = _compile_dynamic(expected_text)
            except re.error as ex:
                msg = f"{self._pattern_type()} expected pattern invalid: {ex}"
                raise ValueMatcherError(msg, expected_text, actual_text) from ex
        if pattern.fullmatch(actual_text) is None:
            msg = f"{self._pattern_type()} expected pattern did not match value"
            raise ValueMatcherError(msg, pattern.pattern, actual_text)
        return MatchOutcome.MATCHED

    def __repr__(self) -> str:
        pattern = None if self._pattern is None else self._pattern.pattern
        return f"RegularExpressionValueMatcher(pattern={pattern!r})"
