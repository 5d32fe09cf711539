"""Extension points: the ValueMatcher and JSONComparator protocols.

Users can plug in custom matchers and comparators without inheriting from
any base class; any class with conformant methods passes ``isinstance``
checks.

Example::

    from json_equivalence.protocols import MatchOutcome, ValueMatcher

    class AnyTimestamp:
        def match(self, path, actual, expected, result):
            return MatchOutcome.MATCHED if isinstance(actual, str) else MatchOutcome.NOT_MATCHED

    assert isinstance(AnyTimestamp(), ValueMatcher)  # True - structural conformance
"""

from __future__ import annotations

from enum import StrEnum, auto
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from json_equivalence.result import DiffResult

__all__ = ["JSONComparator", "MatchOutcome", "ValueMatcher"]


class MatchOutcome(StrEnum):
    """Outcome of a value matcher.

    - MATCHED:     The values are equivalent.
    - RECORDED:    The matcher handled the comparison and already wrote any
                   diagnostics into the result; the caller records nothing.
    - NOT_MATCHED: The values differ; the caller records a value mismatch.
    """

    MATCHED = auto()
    RECORDED = auto()
    NOT_MATCHED = auto()


@runtime_checkable
class ValueMatcher(Protocol):
    """Structural protocol for per-path equivalence rules.

    ``match`` may raise ``ValueMatcherError`` instead of returning
    ``NOT_MATCHED`` when the default mismatch message would not describe the
    expectation (e.g. when the expectation is a regular expression held by
    the matcher itself).
    """

    def match(
        self, path: str, actual: Any, expected: Any, result: DiffResult
    ) -> MatchOutcome: ...


@runtime_checkable
class JSONComparator(Protocol):
    """Structural protocol for comparators."""

    def compare_json(self, expected: Any, actual: Any) -> DiffResult: ...

    def compare_object(
        self,
        prefix: str,
        expected: dict[str, Any],
        actual: dict[str, Any],
        result: DiffResult,
    ) -> None: ...

    def compare_array(
        self, prefix: str, expected: list[Any], actual: list[Any], result: DiffResult
    ) -> None: ...

    def compare_values(
        self, prefix: str, expected: Any, actual: Any, result: DiffResult
    ) -> None: ...
