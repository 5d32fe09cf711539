"""DiffEntry and DiffResult: the accumulator written during one comparison.

A ``DiffResult`` is created fresh by every top-level comparison and threaded
by reference through the whole recursive descent.  Entries are appended in
traversal order and never reordered.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import TYPE_CHECKING, Any

from json_equivalence.tree.nodes import describe

if TYPE_CHECKING:
    from json_equivalence.exceptions import ValueMatcherError

__all__ = ["DiffEntry", "DiffKind", "DiffResult"]


class DiffKind(StrEnum):
    """Kinds of recorded discrepancy.

    - MISSING        -> "missing"        : expected content absent from actual
    - UNEXPECTED     -> "unexpected"     : actual content absent from expected
    - VALUE_MISMATCH -> "value_mismatch" : both present, values differ
    - FAILURE        -> "failure"        : structural failure (e.g. array length)
    """

    MISSING = auto()
    UNEXPECTED = auto()
    VALUE_MISMATCH = auto()
    FAILURE = auto()


@dataclass(frozen=True, slots=True)
class DiffEntry:
    """One discrepancy, addressed by path.

    Attributes:
        kind:     Which kind of discrepancy this is (see DiffKind).
        path:     Path of the offending value, e.g. ``"a.b[2]"``; ``""`` is the root.
        expected: Expected value, when relevant.
        actual:   Actual value, when relevant.
        message:  Explicit detail text; replaces the default rendering.
    """

    kind: DiffKind
    path: str
    expected: Any = None
    actual: Any = None
    message: str | None = None

    @property
    def detail(self) -> str:
        if self.message is not None:
            return self.message
        match self.kind:
            case DiffKind.MISSING:
                return f"Expected: {describe(self.expected)}, but none found"
            case DiffKind.UNEXPECTED:
                return f"Unexpected: {describe(self.actual)}"
            case _:
                return f"Expected: {describe(self.expected)}, got: {describe(self.actual)}"

    def __str__(self) -> str:
        return f"{self.path}: {self.detail}" if self.path else self.detail


class DiffResult:
    """Ordered, append-only collection of DiffEntry.

    Example::

        result = DiffResult()
        result.unexpected("b", 2)
        result.failed()   # True
        result.message()  # "b: Unexpected: 2"
    """

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: list[DiffEntry] = []

    # ------------------------------------------------------------------
    # Recorders
    # ------------------------------------------------------------------

    def add(self, entry: DiffEntry) -> DiffResult:
        self._entries.append(entry)
        return self

    def missing(self, path: str, expected: Any, message: str | None = None) -> DiffResult:
        return self.add(DiffEntry(DiffKind.MISSING, path, expected=expected, message=message))

    def unexpected(self, path: str, actual: Any, message: str | None = None) -> DiffResult:
        return self.add(DiffEntry(DiffKind.UNEXPECTED, path, actual=actual, message=message))

    def mismatch(
        self, path: str, expected: Any, actual: Any, message: str | None = None
    ) -> DiffResult:
        return self.add(
            DiffEntry(
                DiffKind.VALUE_MISMATCH,
                path,
                expected=expected,
                actual=actual,
                message=message,
            )
        )

    def fail(
        self, path: str, message: str, expected: Any = None, actual: Any = None
    ) -> DiffResult:
        return self.add(
            DiffEntry(
                DiffKind.FAILURE, path, expected=expected, actual=actual, message=message
            )
        )

    def fail_matcher(self, path: str, error: ValueMatcherError) -> DiffResult:
        """Record a matcher diagnostic as a value mismatch."""
        return self.mismatch(
            path,
            error.expected,
            error.actual,
            message=f"{error.message}; Expected: {error.expected}, got: {error.actual}",
        )

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    @property
    def entries(self) -> tuple[DiffEntry, ...]:
        return tuple(self._entries)

    @property
    def missing_fields(self) -> list[DiffEntry]:
        return [e for e in self._entries if e.kind is DiffKind.MISSING]

    @property
    def unexpected_fields(self) -> list[DiffEntry]:
        return [e for e in self._entries if e.kind is DiffKind.UNEXPECTED]

    @property
    def field_failures(self) -> list[DiffEntry]:
        return [e for e in self._entries if e.kind is DiffKind.VALUE_MISMATCH]

    def failed(self) -> bool:
        return bool(self._entries)

    def passed(self) -> bool:
        return not self._entries

    def message(self) -> str:
        """Entries joined one per line, in traversal order; empty when passed."""
        return "\n".join(str(entry) for entry in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[DiffEntry]:
        return iter(self._entries)

    def __str__(self) -> str:
        return self.message()

    def __repr__(self) -> str:
        return f"DiffResult(entries={self._entries!r})"
