"""Exception hierarchy for json-equivalence.

Only ``ValueMatcherError`` takes part in the diff protocol: it is raised by
value matchers and converted into a diff entry by ``CustomComparator``.
Everything else propagates to the caller.
"""

from __future__ import annotations

__all__ = ["JSONEquivalenceError", "JSONParseError", "ValueMatcherError"]


class JSONEquivalenceError(Exception):
    """Base class for all errors raised by json-equivalence."""


class JSONParseError(JSONEquivalenceError, ValueError):
    """Raised when expected or actual JSON text cannot be parsed."""

    def __init__(self, message: str, text: str) -> None:
        super().__init__(message)
        self.text = text


class ValueMatcherError(JSONEquivalenceError):
    """Diagnostic raised by a value matcher instead of returning NOT_MATCHED.

    Attributes:
        expected: Rendering of what the matcher expected (e.g. a pattern).
        actual:   Rendering of the value that was tested.
    """

    def __init__(self, message: str, expected: str, actual: str) -> None:
        super().__init__(message)
        self.message = message
        self.expected = expected
        self.actual = actual
