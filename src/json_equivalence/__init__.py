"""JSON equivalence - structural JSON assertions with configurable strictness."""

from __future__ import annotations

import logging

from json_equivalence.algorithm.config import ArrayMatching, CompareMode
from json_equivalence.api import (
    assert_json_equals,
    assert_json_not_equals,
    compare,
    compare_json,
    is_equivalent,
)
from json_equivalence.comparator import (
    ArraySizeComparator,
    CustomComparator,
    DefaultComparator,
)
from json_equivalence.exceptions import (
    JSONEquivalenceError,
    JSONParseError,
    ValueMatcherError,
)
from json_equivalence.matchers import (
    ArrayValueMatcher,
    Customization,
    PredicateMatcher,
    RegularExpressionValueMatcher,
)
from json_equivalence.protocols import JSONComparator, MatchOutcome, ValueMatcher
from json_equivalence.result import DiffEntry, DiffKind, DiffResult

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "ArrayMatching",
    "ArraySizeComparator",
    "ArrayValueMatcher",
    "CompareMode",
    "CustomComparator",
    "Customization",
    "DefaultComparator",
    "DiffEntry",
    "DiffKind",
    "DiffResult",
    "JSONComparator",
    "JSONEquivalenceError",
    "JSONParseError",
    "MatchOutcome",
    "PredicateMatcher",
    "RegularExpressionValueMatcher",
    "ValueMatcher",
    "ValueMatcherError",
    "assert_json_equals",
    "assert_json_not_equals",
    "compare",
    "compare_json",
    "is_equivalent",
]
