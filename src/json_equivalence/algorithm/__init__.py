"""algorithm subpackage: comparator configuration and array matching helpers.

Import from this module (not from sub-modules directly) to stay on the
stable public interface.

Example::

    from json_equivalence.algorithm import CompareMode

    mode = CompareMode.LENIENT.with_strict_order(True)
    assert mode is CompareMode.STRICT_ORDER
"""

from __future__ import annotations

from json_equivalence.algorithm.config import ArrayMatching, CompareMode
from json_equivalence.algorithm.matcher import compatible_assignment

__all__ = ["ArrayMatching", "CompareMode", "compatible_assignment"]
