"""CompareMode and ArrayMatching for comparator configuration.

CompareMode is the closed set of four strictness presets built from two
independent axes: *extensible* (actual objects may carry keys absent from
expected) and *strict order* (array element order is significant).
ArrayMatching selects how the exhaustive array fallback pairs elements.
"""

from __future__ import annotations

from enum import Enum, StrEnum, auto

__all__ = ["ArrayMatching", "CompareMode"]


class CompareMode(Enum):
    """Comparison strictness presets.

    ==============  ==========  ===============
    Member          Extensible  Strict ordering
    ==============  ==========  ===============
    STRICT          no          yes
    LENIENT         yes         no
    NON_EXTENSIBLE  no          no
    STRICT_ORDER    yes         yes
    ==============  ==========  ===============

    If extensibility is not allowed, any key of an actual object that does not
    appear in the expected object is reported.  For example, expecting
    ``{"id": 1, "name": "Carter"}``, the actual value
    ``{"id": 1, "name": "Carter", "favoriteColor": "blue"}`` passes when
    extensible and fails when not.

    With strict ordering, arrays must be in the same sequence:
    ``{"friends": [{"id": 3}, {"id": 2}]}`` fails against
    ``{"friends": [{"id": 2}, {"id": 3}]}`` only under strict ordering.
    """

    STRICT = (False, True)
    LENIENT = (True, False)
    NON_EXTENSIBLE = (False, False)
    STRICT_ORDER = (True, True)

    @property
    def extensible(self) -> bool:
        """True if actual objects may contain keys absent from expected."""
        return self.value[0]

    @property
    def strict_order(self) -> bool:
        """True if array element order is significant."""
        return self.value[1]

    def with_extensible(self, extensible: bool) -> CompareMode:
        """Return the preset with the requested extensibility and the same ordering."""
        if extensible:
            return CompareMode.STRICT_ORDER if self.strict_order else CompareMode.LENIENT
        return CompareMode.STRICT if self.strict_order else CompareMode.NON_EXTENSIBLE

    def with_strict_order(self, strict_order: bool) -> CompareMode:
        """Return the preset with the requested ordering and the same extensibility."""
        if strict_order:
            return CompareMode.STRICT_ORDER if self.extensible else CompareMode.STRICT
        return CompareMode.LENIENT if self.extensible else CompareMode.NON_EXTENSIBLE

    @classmethod
    def of(cls, strict: bool) -> CompareMode:
        """Map the boolean ``strict`` shortcut to STRICT or LENIENT."""
        return cls.STRICT if strict else cls.LENIENT


class ArrayMatching(StrEnum):
    """How the exhaustive array fallback pairs expected and actual elements.

    - GREEDY:  Each expected element, in order, takes the first compatible
               actual element not yet taken.  No backtracking, so a valid
               pairing can be missed.
    - OPTIMAL: Maximum bipartite matching over the same compatibility
               relation (Hungarian assignment).
    """

    GREEDY = auto()
    OPTIMAL = auto()
