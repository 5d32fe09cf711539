"""Tests for CompareMode and ArrayMatching.

Covers:
- CompareMode has exactly the four presets with the documented axes
- with_extensible / with_strict_order map onto existing presets
- CompareMode.of maps the boolean shortcut
- ArrayMatching members are StrEnum values
"""

from __future__ import annotations

import pytest

from json_equivalence.algorithm.config import ArrayMatching, CompareMode

# ---------------------------------------------------------------------------
# CompareMode axes
# ---------------------------------------------------------------------------


class TestCompareModeAxes:
    def test_has_exactly_four_members(self) -> None:
        assert len(list(CompareMode)) == 4

    @pytest.mark.parametrize(
        ("mode", "extensible", "strict_order"),
        [
            (CompareMode.STRICT, False, True),
            (CompareMode.LENIENT, True, False),
            (CompareMode.NON_EXTENSIBLE, False, False),
            (CompareMode.STRICT_ORDER, True, True),
        ],
    )
    def test_axes(self, mode: CompareMode, extensible: bool, strict_order: bool) -> None:
        assert mode.extensible is extensible
        assert mode.strict_order is strict_order

    def test_axis_pairs_are_distinct(self) -> None:
        pairs = {(m.extensible, m.strict_order) for m in CompareMode}
        assert len(pairs) == 4


# ---------------------------------------------------------------------------
# Axis transforms
# ---------------------------------------------------------------------------


class TestWithExtensible:
    @pytest.mark.parametrize(
        ("mode", "flag", "expected"),
        [
            (CompareMode.STRICT, True, CompareMode.STRICT_ORDER),
            (CompareMode.STRICT, False, CompareMode.STRICT),
            (CompareMode.NON_EXTENSIBLE, True, CompareMode.LENIENT),
            (CompareMode.LENIENT, False, CompareMode.NON_EXTENSIBLE),
            (CompareMode.STRICT_ORDER, False, CompareMode.STRICT),
            (CompareMode.LENIENT, True, CompareMode.LENIENT),
        ],
    )
    def test_maps_to_existing_preset(
        self, mode: CompareMode, flag: bool, expected: CompareMode
    ) -> None:
        assert mode.with_extensible(flag) is expected

    @pytest.mark.parametrize("mode", list(CompareMode))
    def test_keeps_ordering_axis(self, mode: CompareMode) -> None:
        for flag in (True, False):
            assert mode.with_extensible(flag).strict_order is mode.strict_order


class TestWithStrictOrder:
    @pytest.mark.parametrize(
        ("mode", "flag", "expected"),
        [
            (CompareMode.LENIENT, True, CompareMode.STRICT_ORDER),
            (CompareMode.NON_EXTENSIBLE, True, CompareMode.STRICT),
            (CompareMode.STRICT, False, CompareMode.NON_EXTENSIBLE),
            (CompareMode.STRICT_ORDER, False, CompareMode.LENIENT),
            (CompareMode.STRICT, True, CompareMode.STRICT),
        ],
    )
    def test_maps_to_existing_preset(
        self, mode: CompareMode, flag: bool, expected: CompareMode
    ) -> None:
        assert mode.with_strict_order(flag) is expected

    @pytest.mark.parametrize("mode", list(CompareMode))
    def test_keeps_extensible_axis(self, mode: CompareMode) -> None:
        for flag in (True, False):
            assert mode.with_strict_order(flag).extensible is mode.extensible


class TestBooleanShortcut:
    def test_strict_true(self) -> None:
        assert CompareMode.of(True) is CompareMode.STRICT

    def test_strict_false(self) -> None:
        assert CompareMode.of(False) is CompareMode.LENIENT


# ---------------------------------------------------------------------------
# ArrayMatching
# ---------------------------------------------------------------------------


class TestArrayMatching:
    def test_members(self) -> None:
        assert {m.name for m in ArrayMatching} == {"GREEDY", "OPTIMAL"}

    def test_values_are_lowercased(self) -> None:
        assert ArrayMatching.GREEDY == "greedy"
        assert ArrayMatching.OPTIMAL == "optimal"
