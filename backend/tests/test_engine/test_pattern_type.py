"""Tests for S2.03 pattern classification."""

from __future__ import annotations

from kolam.engine.stages.s2_03_pattern_type import classify_pattern, detect_pattern_type
from kolam.engine.types import SpacingStats, SymmetryResult
from tests.conftest import circle_points


STRONG_ROTATION = SymmetryResult(type="rotational", score=0.9, rotational=0.9, reflection=0.2)
STRONG_REFLECTION = SymmetryResult(type="reflection", score=0.9, rotational=0.1, reflection=0.9)
WEAK = SymmetryResult(type="none", score=0.0, rotational=0.3, reflection=0.3)
UNIFORM = SpacingStats(uniform=True, average=50.0, std_dev=1.0, variance=1.0)
UNEVEN = SpacingStats(uniform=False, average=50.0, std_dev=30.0, variance=900.0)


def test_few_dots_are_simple():
    assert classify_pattern(9, STRONG_ROTATION, UNIFORM) == "simple"


def test_decision_order():
    assert classify_pattern(10, STRONG_ROTATION, UNIFORM) == "mandala"
    assert classify_pattern(10, STRONG_REFLECTION, UNIFORM) == "symmetric"
    assert classify_pattern(10, WEAK, UNIFORM) == "geometric"
    assert classify_pattern(10, WEAK, UNEVEN) == "freeform"


def test_threshold_is_strict():
    at_threshold = SymmetryResult(type="rotational", score=0.7, rotational=0.7)
    assert classify_pattern(20, at_threshold, UNEVEN) == "freeform"


def test_detect_pattern_type_end_to_end(line_12):
    assert detect_pattern_type(circle_points(16)) == "mandala"
    assert detect_pattern_type(line_12) == "symmetric"
    assert detect_pattern_type(circle_points(9)) == "simple"
    assert detect_pattern_type([]) == "simple"
