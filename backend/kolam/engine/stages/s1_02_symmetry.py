"""S1.02 — Symmetry Detection.

Rotate every dot about the centroid by 90/60/45/30 degrees and mirror it across
both centroid axes; a dot matches when its image lands inside the L-infinity
tolerance box of any dot in the set. Scores are match fractions.
"""

from __future__ import annotations

from kolam.engine.config import DEFAULT_CONFIG, EngineConfig
from kolam.engine.context import AnalysisContext
from kolam.engine.registry import StageGroup, stage
from kolam.engine.types import Point, SymmetryResult
from kolam.utils.geometry import centroid, match_fraction, rotate, to_array


def calculate_center(points: list[Point]) -> Point:
    cx, cy = centroid(to_array(points))
    return Point(cx, cy)


def rotational_score(points: list[Point], config: EngineConfig = DEFAULT_CONFIG) -> float:
    """Best match fraction over the candidate rotation angles."""
    if not points:
        return 0.0
    arr = to_array(points)
    offsets = arr - arr.mean(axis=0)
    best = 0.0
    for angle in config.rotation_angles:
        score = match_fraction(rotate(offsets, angle), offsets, config.match_tolerance)
        best = max(best, score)
    return best


def reflection_scores(
    points: list[Point], config: EngineConfig = DEFAULT_CONFIG
) -> tuple[float, float]:
    """(horizontal, vertical) mirror match fractions about the centroid.

    Horizontal mirroring negates the x-offset, vertical negates the y-offset.
    """
    if not points:
        return (0.0, 0.0)
    arr = to_array(points)
    offsets = arr - arr.mean(axis=0)
    mirrored_x = offsets * [-1.0, 1.0]
    mirrored_y = offsets * [1.0, -1.0]
    return (
        match_fraction(mirrored_x, offsets, config.match_tolerance),
        match_fraction(mirrored_y, offsets, config.match_tolerance),
    )


def reflection_score(points: list[Point], config: EngineConfig = DEFAULT_CONFIG) -> float:
    return max(reflection_scores(points, config))


def analyze_symmetry(points: list[Point], config: EngineConfig = DEFAULT_CONFIG) -> SymmetryResult:
    if len(points) == 0:
        return SymmetryResult()
    center = calculate_center(points)
    if len(points) == 1:
        # A lone dot trivially maps onto itself; that is not symmetry
        return SymmetryResult(center=center)

    rotational = rotational_score(points, config)
    reflection = reflection_score(points, config)

    sym_type = "none"
    score = 0.0
    if rotational > config.symmetry_threshold:
        sym_type = "rotational"
        score = rotational
    elif reflection > config.symmetry_threshold:
        sym_type = "reflection"
        score = reflection

    return SymmetryResult(
        type=sym_type,
        score=score,
        rotational=rotational,
        reflection=reflection,
        center=center,
    )


@stage(
    id="S1.02",
    group=StageGroup.STRUCTURE,
    dependencies=["S0.01"],
    description="Rotational and reflection symmetry about the centroid",
)
def symmetry_detection(ctx: AnalysisContext) -> None:
    ctx.symmetry = analyze_symmetry(ctx.dots, ctx.config)
