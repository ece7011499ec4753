"""S2.01 — Design Principles.

Six independent heuristics scored from the dot set: repetition, balance,
symmetry, emphasis, harmony and proportion. Degenerate inputs score 0.0.
"""

from __future__ import annotations

import numpy as np

from kolam.engine.config import DEFAULT_CONFIG, EngineConfig
from kolam.engine.context import AnalysisContext
from kolam.engine.registry import StageGroup, stage
from kolam.engine.stages.s1_02_symmetry import analyze_symmetry
from kolam.engine.stages.s1_03_spacing import analyze_spacing
from kolam.engine.types import PRINCIPLE_NAMES, Point, Segment, SpacingStats, SymmetryResult
from kolam.utils.geometry import consecutive_distances, to_array


def analyze_repetition(points: list[Point], config: EngineConfig = DEFAULT_CONFIG) -> float:
    """Fraction of consecutive distances within 20% of their (upper) median."""
    distances = consecutive_distances(to_array(points))
    if len(distances) == 0:
        return 0.0
    median = float(np.sort(distances)[len(distances) // 2])
    similar = np.abs(distances - median) < median * config.repetition_tolerance
    return float(np.count_nonzero(similar) / len(distances))


def analyze_balance(points: list[Point], config: EngineConfig = DEFAULT_CONFIG) -> float:
    """Fraction of dots with a counterpart reflected through the centroid."""
    if not points:
        return 0.0
    arr = to_array(points)
    offsets = arr - arr.mean(axis=0)
    # dot i is balanced when some j has offset_j ~= -offset_i on both axes
    diff = np.abs(offsets[:, None, :] + offsets[None, :, :])
    balanced = np.all(diff < config.balance_tolerance, axis=2).any(axis=1)
    return float(np.count_nonzero(balanced) / len(points))


def analyze_emphasis(points: list[Point], config: EngineConfig = DEFAULT_CONFIG) -> float:
    return min(len(points) / config.emphasis_saturation, 1.0)


def analyze_harmony(spacing: SpacingStats) -> float:
    if spacing.std_dev is None or spacing.average <= 0:
        return 0.0
    return max(0.0, 1.0 - spacing.std_dev / spacing.average)


def analyze_proportion(spacing: SpacingStats) -> float:
    if spacing.variance is None or spacing.average <= 0:
        return 0.0
    return max(0.0, 1.0 - spacing.variance / (spacing.average * spacing.average))


def extract_principles(
    points: list[Point],
    segments: list[Segment] | None = None,
    config: EngineConfig = DEFAULT_CONFIG,
    *,
    spacing: SpacingStats | None = None,
    symmetry: SymmetryResult | None = None,
) -> dict[str, float]:
    """Score all six principles.

    ``segments`` is accepted for interface symmetry with the HTTP layer but is
    not used by any heuristic. Precomputed ``spacing``/``symmetry`` are reused
    when given.
    """
    if spacing is None:
        spacing = analyze_spacing(points, config)
    if symmetry is None:
        symmetry = analyze_symmetry(points, config)

    scores = {
        "repetition": analyze_repetition(points, config),
        "balance": analyze_balance(points, config),
        "symmetry": symmetry.score,
        "emphasis": analyze_emphasis(points, config),
        "harmony": analyze_harmony(spacing),
        "proportion": analyze_proportion(spacing),
    }
    return {name: scores[name] for name in PRINCIPLE_NAMES}


@stage(
    id="S2.01",
    group=StageGroup.SCORING,
    dependencies=["S1.02", "S1.03"],
    description="Score the six design principles",
)
def design_principles(ctx: AnalysisContext) -> None:
    ctx.principles = extract_principles(
        ctx.dots,
        ctx.connections,
        ctx.config,
        spacing=ctx.spacing,
        symmetry=ctx.symmetry,
    )
