"""S2.03 — Pattern Type.

Decision order, first match wins:
    fewer than 10 dots            -> simple
    strong rotational symmetry    -> mandala
    strong reflection symmetry    -> symmetric
    uniform spacing               -> geometric
    otherwise                     -> freeform
"""

from __future__ import annotations

from kolam.engine.config import DEFAULT_CONFIG, EngineConfig
from kolam.engine.context import AnalysisContext
from kolam.engine.registry import StageGroup, stage
from kolam.engine.stages.s1_02_symmetry import analyze_symmetry
from kolam.engine.stages.s1_03_spacing import analyze_spacing
from kolam.engine.types import Point, SpacingStats, SymmetryResult


def classify_pattern(
    dot_count: int,
    symmetry: SymmetryResult,
    spacing: SpacingStats,
    config: EngineConfig = DEFAULT_CONFIG,
) -> str:
    if dot_count < config.simple_threshold:
        return "simple"
    if symmetry.score > config.symmetry_threshold:
        if symmetry.type == "rotational":
            return "mandala"
        return "symmetric"
    if spacing.uniform:
        return "geometric"
    return "freeform"


def detect_pattern_type(points: list[Point], config: EngineConfig = DEFAULT_CONFIG) -> str:
    if len(points) < config.simple_threshold:
        return "simple"
    return classify_pattern(
        len(points),
        analyze_symmetry(points, config),
        analyze_spacing(points, config),
        config,
    )


@stage(
    id="S2.03",
    group=StageGroup.SCORING,
    dependencies=["S1.02", "S1.03"],
    description="Classify the pattern type",
)
def pattern_type(ctx: AnalysisContext) -> None:
    ctx.pattern_type = classify_pattern(ctx.num_dots, ctx.symmetry, ctx.spacing, ctx.config)
