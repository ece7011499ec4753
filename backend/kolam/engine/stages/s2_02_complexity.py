"""S2.02 — Complexity: weighted, saturating blend of dot and segment counts, 0-100."""

from __future__ import annotations

from kolam.engine.config import DEFAULT_CONFIG, EngineConfig
from kolam.engine.context import AnalysisContext
from kolam.engine.registry import StageGroup, stage
from kolam.engine.types import Point, Segment


def calculate_complexity(
    points: list[Point],
    segments: list[Segment],
    config: EngineConfig = DEFAULT_CONFIG,
) -> float:
    dot_factor = min(len(points) / config.complexity_dot_saturation, 1.0)
    segment_factor = min(len(segments) / config.complexity_segment_saturation, 1.0)
    return (
        dot_factor * config.complexity_dot_weight
        + segment_factor * config.complexity_segment_weight
    ) * 100


@stage(
    id="S2.02",
    group=StageGroup.SCORING,
    dependencies=["S1.01"],
    description="Overall design complexity",
)
def complexity(ctx: AnalysisContext) -> None:
    ctx.complexity = calculate_complexity(ctx.dots, ctx.connections, ctx.config)
