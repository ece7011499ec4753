"""S1.03 — Spacing Statistics.

Mean, population variance and standard deviation of the distances between
consecutive dots in input order (not tour order).
"""

from __future__ import annotations

import numpy as np

from kolam.engine.config import DEFAULT_CONFIG, EngineConfig
from kolam.engine.context import AnalysisContext
from kolam.engine.registry import StageGroup, stage
from kolam.engine.types import Point, SpacingStats
from kolam.utils.geometry import consecutive_distances, to_array


def analyze_spacing(points: list[Point], config: EngineConfig = DEFAULT_CONFIG) -> SpacingStats:
    if len(points) < 2:
        return SpacingStats(uniform=False, average=0.0)

    distances = consecutive_distances(to_array(points))
    average = float(np.mean(distances))
    variance = float(np.mean((distances - average) ** 2))
    std_dev = float(np.sqrt(variance))

    return SpacingStats(
        uniform=std_dev < average * config.uniformity_ratio,
        average=average,
        std_dev=std_dev,
        variance=variance,
    )


@stage(
    id="S1.03",
    group=StageGroup.STRUCTURE,
    dependencies=["S0.01"],
    description="Consecutive spacing statistics",
)
def spacing_statistics(ctx: AnalysisContext) -> None:
    ctx.spacing = analyze_spacing(ctx.dots, ctx.config)
