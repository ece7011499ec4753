"""S1.01 — Dot Chaining.

Greedy nearest-neighbour tour over the dots, closed back to the start, kept as
line segments when the hop length is strictly inside (min_distance, max_distance).
O(N^2), no backtracking.
"""

from __future__ import annotations

import numpy as np

from kolam.engine.config import DEFAULT_CONFIG, EngineConfig
from kolam.engine.context import AnalysisContext
from kolam.engine.registry import StageGroup, stage
from kolam.engine.types import Point, Segment
from kolam.utils.geometry import to_array


def nearest_neighbor_order(points: list[Point]) -> list[int]:
    """Indices of ``points`` in greedy nearest-neighbour order starting at index 0.

    Ties go to the lowest input index.
    """
    n = len(points)
    if n == 0:
        return []
    arr = to_array(points)
    visited = np.zeros(n, dtype=bool)
    order = [0]
    visited[0] = True
    for _ in range(n - 1):
        last = arr[order[-1]]
        dists = np.hypot(arr[:, 0] - last[0], arr[:, 1] - last[1])
        dists[visited] = np.inf
        # argmin returns the first occurrence of the minimum
        nxt = int(np.argmin(dists))
        order.append(nxt)
        visited[nxt] = True
    return order


def sort_dots_by_distance(points: list[Point]) -> list[Point]:
    return [points[i] for i in nearest_neighbor_order(points)]


def connect_dots(
    points: list[Point],
    width: float | None = None,
    height: float | None = None,
    config: EngineConfig = DEFAULT_CONFIG,
) -> list[Segment]:
    """Segments between consecutive dots of the nearest-neighbour tour (wrapping around).

    ``width``/``height`` describe the canvas and do not change the result.
    """
    if len(points) < 2:
        return []
    return _chain_segments(sort_dots_by_distance(points), config)


def _chain_segments(chain: list[Point], config: EngineConfig) -> list[Segment]:
    segments: list[Segment] = []
    n = len(chain)
    if n < 2:
        return segments
    for i, current in enumerate(chain):
        nxt = chain[(i + 1) % n]
        dist = float(np.hypot(nxt.x - current.x, nxt.y - current.y))
        if config.min_distance < dist < config.max_distance:
            segments.append(
                Segment(
                    start=Point(current.x, current.y, current.confidence),
                    end=Point(nxt.x, nxt.y, nxt.confidence),
                    distance=dist,
                )
            )
    return segments


@stage(
    id="S1.01",
    group=StageGroup.STRUCTURE,
    dependencies=["S0.01"],
    description="Nearest-neighbour chain and connecting segments",
)
def dot_chaining(ctx: AnalysisContext) -> None:
    ctx.chain = sort_dots_by_distance(ctx.dots)
    ctx.connections = _chain_segments(ctx.chain, ctx.config)
