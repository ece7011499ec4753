"""S0.01 — Dot Detection.

Normalise whatever the caller sent into a list of Points. Point arrays pass
through (coerced); encoded images go to the synthetic generator.
"""

from __future__ import annotations

from typing import Any

from kolam.engine.context import AnalysisContext
from kolam.engine.registry import StageGroup, stage
from kolam.engine.synthetic import synthesize_pattern
from kolam.engine.types import Point, coerce_points


def is_encoded_image(data: Any) -> bool:
    if isinstance(data, (bytes, bytearray)):
        return len(data) > 0
    return isinstance(data, str) and data.startswith("data:")


def detect_dots(data: Any) -> list[Point]:
    """Return the dots for a point array or an encoded image; [] when neither."""
    if is_encoded_image(data):
        return synthesize_pattern(data)
    if isinstance(data, (list, tuple)):
        return coerce_points(data)
    return []


@stage(
    id="S0.01",
    group=StageGroup.DETECTION,
    description="Normalise input into a dot list",
)
def dot_detection(ctx: AnalysisContext) -> None:
    ctx.dots = detect_dots(ctx.raw_input)
    if is_encoded_image(ctx.raw_input):
        ctx.synthetic = True
    if not ctx.dots:
        raise ValueError("No dots detected in image")
