"""PatternRecognizer: the engine's public face for request handlers.

Every method recomputes from the points it is given. ``analyze_image`` runs the
full stage pipeline and never fails: when detection yields nothing or any stage
errors, it reruns on the default synthetic pattern, labels it "geometric" and
tags it with a note.
"""

from __future__ import annotations

import logging
from typing import Any

from kolam.engine.config import DEFAULT_CONFIG, EngineConfig
from kolam.engine.context import AnalysisContext
from kolam.engine.pipeline import Pipeline, create_pipeline
from kolam.engine.stages.s0_01_dot_detection import detect_dots
from kolam.engine.stages.s1_01_dot_chaining import connect_dots
from kolam.engine.stages.s1_02_symmetry import analyze_symmetry
from kolam.engine.stages.s1_03_spacing import analyze_spacing
from kolam.engine.stages.s2_01_principles import extract_principles
from kolam.engine.stages.s2_02_complexity import calculate_complexity
from kolam.engine.stages.s2_03_pattern_type import detect_pattern_type
from kolam.engine.synthetic import default_pattern
from kolam.engine.types import AnalysisResult, Point, Segment, SpacingStats, SymmetryResult

logger = logging.getLogger(__name__)

FALLBACK_NOTE = "Using default pattern - could not analyze uploaded image"
FALLBACK_PATTERN_TYPE = "geometric"
DEFAULT_COLORS = ("#FF6B9D", "#C44569", "#F8B500")


class PatternRecognizer:
    """Analyses kolam dot sets: chaining, symmetry, spacing, principles, type."""

    def __init__(
        self,
        config: EngineConfig | None = None,
        pipeline: Pipeline | None = None,
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        self.pipeline = pipeline or create_pipeline()

    async def analyze_image(self, data: Any) -> AnalysisResult:
        """Full analysis of an encoded image or a point array."""
        ctx = self._run(data)
        if not ctx.errors:
            return ctx.to_result()

        logger.warning("Analysis failed (%s); falling back to default pattern", ctx.errors)
        fallback = self._run(default_pattern())
        fallback.synthetic = True
        fallback.pattern_type = FALLBACK_PATTERN_TYPE
        fallback.note = FALLBACK_NOTE
        return fallback.to_result()

    def _run(self, data: Any) -> AnalysisContext:
        ctx = AnalysisContext(raw_input=data, config=self.config)
        return self.pipeline.run(ctx)

    def detect_dots(self, data: Any) -> list[Point]:
        return detect_dots(data)

    def connect_dots(
        self,
        points: list[Point],
        width: float | None = None,
        height: float | None = None,
    ) -> list[Segment]:
        return connect_dots(
            points,
            width or self.config.canvas_width,
            height or self.config.canvas_height,
            self.config,
        )

    def analyze_symmetry(self, points: list[Point]) -> SymmetryResult:
        return analyze_symmetry(points, self.config)

    def analyze_spacing(self, points: list[Point]) -> SpacingStats:
        return analyze_spacing(points, self.config)

    def detect_pattern_type(self, points: list[Point]) -> str:
        return detect_pattern_type(points, self.config)

    def extract_principles(
        self, points: list[Point], segments: list[Segment] | None = None
    ) -> dict[str, float]:
        return extract_principles(points, segments, self.config)

    def calculate_complexity(self, points: list[Point], segments: list[Segment]) -> float:
        return calculate_complexity(points, segments, self.config)

    def generate_rangoli(
        self,
        points: list[Point],
        style: str = "traditional",
        width: float | None = None,
        height: float | None = None,
        colors: list[str] | None = None,
    ) -> dict[str, Any]:
        """Colour the dots round-robin and attach their connections."""
        width = width or self.config.canvas_width
        height = height or self.config.canvas_height
        palette = list(colors) if colors else list(DEFAULT_COLORS)
        return {
            "width": width,
            "height": height,
            "dots": [
                {
                    "x": p.x,
                    "y": p.y,
                    "confidence": p.confidence,
                    "color": palette[i % len(palette)],
                    "radius": 5,
                }
                for i, p in enumerate(points)
            ],
            "connections": self.connect_dots(points, width, height),
            "style": style,
            "colors": palette,
        }
