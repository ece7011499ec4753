"""AnalysisContext: the per-call state object flowing through all stages.

A fresh context is built for every analysis; nothing derived from a point set
outlives the call that produced it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from kolam.engine.config import DEFAULT_CONFIG, EngineConfig
from kolam.engine.types import AnalysisResult, Point, Segment, SpacingStats, SymmetryResult


@dataclass
class AnalysisContext:
    """Shared state for one run of the pipeline."""

    # What the caller sent: a data URL, raw bytes, or a list of point-likes
    raw_input: Any = None
    config: EngineConfig = DEFAULT_CONFIG

    # --- Detection ---
    dots: list[Point] = field(default_factory=list)
    # True when dots came from the synthetic generator rather than the caller
    synthetic: bool = False

    # --- Structure ---
    # Greedy nearest-neighbour traversal of ``dots``
    chain: list[Point] = field(default_factory=list)
    connections: list[Segment] = field(default_factory=list)
    symmetry: SymmetryResult | None = None
    spacing: SpacingStats | None = None

    # --- Scoring ---
    principles: dict[str, float] = field(default_factory=dict)
    complexity: float = 0.0
    pattern_type: str = ""

    note: str | None = None

    # --- Pipeline bookkeeping ---
    completed_stages: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def num_dots(self) -> int:
        return len(self.dots)

    def to_result(self) -> AnalysisResult:
        return AnalysisResult(
            dots=list(self.dots),
            connections=list(self.connections),
            symmetry=self.symmetry or SymmetryResult(),
            principles=dict(self.principles),
            complexity=self.complexity,
            pattern_type=self.pattern_type,
            note=self.note,
            synthetic=self.synthetic,
        )
