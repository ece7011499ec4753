"""Value types produced by the analysis engine.

Points and segments are plain dataclasses so they can be built cheaply in the
O(N^2) loops; the API layer converts them to pydantic models on the way out.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

PRINCIPLE_NAMES = ("repetition", "balance", "symmetry", "emphasis", "harmony", "proportion")


@dataclass
class Point:
    x: float
    y: float
    confidence: float = 1.0

    @classmethod
    def coerce(cls, raw: Any) -> "Point":
        """Build a Point from a dict, tuple or Point.

        Missing or non-numeric coordinates default to 0. ``px``/``py`` are
        accepted as aliases of ``x``/``y``.
        """
        if isinstance(raw, Point):
            return raw
        if isinstance(raw, dict):
            x = raw.get("x")
            if x is None:
                x = raw.get("px")
            y = raw.get("y")
            if y is None:
                y = raw.get("py")
            confidence = raw.get("confidence")
            return cls(
                x=_as_float(x),
                y=_as_float(y),
                confidence=_as_float(confidence, default=1.0),
            )
        if isinstance(raw, (list, tuple)):
            x = raw[0] if len(raw) > 0 else 0.0
            y = raw[1] if len(raw) > 1 else 0.0
            confidence = raw[2] if len(raw) > 2 else 1.0
            return cls(x=_as_float(x), y=_as_float(y), confidence=_as_float(confidence, default=1.0))
        return cls(x=0.0, y=0.0)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass
class Segment:
    start: Point
    end: Point
    distance: float
    kind: str = "line"


@dataclass
class SymmetryResult:
    type: str = "none"  # none, rotational, reflection
    score: float = 0.0
    rotational: float = 0.0
    reflection: float = 0.0
    center: Point | None = None


@dataclass
class SpacingStats:
    uniform: bool = False
    average: float = 0.0
    std_dev: float | None = None
    variance: float | None = None


@dataclass
class AnalysisResult:
    dots: list[Point] = field(default_factory=list)
    connections: list[Segment] = field(default_factory=list)
    symmetry: SymmetryResult = field(default_factory=SymmetryResult)
    principles: dict[str, float] = field(default_factory=dict)
    complexity: float = 0.0
    pattern_type: str = "simple"
    note: str | None = None
    synthetic: bool = False
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


def coerce_points(raw: Any) -> list[Point]:
    """Normalise an arbitrary list of point-like values into Points."""
    if not raw:
        return []
    return [Point.coerce(p) for p in raw]


def _as_float(value: Any, default: float = 0.0) -> float:
    if value is None or isinstance(value, bool):
        return default
    try:
        result = float(value)
    except (TypeError, ValueError, OverflowError):
        return default
    if math.isnan(result) or math.isinf(result):
        return default
    return result
