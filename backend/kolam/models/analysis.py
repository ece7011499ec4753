"""Wire models for analysis output, plus converters from the engine's dataclasses."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from kolam.engine.types import AnalysisResult, Point, Segment, SymmetryResult


class PointModel(BaseModel):
    x: float = 0.0
    y: float = 0.0
    confidence: float = 1.0


class CoordModel(BaseModel):
    x: float = 0.0
    y: float = 0.0


class SegmentModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_: CoordModel = Field(..., alias="from")
    to: CoordModel
    distance: float
    kind: str = Field("line", alias="type")


class SymmetryModel(BaseModel):
    type: str = "none"
    score: float = 0.0
    rotational: float = 0.0
    reflection: float = 0.0
    center: PointModel | None = None


class AnalysisModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    dots: list[PointModel] = Field(default_factory=list)
    connections: list[SegmentModel] = Field(default_factory=list)
    symmetry: SymmetryModel = Field(default_factory=SymmetryModel)
    principles: dict[str, float] = Field(default_factory=dict)
    complexity: float = 0.0
    pattern_type: str = Field("simple", alias="patternType")
    note: str | None = None
    synthetic: bool = False
    timestamp: datetime | None = None
    ai_insights: dict | None = Field(None, alias="aiInsights")


def point_model(p: Point) -> PointModel:
    return PointModel(x=p.x, y=p.y, confidence=p.confidence)


def segment_model(s: Segment) -> SegmentModel:
    return SegmentModel(
        from_=CoordModel(x=s.start.x, y=s.start.y),
        to=CoordModel(x=s.end.x, y=s.end.y),
        distance=s.distance,
        kind=s.kind,
    )


def symmetry_model(sym: SymmetryResult) -> SymmetryModel:
    return SymmetryModel(
        type=sym.type,
        score=sym.score,
        rotational=sym.rotational,
        reflection=sym.reflection,
        center=point_model(sym.center) if sym.center is not None else None,
    )


def analysis_model(result: AnalysisResult) -> AnalysisModel:
    return AnalysisModel(
        dots=[point_model(p) for p in result.dots],
        connections=[segment_model(s) for s in result.connections],
        symmetry=symmetry_model(result.symmetry),
        principles=result.principles,
        complexity=result.complexity,
        pattern_type=result.pattern_type,
        note=result.note,
        synthetic=result.synthetic,
        timestamp=result.timestamp,
    )
