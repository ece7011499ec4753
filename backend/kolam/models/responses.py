"""API response models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from kolam.models.analysis import AnalysisModel, PointModel, SegmentModel, SymmetryModel


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    env: str = "development"
    stages_registered: int = 0
    ai: str = "disabled"


class AnalyzeResponse(BaseModel):
    success: bool = True
    data: AnalysisModel
    timestamp: datetime


class DetectDotsResponse(BaseModel):
    success: bool = True
    dots: list[PointModel] = Field(default_factory=list)
    count: int = 0


class ConnectDotsResponse(BaseModel):
    success: bool = True
    connections: list[SegmentModel] = Field(default_factory=list)


class RangoliDot(PointModel):
    color: str
    radius: float = 5


class RangoliImage(BaseModel):
    width: float
    height: float
    dots: list[RangoliDot] = Field(default_factory=list)
    connections: list[SegmentModel] = Field(default_factory=list)
    style: str = "traditional"
    colors: list[str] = Field(default_factory=list)


class GenerateResponse(BaseModel):
    success: bool = True
    image: RangoliImage


class SymmetryResponse(BaseModel):
    success: bool = True
    symmetry: SymmetryModel


class PatternTypeResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    pattern_type: str = Field(..., alias="patternType")


class PrinciplesResponse(BaseModel):
    success: bool = True
    principles: dict[str, float] = Field(default_factory=dict)


class RecommendationsResponse(BaseModel):
    success: bool = True
    recommendations: list[str] = Field(default_factory=list)


class DeleteResponse(BaseModel):
    message: str = "Design deleted"
    success: bool = True


class AIStatusResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    enabled: bool = False
    service: str = ""
    configured: bool = False
    api_key_set: bool = Field(False, alias="apiKeySet")
