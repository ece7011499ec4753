"""/api/analysis: symmetry, pattern type, design principles and recommendations."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from kolam.dependencies import get_recognizer
from kolam.engine.recognizer import PatternRecognizer
from kolam.engine.recommendations import recommendations
from kolam.engine.types import coerce_points
from kolam.models.analysis import symmetry_model
from kolam.models.requests import PointsRequest, PrinciplesRequest
from kolam.models.responses import (
    PatternTypeResponse,
    PrinciplesResponse,
    RecommendationsResponse,
    SymmetryResponse,
)

router = APIRouter(prefix="/analysis")


@router.post("/symmetry", response_model=SymmetryResponse)
async def symmetry(
    req: PointsRequest,
    recognizer: PatternRecognizer = Depends(get_recognizer),
) -> SymmetryResponse:
    dots = recognizer.detect_dots(req.payload())
    result = recognizer.analyze_symmetry(dots)
    return SymmetryResponse(success=True, symmetry=symmetry_model(result))


@router.post("/pattern-type", response_model=PatternTypeResponse)
async def pattern_type(
    req: PointsRequest,
    recognizer: PatternRecognizer = Depends(get_recognizer),
) -> PatternTypeResponse:
    dots = recognizer.detect_dots(req.payload())
    return PatternTypeResponse(success=True, pattern_type=recognizer.detect_pattern_type(dots))


@router.post("/principles", response_model=PrinciplesResponse)
async def principles(
    req: PrinciplesRequest,
    recognizer: PatternRecognizer = Depends(get_recognizer),
) -> PrinciplesResponse:
    if not req.dots:
        raise HTTPException(status_code=400, detail="Dots required")

    dots = coerce_points(req.dots)
    return PrinciplesResponse(success=True, principles=recognizer.extract_principles(dots))


@router.post("/recommendations", response_model=RecommendationsResponse)
async def design_recommendations(
    req: PointsRequest,
    recognizer: PatternRecognizer = Depends(get_recognizer),
) -> RecommendationsResponse:
    result = await recognizer.analyze_image(req.payload())
    return RecommendationsResponse(success=True, recommendations=recommendations(result))
