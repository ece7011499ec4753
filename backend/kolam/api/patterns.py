"""/api/patterns: analyse, detect, connect and generate."""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException

from kolam.ai.service import AIAnalysisService
from kolam.dependencies import get_ai, get_recognizer
from kolam.engine.recognizer import PatternRecognizer
from kolam.engine.types import coerce_points
from kolam.models.analysis import analysis_model, point_model, segment_model
from kolam.models.requests import (
    AnalyzeRequest,
    ConnectDotsRequest,
    DetectDotsRequest,
    GenerateRequest,
)
from kolam.models.responses import (
    AnalyzeResponse,
    ConnectDotsResponse,
    DetectDotsResponse,
    GenerateResponse,
    RangoliImage,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/patterns")


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze(
    req: AnalyzeRequest,
    recognizer: PatternRecognizer = Depends(get_recognizer),
    ai: AIAnalysisService = Depends(get_ai),
) -> AnalyzeResponse:
    if not req.image_data:
        raise HTTPException(status_code=400, detail="Image data required")

    start = time.perf_counter()
    result = await recognizer.analyze_image(req.image_data)
    data = analysis_model(result)

    if isinstance(req.image_data, str):
        data.ai_insights = await ai.analyze_image(req.image_data)

    elapsed = (time.perf_counter() - start) * 1000
    logger.info(
        "Analyzed %d dots (%s) in %.1fms", len(result.dots), result.pattern_type, elapsed
    )
    return AnalyzeResponse(success=True, data=data, timestamp=datetime.now(timezone.utc))


@router.post("/detect-dots", response_model=DetectDotsResponse)
async def detect_dots(
    req: DetectDotsRequest,
    recognizer: PatternRecognizer = Depends(get_recognizer),
) -> DetectDotsResponse:
    dots = recognizer.detect_dots(req.image_data)
    return DetectDotsResponse(
        success=True,
        dots=[point_model(p) for p in dots],
        count=len(dots),
    )


@router.post("/connect-dots", response_model=ConnectDotsResponse)
async def connect_dots(
    req: ConnectDotsRequest,
    recognizer: PatternRecognizer = Depends(get_recognizer),
) -> ConnectDotsResponse:
    if not req.dots:
        raise HTTPException(status_code=400, detail="Dots required")

    connections = recognizer.connect_dots(coerce_points(req.dots), req.width, req.height)
    return ConnectDotsResponse(
        success=True,
        connections=[segment_model(s) for s in connections],
    )


@router.post("/generate", response_model=GenerateResponse)
async def generate(
    req: GenerateRequest,
    recognizer: PatternRecognizer = Depends(get_recognizer),
) -> GenerateResponse:
    image = recognizer.generate_rangoli(
        coerce_points(req.dots),
        style=req.style,
        width=req.width,
        height=req.height,
        colors=req.colors,
    )
    image["connections"] = [segment_model(s) for s in image["connections"]]
    return GenerateResponse(success=True, image=RangoliImage(**image))
