"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from kolam.ai.service import AIAnalysisService
from kolam.config import Settings
from kolam.dependencies import get_ai, get_settings
from kolam.engine.registry import get_registry
from kolam.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(
    ai: AIAnalysisService = Depends(get_ai),
    settings: Settings = Depends(get_settings),
) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        env=settings.kolam_env,
        stages_registered=get_registry().count,
        ai=ai.service if ai.enabled else "disabled",
    )
