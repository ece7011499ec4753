"""GET /api/ai/status: remote AI backend configuration."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from kolam.ai.service import AIAnalysisService
from kolam.dependencies import get_ai
from kolam.models.responses import AIStatusResponse

router = APIRouter(prefix="/ai")


@router.get("/status", response_model=AIStatusResponse)
async def ai_status(ai: AIAnalysisService = Depends(get_ai)) -> AIStatusResponse:
    return AIStatusResponse(**ai.status())
