"""AI analysis service: optional remote enrichment in front of the local engine."""

from __future__ import annotations

import logging
from typing import Any

from kolam.ai.backends import VisionBackend, create_backend
from kolam.config import Settings

logger = logging.getLogger(__name__)


class AIAnalysisService:
    """Routes image analysis to the configured remote backend, if any."""

    def __init__(self, settings: Settings) -> None:
        self.service = settings.ai_service.lower()
        self.backend: VisionBackend | None = create_backend(self.service, settings)
        self.enabled = settings.enable_ai_analysis and self._validate()

    def _validate(self) -> bool:
        if self.backend is None:
            return False
        if not self.backend.configured:
            logger.error("%s API key not set; AI analysis stays off", self.service)
            return False
        logger.info("AI analysis configured with %s", self.service)
        return True

    async def analyze_image(self, image_data_url: str) -> dict[str, Any] | None:
        """Structured remote analysis, or None when disabled or on any failure."""
        if not self.enabled or self.backend is None:
            logger.debug("AI analysis disabled; using local pattern recognition")
            return None
        if not isinstance(image_data_url, str) or not image_data_url.startswith("data:"):
            return None
        try:
            logger.info("Analyzing image with %s", self.service)
            return await self.backend.analyze(image_data_url)
        except Exception as e:
            logger.warning("AI analysis with %s failed: %s", self.service, e)
            return None

    def status(self) -> dict[str, Any]:
        return {
            "enabled": self.enabled,
            "service": self.service,
            "configured": self.enabled,
            "api_key_set": bool(self.backend and self.backend.configured),
        }


# Singleton
_service: AIAnalysisService | None = None


def get_ai_service() -> AIAnalysisService:
    """Get or create the global AIAnalysisService singleton."""
    global _service
    if _service is None:
        from kolam.config import settings

        _service = AIAnalysisService(settings)
    return _service
