"""FastAPI dependency injection."""

from __future__ import annotations

from kolam.ai.service import AIAnalysisService, get_ai_service
from kolam.config import Settings, settings
from kolam.engine.recognizer import PatternRecognizer
from kolam.store.designs import DesignStore, get_design_store


def get_settings() -> Settings:
    return settings


def get_recognizer() -> PatternRecognizer:
    """A fresh recognizer per request; nothing derived is shared between calls."""
    return PatternRecognizer()


def get_store() -> DesignStore:
    return get_design_store()


def get_ai() -> AIAnalysisService:
    return get_ai_service()
