"""Kolam pattern analysis engine."""

from kolam.engine.context import AnalysisContext
from kolam.engine.pipeline import Pipeline, create_pipeline
from kolam.engine.recognizer import PatternRecognizer
from kolam.engine.registry import StageGroup, get_registry, stage

__all__ = [
    "stage",
    "StageGroup",
    "get_registry",
    "AnalysisContext",
    "Pipeline",
    "create_pipeline",
    "PatternRecognizer",
]
