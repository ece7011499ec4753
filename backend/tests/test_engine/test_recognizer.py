"""Tests for PatternRecognizer and recommendations."""

from __future__ import annotations

import asyncio

import pytest

from kolam.engine.recognizer import (
    DEFAULT_COLORS,
    FALLBACK_NOTE,
    FALLBACK_PATTERN_TYPE,
    PatternRecognizer,
)
from kolam.engine.recommendations import recommendations
from kolam.engine.stages import s1_02_symmetry
from kolam.engine.types import AnalysisResult, SymmetryResult
from tests.conftest import SQUARE, as_points


@pytest.fixture
def recognizer() -> PatternRecognizer:
    return PatternRecognizer()


def test_analyze_point_array(recognizer):
    result = asyncio.run(recognizer.analyze_image([{"x": x, "y": y} for x, y in SQUARE]))

    assert result.note is None
    assert len(result.dots) == 4
    assert result.synthetic is False
    assert len(result.connections) == 4
    assert result.pattern_type == "simple"
    assert result.symmetry.type == "rotational"
    assert result.complexity == pytest.approx(6.4)
    assert result.timestamp is not None


def test_analyze_data_url_is_deterministic(recognizer, png_data_url):
    first = asyncio.run(recognizer.analyze_image(png_data_url))
    second = asyncio.run(recognizer.analyze_image(png_data_url))

    assert first.note is None
    assert first.dots
    assert first.synthetic is True
    assert first.dots == second.dots
    assert first.pattern_type == second.pattern_type


@pytest.mark.parametrize("data", [[], None, "not an image"])
def test_unusable_input_falls_back(recognizer, data):
    result = asyncio.run(recognizer.analyze_image(data))

    assert result.note == FALLBACK_NOTE
    assert len(result.dots) == 91
    assert result.pattern_type == FALLBACK_PATTERN_TYPE == "geometric"
    assert result.synthetic is True
    assert result.connections
    assert len(result.principles) == 6


def test_stage_failure_falls_back(recognizer, monkeypatch):
    calls = []
    real = s1_02_symmetry.analyze_symmetry

    def flaky(points, config):
        calls.append(len(points))
        if len(calls) == 1:
            raise RuntimeError("symmetry exploded")
        return real(points, config)

    monkeypatch.setattr(s1_02_symmetry, "analyze_symmetry", flaky)

    result = asyncio.run(recognizer.analyze_image(as_points(SQUARE)))

    assert result.note == FALLBACK_NOTE
    assert len(result.dots) == 91
    assert calls == [4, 91]
    assert result.pattern_type == "geometric"


def test_connect_dots_defaults_canvas(recognizer):
    segments = recognizer.connect_dots(as_points(SQUARE))
    assert len(segments) == 4


def test_generate_rangoli_colours_round_robin(recognizer):
    points = as_points([(0, 0), (100, 0), (100, 100), (0, 100)])
    rangoli = recognizer.generate_rangoli(points)

    assert rangoli["width"] == 500
    assert rangoli["height"] == 500
    assert rangoli["style"] == "traditional"
    assert rangoli["colors"] == list(DEFAULT_COLORS)
    assert [d["color"] for d in rangoli["dots"]] == [
        DEFAULT_COLORS[0], DEFAULT_COLORS[1], DEFAULT_COLORS[2], DEFAULT_COLORS[0],
    ]
    assert all(d["radius"] == 5 for d in rangoli["dots"])
    assert len(rangoli["connections"]) == 4


def test_generate_rangoli_custom_palette(recognizer):
    rangoli = recognizer.generate_rangoli(as_points(SQUARE), style="modern", colors=["#000"])
    assert rangoli["style"] == "modern"
    assert {d["color"] for d in rangoli["dots"]} == {"#000"}


def test_recommendations_for_small_design():
    result = AnalysisResult(
        dots=as_points(SQUARE),
        symmetry=SymmetryResult(),
        principles={"repetition": 0.2},
        complexity=10.0,
    )
    assert recommendations(result) == [
        "Add more dots to create a more complex design",
        "Consider using symmetry mode to create more balanced designs",
        "This is a simple design - perfect for beginners!",
        "Try repeating elements to create visual rhythm",
    ]


def test_recommendations_for_rich_design():
    result = AnalysisResult(
        dots=as_points([(i * 10, 0) for i in range(40)]),
        symmetry=SymmetryResult(type="rotational", score=0.9),
        principles={"repetition": 0.9},
        complexity=75.0,
    )
    assert recommendations(result) == ["This is an advanced design with excellent complexity"]
