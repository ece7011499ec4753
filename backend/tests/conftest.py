"""Shared test fixtures."""

from __future__ import annotations

import math

import pytest

from kolam.engine.types import Point


# Reference point sets

SQUARE = [(0, 0), (10, 0), (10, 10), (0, 10)]

# 50px apart on a horizontal line
LINE_12 = [(i * 50, 0) for i in range(12)]


def circle_points(n: int, radius: float = 100.0, cx: float = 250.0, cy: float = 250.0) -> list[Point]:
    return [
        Point(cx + radius * math.cos(2 * math.pi * i / n), cy + radius * math.sin(2 * math.pi * i / n))
        for i in range(n)
    ]


def as_points(coords: list[tuple[float, float]]) -> list[Point]:
    return [Point(float(x), float(y)) for x, y in coords]


PNG_DATA_URL = "data:image/png;base64,iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="


@pytest.fixture
def square() -> list[Point]:
    return as_points(SQUARE)


@pytest.fixture
def line_12() -> list[Point]:
    return as_points(LINE_12)


@pytest.fixture
def circle_8() -> list[Point]:
    return circle_points(8)


@pytest.fixture
def png_data_url() -> str:
    return PNG_DATA_URL
