"""Canned kolam layouts used when no point set is supplied.

An encoded image is never decoded. The first 100 characters are hashed and the
hash picks one of six fixed layouts. The grid and mirrored-cluster layouts are
randomised, and their random generator is seeded with the same hash, so a given
input always yields the same dots.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import numpy as np

from kolam.engine.types import Point

logger = logging.getLogger(__name__)

CENTER = (250.0, 250.0)
_HASH_PREFIX = 100


def hash_data_url(data: str | bytes) -> int:
    """32-bit rolling hash (h*31 + c) over the first 100 code units, as a non-negative int.

    Text is read as UTF-16 code units, so a character outside the BMP counts as
    its two surrogates. Bytes are read one unit per byte.
    """
    if isinstance(data, (bytes, bytearray)):
        codes = list(data[:_HASH_PREFIX])
    else:
        raw = data[:_HASH_PREFIX].encode("utf-16-le", "surrogatepass")
        codes = [
            int.from_bytes(raw[i : i + 2], "little")
            for i in range(0, min(len(raw), _HASH_PREFIX * 2), 2)
        ]
    h = 0
    for code in codes:
        h = (h * 31 + code) & 0xFFFFFFFF
    # Reinterpret as signed 32-bit before taking the magnitude
    if h >= 0x80000000:
        h -= 0x100000000
    return abs(h)


def _ring(
    radius: float,
    count: int,
    confidence: float,
    phase: float = 0.0,
    center: tuple[float, float] = CENTER,
) -> list[Point]:
    angles = np.arange(count) / count * 2 * np.pi + phase
    xs = center[0] + np.cos(angles) * radius
    ys = center[1] + np.sin(angles) * radius
    return [Point(float(x), float(y), confidence) for x, y in zip(xs, ys)]


def generate_circular(rng: np.random.Generator | None = None) -> list[Point]:
    """Concentric rings of 16, 12 and 8 dots around a centre dot."""
    dots = _ring(120, 16, 0.85)
    dots += _ring(70, 12, 0.80, phase=np.pi / 12)
    dots += _ring(30, 8, 0.90)
    dots.append(Point(*CENTER, 0.95))
    return dots


def generate_grid(rng: np.random.Generator | None = None) -> list[Point]:
    """10x10 grid at 50px spacing with roughly a quarter of the dots dropped."""
    rng = rng or np.random.default_rng()
    dots: list[Point] = []
    for i in range(10):
        for j in range(10):
            if rng.random() > 0.25:
                dots.append(
                    Point(50.0 + j * 50, 50.0 + i * 50, 0.75 + float(rng.random()) * 0.2)
                )
    return dots


def generate_spiral(rng: np.random.Generator | None = None) -> list[Point]:
    """40 dots on a four-turn spiral, radius growing from 20 to 120."""
    n = 40
    t = np.arange(n) / n
    angles = t * np.pi * 8
    radii = 20 + t * 100
    xs = CENTER[0] + np.cos(angles) * radii
    ys = CENTER[1] + np.sin(angles) * radii
    return [Point(float(x), float(y), 0.8) for x, y in zip(xs, ys)]


def generate_mandala_nine_way(rng: np.random.Generator | None = None) -> list[Point]:
    """Four rings of 9, 18, 27 and 36 dots plus the centre."""
    dots: list[Point] = []
    for ring in range(1, 5):
        dots += _ring(ring * 40, ring * 9, round(0.85 - ring * 0.05, 2))
    dots.append(Point(*CENTER, 0.95))
    return dots


def generate_symmetric(rng: np.random.Generator | None = None) -> list[Point]:
    """Random 6x6 base block mirrored into all four quadrants."""
    rng = rng or np.random.default_rng()
    cx, cy = CENTER
    base: list[Point] = []
    for i in range(6):
        for j in range(6):
            if rng.random() > 0.3:
                base.append(Point(cx - 100 + i * 40, cy - 100 + j * 40, 0.8))

    dots: list[Point] = []
    for p in base:
        mx = cx + (cx - p.x)
        my = cy + (cy - p.y)
        dots.append(p)
        dots.append(Point(mx, p.y, p.confidence))
        dots.append(Point(p.x, my, p.confidence))
        dots.append(Point(mx, my, p.confidence))
    return dots


def generate_flower(rng: np.random.Generator | None = None) -> list[Point]:
    """Six petals of six dots each, an eight-dot centre ring and the centre."""
    dots: list[Point] = []
    for p in range(6):
        petal_angle = p / 6 * 2 * np.pi
        petal_center = (
            CENTER[0] + np.cos(petal_angle) * 80,
            CENTER[1] + np.sin(petal_angle) * 80,
        )
        dots += _ring(30, 6, 0.85, center=petal_center)
    dots += _ring(20, 8, 0.90)
    dots.append(Point(*CENTER, 0.95))
    return dots


GENERATORS: tuple[tuple[str, Callable[..., list[Point]]], ...] = (
    ("circular", generate_circular),
    ("grid", generate_grid),
    ("spiral", generate_spiral),
    ("mandala", generate_mandala_nine_way),
    ("symmetric", generate_symmetric),
    ("flower", generate_flower),
)


def select_generator(data: str | bytes) -> tuple[int, str]:
    """Index and name of the layout an encoded input maps to."""
    index = (hash_data_url(data) % 100) % len(GENERATORS)
    return index, GENERATORS[index][0]


def synthesize_pattern(data: str | bytes) -> list[Point]:
    """Produce the canned dot layout for an encoded image."""
    h = hash_data_url(data)
    index, name = select_generator(data)
    rng = np.random.default_rng(h)
    dots = GENERATORS[index][1](rng)
    logger.debug("Synthetic pattern '%s' (hash=%d) with %d dots", name, h, len(dots))
    if not dots:
        return default_pattern()
    return dots


def default_pattern() -> list[Point]:
    """Layout used when nothing usable was supplied at all."""
    return generate_mandala_nine_way()
