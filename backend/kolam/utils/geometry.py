"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray


def to_array(points: Sequence) -> NDArray[np.float64]:
    """Stack objects with ``x``/``y`` attributes into an Nx2 array."""
    if len(points) == 0:
        return np.empty((0, 2))
    return np.array([(p.x, p.y) for p in points], dtype=np.float64)


def distance(a: tuple[float, float], b: tuple[float, float]) -> float:
    """Euclidean distance between two (x, y) pairs."""
    return float(np.hypot(b[0] - a[0], b[1] - a[1]))


def centroid(points: NDArray[np.float64]) -> tuple[float, float]:
    """Arithmetic mean of the coordinates."""
    if len(points) == 0:
        return (0.0, 0.0)
    return (float(np.mean(points[:, 0])), float(np.mean(points[:, 1])))


def consecutive_distances(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Distances between each point and the next, in the given order (no wraparound)."""
    if len(points) < 2:
        return np.empty(0)
    diffs = np.diff(points, axis=0)
    return np.sqrt(np.sum(diffs**2, axis=1))


def rotate(offsets: NDArray[np.float64], degrees: float) -> NDArray[np.float64]:
    """Rotate centred offsets counter-clockwise by ``degrees``."""
    rad = np.deg2rad(degrees)
    c, s = np.cos(rad), np.sin(rad)
    rot = np.array([[c, -s], [s, c]])
    return offsets @ rot.T


def match_fraction(
    candidates: NDArray[np.float64],
    reference: NDArray[np.float64],
    tolerance: float,
) -> float:
    """Fraction of candidate points lying within an L-infinity box of some reference point.

    The box test is strict: ``|dx| < tolerance and |dy| < tolerance``.
    """
    if len(candidates) == 0 or len(reference) == 0:
        return 0.0
    # |candidates| x |reference| x 2 absolute differences
    diff = np.abs(candidates[:, None, :] - reference[None, :, :])
    hits = np.all(diff < tolerance, axis=2).any(axis=1)
    return float(np.count_nonzero(hits) / len(candidates))
