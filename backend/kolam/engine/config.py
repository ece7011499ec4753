"""Fixed numeric constants of the heuristics."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConfig:
    """Thresholds and tolerances shared by the analysis stages.

    All distances are in the same units as the point coordinates
    (canvas pixels for designs drawn in the studio).
    """

    # Segment filter: only consecutive chain pairs strictly inside (min, max)
    min_distance: float = 5.0
    max_distance: float = 500.0

    # Default canvas size used when the caller does not send one
    canvas_width: float = 500.0
    canvas_height: float = 500.0

    # Symmetry detection
    rotation_angles: tuple[float, ...] = (90.0, 60.0, 45.0, 30.0)
    match_tolerance: float = 10.0  # L-infinity, strict
    symmetry_threshold: float = 0.7

    # Spacing uniformity: std_dev < ratio * average
    uniformity_ratio: float = 0.2

    # Principles
    repetition_tolerance: float = 0.2  # relative to the median distance
    balance_tolerance: float = 20.0
    emphasis_saturation: int = 20

    # Pattern type
    simple_threshold: int = 10

    # Complexity saturation points
    complexity_dot_saturation: int = 50
    complexity_segment_saturation: int = 100
    complexity_dot_weight: float = 0.6
    complexity_segment_weight: float = 0.4


DEFAULT_CONFIG = EngineConfig()
