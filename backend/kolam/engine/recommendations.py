"""Advisory messages shown next to an analysis result."""

from __future__ import annotations

from kolam.engine.types import AnalysisResult


def recommendations(result: AnalysisResult) -> list[str]:
    tips: list[str] = []

    if len(result.dots) < 10:
        tips.append("Add more dots to create a more complex design")

    if result.symmetry.score < 0.6:
        tips.append("Consider using symmetry mode to create more balanced designs")

    if result.complexity < 30:
        tips.append("This is a simple design - perfect for beginners!")
    elif result.complexity < 60:
        tips.append("This is a moderately complex design with good structure")
    else:
        tips.append("This is an advanced design with excellent complexity")

    if result.principles.get("repetition", 0.0) < 0.5:
        tips.append("Try repeating elements to create visual rhythm")

    return tips
