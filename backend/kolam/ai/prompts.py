"""Prompts for the remote vision models."""

from __future__ import annotations

KOLAM_VISION_PROMPT = """Analyze this image and describe it as if it were a Kolam (Indian decorative art pattern).
Identify:
1. Main shapes and patterns
2. Symmetry type (radial, linear, both)
3. Suggested dot count and arrangement
4. Color palette recommendations
5. Complexity level (1-10)

Respond in JSON format:
{
  "description": "...",
  "shapes": [...],
  "symmetry": "...",
  "dotCount": number,
  "arrangement": "...",
  "colors": [...],
  "complexity": number,
  "suggestions": "..."
}"""

GOOGLE_VISION_FEATURES = [
    {"type": "LABEL_DETECTION", "maxResults": 10},
    {"type": "OBJECT_LOCALIZATION", "maxResults": 10},
    {"type": "IMAGE_PROPERTIES"},
]
