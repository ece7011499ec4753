"""Remote vision backends: one ``analyze(image) -> dict`` interface per provider.

Each backend raises on failure; ``AIAnalysisService`` turns failures into ``None``
so the local heuristic engine always remains the answer.
"""

from __future__ import annotations

import asyncio
import json
import logging
import re
from typing import Any

from kolam.ai.prompts import GOOGLE_VISION_FEATURES, KOLAM_VISION_PROMPT
from kolam.config import Settings

logger = logging.getLogger(__name__)

_DATA_URL = re.compile(r"^data:(?P<media>[\w/+.-]+)?(?:;[\w=-]+)*;base64,(?P<data>.*)$", re.DOTALL)


class BackendNotConfigured(RuntimeError):
    """The selected backend has no API key."""


def split_data_url(data_url: str) -> tuple[str, str]:
    """Return (media_type, base64 payload) of a data URL."""
    match = _DATA_URL.match(data_url)
    if not match:
        raise ValueError("Expected a base64 data URL")
    return match.group("media") or "image/png", match.group("data")


def parse_json_reply(text: str) -> dict[str, Any]:
    """First JSON object in an LLM reply, or ``{"raw": text}``."""
    match = re.search(r"\{[\s\S]*\}", text)
    if match:
        try:
            return json.loads(match.group(0))
        except json.JSONDecodeError:
            pass
    return {"raw": text}


class VisionBackend:
    """Base class: subclasses implement ``analyze``."""

    name = ""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    @property
    def api_key(self) -> str:
        return ""

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    async def analyze(self, image_data_url: str) -> dict[str, Any]:
        raise NotImplementedError


class OpenAIBackend(VisionBackend):
    name = "openai"

    @property
    def api_key(self) -> str:
        return self.settings.openai_api_key

    async def analyze(self, image_data_url: str) -> dict[str, Any]:
        if not self.api_key:
            raise BackendNotConfigured("OpenAI API key not configured")

        from langchain_core.messages import HumanMessage
        from langchain_openai import ChatOpenAI

        llm = ChatOpenAI(
            model=self.settings.model_openai,
            api_key=self.api_key,
            max_tokens=self.settings.ai_max_tokens,
            timeout=self.settings.ai_timeout_s,
        )
        message = HumanMessage(
            content=[
                {"type": "text", "text": KOLAM_VISION_PROMPT},
                {"type": "image_url", "image_url": {"url": image_data_url}},
            ]
        )
        response = await llm.ainvoke([message])
        return parse_json_reply(str(response.content))


class AnthropicBackend(VisionBackend):
    name = "anthropic"

    @property
    def api_key(self) -> str:
        return self.settings.anthropic_api_key

    async def analyze(self, image_data_url: str) -> dict[str, Any]:
        if not self.api_key:
            raise BackendNotConfigured("Anthropic API key not configured")

        from langchain_anthropic import ChatAnthropic
        from langchain_core.messages import HumanMessage

        media_type, data = split_data_url(image_data_url)
        llm = ChatAnthropic(
            model=self.settings.model_anthropic,
            api_key=self.api_key,
            max_tokens=self.settings.ai_max_tokens,
            timeout=self.settings.ai_timeout_s,
        )
        message = HumanMessage(
            content=[
                {
                    "type": "image",
                    "source": {"type": "base64", "media_type": media_type, "data": data},
                },
                {"type": "text", "text": KOLAM_VISION_PROMPT},
            ]
        )
        response = await llm.ainvoke([message])
        return parse_json_reply(str(response.content))


class GoogleVisionBackend(VisionBackend):
    name = "google"

    @property
    def api_key(self) -> str:
        return self.settings.google_vision_api_key

    async def analyze(self, image_data_url: str) -> dict[str, Any]:
        if not self.api_key:
            raise BackendNotConfigured("Google Vision API key not configured")
        _, data = split_data_url(image_data_url)
        return await asyncio.to_thread(self._annotate, data)

    def _annotate(self, base64_image: str) -> dict[str, Any]:
        import requests

        response = requests.post(
            self.settings.google_vision_url,
            params={"key": self.api_key},
            json={
                "requests": [
                    {"image": {"content": base64_image}, "features": GOOGLE_VISION_FEATURES}
                ]
            },
            timeout=self.settings.ai_timeout_s,
        )
        response.raise_for_status()
        result = response.json()["responses"][0]
        properties = result.get("imagePropertiesAnnotation", {})
        return {
            "labels": result.get("labelAnnotations", []),
            "objects": result.get("localizedObjectAnnotations", []),
            "colors": properties.get("dominantColors", {}).get("colors", []),
            "description": "Image analyzed using Google Vision API",
        }


BACKENDS: dict[str, type[VisionBackend]] = {
    OpenAIBackend.name: OpenAIBackend,
    AnthropicBackend.name: AnthropicBackend,
    GoogleVisionBackend.name: GoogleVisionBackend,
}


def create_backend(service: str, settings: Settings) -> VisionBackend | None:
    backend_cls = BACKENDS.get(service.lower())
    if backend_cls is None:
        logger.warning("Unknown AI service: %s", service)
        return None
    return backend_cls(settings)
