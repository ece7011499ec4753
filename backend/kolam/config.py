"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    kolam_env: str = "development"
    kolam_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5000"]

    # Remote AI enrichment (openai | anthropic | google)
    enable_ai_analysis: bool = False
    ai_service: str = "openai"
    openai_api_key: str = ""
    google_vision_api_key: str = ""
    anthropic_api_key: str = ""

    model_openai: str = "gpt-4o-mini"
    model_anthropic: str = "claude-haiku-4-5-20251001"
    google_vision_url: str = "https://vision.googleapis.com/v1/images:annotate"
    ai_max_tokens: int = 1024
    ai_timeout_s: float = 30.0

    # Design store
    seed_sample_designs: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
