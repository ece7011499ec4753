"""Stored design records."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


def _now() -> datetime:
    return datetime.now(timezone.utc)


def default_design_name() -> str:
    return f"Kolam-{date.today().isoformat()}"


class Design(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    dots: list[dict[str, Any]] = Field(default_factory=list)
    lines: list[dict[str, Any]] = Field(default_factory=list)
    circles: list[dict[str, Any]] = Field(default_factory=list)
    connections: list[dict[str, Any]] = Field(default_factory=list)
    image_data: str = Field("", alias="imageData")
    style: str = "traditional"
    created_at: datetime = Field(default_factory=_now, alias="createdAt")
    updated_at: datetime = Field(default_factory=_now, alias="updatedAt")


class DesignCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    dots: list[dict[str, Any]] | None = None
    lines: list[dict[str, Any]] | None = None
    circles: list[dict[str, Any]] | None = None
    connections: list[dict[str, Any]] | None = None
    image_data: str | None = Field(None, alias="imageData")
    style: str | None = None


class DesignUpdate(DesignCreate):
    """Partial update: only fields present in the request body are applied."""
