"""API request models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class AnalyzeRequest(_CamelModel):
    image_data: Any = Field(
        None,
        alias="imageData",
        description="Canvas data URL or an array of dots",
    )
    mode: str | None = Field(None, description="Client-side analysis mode (informational)")


class DetectDotsRequest(_CamelModel):
    image_data: Any = Field(None, alias="imageData", description="Canvas data URL or an array of dots")


class ConnectDotsRequest(BaseModel):
    dots: list[Any] = Field(default_factory=list, description="Dots as {x, y} objects")
    width: float | None = Field(None, description="Canvas width")
    height: float | None = Field(None, description="Canvas height")


class GenerateRequest(BaseModel):
    dots: list[Any] = Field(default_factory=list)
    style: str = Field("traditional", description="Rangoli style label")
    width: float | None = None
    height: float | None = None
    colors: list[str] | None = Field(None, description="Palette applied round-robin to the dots")


class PointsRequest(_CamelModel):
    dots: list[Any] | None = Field(None, description="Dots as {x, y} objects")
    image_data: Any = Field(None, alias="imageData", description="Used when dots are absent")

    def payload(self) -> Any:
        return self.dots if self.dots else self.image_data


class PrinciplesRequest(BaseModel):
    dots: list[Any] = Field(default_factory=list)
    connections: list[Any] = Field(default_factory=list)
