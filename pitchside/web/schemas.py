"""Pydantic request schemas for Flask API endpoints."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from pitchside.imaging.types import AspectRatio


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ImageGenerateRequest(_CamelModel):
    prompt: Optional[str] = Field(default="", max_length=20000)
    reference_image_base64: Optional[str] = Field(default=None, alias="referenceImageBase64")
    reference_mime_type: Optional[str] = Field(default=None, alias="referenceMimeType", max_length=128)
    club_id: Optional[str] = Field(default=None, alias="clubId", max_length=128)
    action: Optional[str] = Field(default=None, max_length=128)
    aspect_ratio: AspectRatio = Field(default=AspectRatio.SQUARE, alias="aspectRatio")


class TextGenerateRequest(_CamelModel):
    prompt: Optional[str] = Field(default="", max_length=100000)
    model: Optional[str] = Field(default=None, max_length=128)
    provider: Optional[str] = Field(default=None, max_length=32)
    club_id: Optional[str] = Field(default=None, alias="clubId", max_length=128)
    action: Optional[str] = Field(default=None, max_length=128)


def parse_model(model_cls: Any, payload: Any) -> Any:
    """Parse one request payload into a pydantic model."""
    return model_cls.model_validate(payload or {})
