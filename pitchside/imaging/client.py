"""HTTP client for the ``/api/ai-generate-image`` endpoint."""

from __future__ import annotations

from typing import Any, Dict, Optional

import requests

from pitchside.core.logging_utils import log_event
from pitchside.imaging.errors import ImageGenerationError
from pitchside.imaging.types import AspectRatio, GenerationResult, ReferenceImage

IMAGE_ENDPOINT_PATH = "/api/ai-generate-image"


class ImageGenerationClient:
    """Posts image requests to the Pitchside API; raises on failure."""

    def __init__(
        self,
        endpoint_url: str,
        *,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = 120.0,
    ) -> None:
        self.endpoint_url = str(endpoint_url)
        self.timeout = timeout
        self._session = session or requests.Session()

    @classmethod
    def from_base_url(cls, base_url: str, **kwargs: Any) -> "ImageGenerationClient":
        return cls(str(base_url).rstrip("/") + IMAGE_ENDPOINT_PATH, **kwargs)

    def generate_image(
        self,
        prompt: str,
        *,
        action: str,
        club_id: Optional[str] = None,
        reference_image: Optional[ReferenceImage] = None,
        aspect_ratio: AspectRatio = AspectRatio.SQUARE,
    ) -> GenerationResult:
        """Request one image.

        Raises:
            ImageGenerationError: On transport failure, a non-2xx response, or a body without an image.
        """
        payload: Dict[str, Any] = {
            "prompt": prompt,
            "action": action,
            "aspectRatio": AspectRatio(aspect_ratio).value,
        }
        if club_id:
            payload["clubId"] = club_id
        if reference_image is not None:
            payload["referenceImageBase64"] = reference_image.data_base64
            payload["referenceMimeType"] = reference_image.mime_type

        try:
            resp = self._session.post(self.endpoint_url, json=payload, timeout=self.timeout)
        except requests.RequestException as exc:
            raise ImageGenerationError(f"Image generation failed: {exc}") from exc

        try:
            data = resp.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}
        if not resp.ok:
            log_event(
                "image_generation_request",
                {"action": action, "status_code": resp.status_code, "outcome": "failed"},
                level="warning",
            )
            raise ImageGenerationError(str(data.get("error") or "Image generation failed"), status_code=resp.status_code)
        if not data.get("imageBase64"):
            raise ImageGenerationError("Failed to generate image.", status_code=resp.status_code)
        return GenerationResult(
            image_base64=str(data["imageBase64"]),
            mime_type=str(data.get("mimeType") or "image/png"),
            provider=str(data.get("provider") or ""),
            description=data.get("description") or None,
        )
