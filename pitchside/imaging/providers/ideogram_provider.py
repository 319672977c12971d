"""Ideogram adapter: best text rendering, used first for score and fixture graphics."""

from __future__ import annotations

import base64
from typing import Any, Dict, Optional

import requests

from pitchside.imaging.errors import ImageProviderError, NoImageProducedError
from pitchside.imaging.types import AspectRatio, GenerationRequest, GenerationResult

IDEOGRAM_URL = "https://api.ideogram.ai/generate"

ASPECT_RATIO_MAP: Dict[AspectRatio, str] = {
    AspectRatio.SQUARE: "ASPECT_1_1",
    AspectRatio.LANDSCAPE: "ASPECT_16_9",
    AspectRatio.PORTRAIT: "ASPECT_9_16",
    AspectRatio.STANDARD: "ASPECT_4_3",
    AspectRatio.TALL: "ASPECT_3_4",
}


def _mime_type_for_url(url: str) -> str:
    lowered = url.lower()
    if ".jpg" in lowered or ".jpeg" in lowered:
        return "image/jpeg"
    return "image/png"


class IdeogramProvider:
    name = "ideogram"
    credential = "ideogram"

    def __init__(
        self,
        *,
        url: str = IDEOGRAM_URL,
        timeout: Optional[float] = 60.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self._session = session or requests.Session()

    def _payload(self, request: GenerationRequest) -> Dict[str, Any]:
        return {
            "image_request": {
                "prompt": request.prompt,
                "aspect_ratio": ASPECT_RATIO_MAP[request.aspect_ratio],
                "model": "V_2",
                "magic_prompt_option": "AUTO",
            }
        }

    def generate(self, request: GenerationRequest, api_key: str) -> GenerationResult:
        resp = self._session.post(
            self.url,
            json=self._payload(request),
            headers={"Content-Type": "application/json", "Api-Key": api_key},
            timeout=self.timeout,
        )
        if not resp.ok:
            raise ImageProviderError(f"Ideogram API error: {resp.status_code} {resp.text}")
        data = resp.json() or {}
        items = data.get("data") or []
        image_url = str((items[0] or {}).get("url") or "") if items else ""
        if not image_url:
            raise NoImageProducedError("Ideogram returned no images")

        image_resp = self._session.get(image_url, timeout=self.timeout)
        if not image_resp.ok:
            raise ImageProviderError(f"Failed to fetch Ideogram image: {image_resp.status_code}")
        if not image_resp.content:
            raise NoImageProducedError("Ideogram image download was empty")
        return GenerationResult(
            image_base64=base64.b64encode(image_resp.content).decode("ascii"),
            mime_type=_mime_type_for_url(image_url),
            provider=self.name,
        )
