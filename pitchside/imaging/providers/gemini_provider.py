"""Gemini Flash image adapter; cheapest option and last resort in every chain.

It is the only adapter that accepts a reference image, and any text parts in the
response are returned as the image description.
"""

from __future__ import annotations

import base64
from typing import Any, Callable, Optional

from google.genai import types

from pitchside.imaging.errors import NoImageProducedError
from pitchside.imaging.providers.genai_client import build_genai_client, to_base64
from pitchside.imaging.types import GenerationRequest, GenerationResult

GEMINI_IMAGE_MODEL = "gemini-2.0-flash-exp"


class GeminiImageProvider:
    name = "gemini"
    credential = "gemini"

    def __init__(
        self,
        *,
        model: str = GEMINI_IMAGE_MODEL,
        timeout: Optional[float] = None,
        client_factory: Optional[Callable[[str], Any]] = None,
    ) -> None:
        self.model = model
        self._client_factory = client_factory or (lambda key: build_genai_client(key, timeout))

    def _contents(self, request: GenerationRequest) -> list[Any]:
        contents: list[Any] = [request.prompt]
        ref = request.reference_image
        if ref is not None and ref.data_base64 and ref.mime_type:
            contents.append(types.Part.from_bytes(data=base64.b64decode(ref.data_base64), mime_type=ref.mime_type))
        return contents

    def generate(self, request: GenerationRequest, api_key: str) -> GenerationResult:
        client = self._client_factory(api_key)
        response = client.models.generate_content(
            model=self.model,
            contents=self._contents(request),
            config=types.GenerateContentConfig(response_modalities=["TEXT", "IMAGE"]),
        )
        image_base64 = ""
        mime_type = "image/png"
        description = ""
        for candidate in getattr(response, "candidates", None) or []:
            content = getattr(candidate, "content", None)
            for part in getattr(content, "parts", None) or []:
                inline = getattr(part, "inline_data", None)
                if inline is not None and getattr(inline, "data", None):
                    image_base64 = to_base64(inline.data)
                    mime_type = str(getattr(inline, "mime_type", None) or "image/png")
                text = getattr(part, "text", None)
                if text:
                    description = str(text)
        if not image_base64:
            raise NoImageProducedError("Gemini did not generate an image")
        return GenerationResult(
            image_base64=image_base64,
            mime_type=mime_type,
            provider=self.name,
            description=description or None,
        )
