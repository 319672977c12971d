"""Imagen 3 adapter: strongest visual quality, used first for general graphics."""

from __future__ import annotations

from typing import Any, Callable, Optional

from google.genai import types

from pitchside.imaging.errors import NoImageProducedError
from pitchside.imaging.providers.genai_client import build_genai_client, to_base64
from pitchside.imaging.types import GenerationRequest, GenerationResult

IMAGEN_MODEL = "imagen-3.0-generate-002"


class ImagenProvider:
    name = "imagen"
    credential = "gemini"

    def __init__(
        self,
        *,
        model: str = IMAGEN_MODEL,
        timeout: Optional[float] = None,
        client_factory: Optional[Callable[[str], Any]] = None,
    ) -> None:
        self.model = model
        self._client_factory = client_factory or (lambda key: build_genai_client(key, timeout))

    def generate(self, request: GenerationRequest, api_key: str) -> GenerationResult:
        client = self._client_factory(api_key)
        response = client.models.generate_images(
            model=self.model,
            prompt=request.prompt,
            config=types.GenerateImagesConfig(
                number_of_images=1,
                aspect_ratio=request.aspect_ratio.value,
                safety_filter_level="BLOCK_MEDIUM_AND_ABOVE",
            ),
        )
        images = list(getattr(response, "generated_images", None) or [])
        if not images:
            raise NoImageProducedError("Imagen 3 returned no images")
        image = getattr(images[0], "image", None)
        image_bytes = getattr(image, "image_bytes", None) if image is not None else None
        if not image_bytes:
            raise NoImageProducedError("Imagen 3 image has no bytes")
        return GenerationResult(
            image_base64=to_base64(image_bytes),
            mime_type=str(getattr(image, "mime_type", None) or "image/png"),
            provider=self.name,
        )
