"""Protocol implemented by the image provider adapters."""

from __future__ import annotations

from typing import Protocol

from .types import GenerationRequest, GenerationResult


class ImageProvider(Protocol):
    """Generates one image from a prompt.

    ``credential`` names the key in ``ProviderCredentials`` the adapter needs.
    Adapters raise ``NoImageProducedError`` instead of returning an empty result.
    """

    name: str
    credential: str

    def generate(self, request: GenerationRequest, api_key: str) -> GenerationResult:
        """Generate one image."""
