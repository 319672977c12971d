"""Protocol implemented by the server-side text providers."""

from __future__ import annotations

from typing import Protocol

from .types import GenerateRequest, GenerateResponse


class ChatProvider(Protocol):
    """Protocol for text-generation providers."""

    name: str

    def generate(self, request: GenerateRequest) -> GenerateResponse:
        """Run one non-streaming text-generation request."""
