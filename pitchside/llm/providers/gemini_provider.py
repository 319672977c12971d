"""Gemini-backed text provider using the google-genai SDK."""

from __future__ import annotations

from typing import Any, Optional

from google import genai
from google.genai import types

from pitchside.llm.errors import EmptyResponseError, LLMConfigurationError
from pitchside.llm.types import GenerateRequest, GenerateResponse


class GeminiProvider:
    """Provider adapter for Gemini ``generate_content``."""

    name = "gemini"

    def __init__(self, *, api_key: Optional[str] = None, timeout: Optional[float] = None, client: Any = None) -> None:
        if client is not None:
            self._client = client
            return
        key = str(api_key or "").strip()
        if not key:
            raise LLMConfigurationError("GEMINI_API_KEY not configured")
        http_options = types.HttpOptions(timeout=int(timeout * 1000)) if timeout else None
        self._client = genai.Client(api_key=key, http_options=http_options)

    def generate(self, request: GenerateRequest) -> GenerateResponse:
        """Generate text for one prompt."""
        response = self._client.models.generate_content(
            model=request.model,
            contents=request.prompt,
            config=types.GenerateContentConfig(max_output_tokens=int(request.max_output_tokens or 2048)),
        )
        text = str(getattr(response, "text", "") or "").strip()
        if not text:
            raise EmptyResponseError("Gemini returned no text")
        usage = getattr(response, "usage_metadata", None)
        return GenerateResponse(
            text=text,
            provider=self.name,
            model=request.model,
            provider_request_id=str(getattr(response, "response_id", "") or "") or None,
            input_tokens=int(getattr(usage, "prompt_token_count", 0) or 0),
            output_tokens=int(getattr(usage, "candidates_token_count", 0) or 0),
            raw=response,
        )
