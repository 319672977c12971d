"""OpenAI-backed text provider."""

from __future__ import annotations

from typing import Any, Optional

from openai import OpenAI

from pitchside.llm.errors import EmptyResponseError, LLMConfigurationError
from pitchside.llm.types import GenerateRequest, GenerateResponse


def _extract_text_from_completion(response: Any) -> str:
    """Extract the first choice's message content from a chat completion."""
    for choice in getattr(response, "choices", []) or []:
        message = getattr(choice, "message", None)
        content = getattr(message, "content", None) if message is not None else None
        if content:
            return str(content).strip()
    return ""


def _usage_counts(usage: Any) -> tuple[int, int]:
    if usage is None:
        return 0, 0
    if isinstance(usage, dict):
        return int(usage.get("prompt_tokens") or 0), int(usage.get("completion_tokens") or 0)
    return int(getattr(usage, "prompt_tokens", 0) or 0), int(getattr(usage, "completion_tokens", 0) or 0)


class OpenAIProvider:
    """Provider adapter for the OpenAI chat completions API."""

    name = "openai"

    def __init__(
        self,
        *,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[OpenAI] = None,
    ) -> None:
        if client is None and not str(api_key or "").strip():
            raise LLMConfigurationError("OPENAI_API_KEY not configured")
        self._client = client or OpenAI(api_key=api_key, timeout=timeout)

    def generate(self, request: GenerateRequest) -> GenerateResponse:
        """Generate text with one chat completion."""
        response = self._client.chat.completions.create(
            model=request.model,
            messages=[{"role": "user", "content": request.prompt}],
            max_tokens=int(request.max_output_tokens or 2048),
        )
        text = _extract_text_from_completion(response)
        if not text:
            raise EmptyResponseError("OpenAI returned no text")
        in_tok, out_tok = _usage_counts(getattr(response, "usage", None))
        return GenerateResponse(
            text=text,
            provider=self.name,
            model=request.model,
            provider_request_id=str(getattr(response, "id", "") or "") or None,
            input_tokens=in_tok,
            output_tokens=out_tok,
            raw=response,
        )
