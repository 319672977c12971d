"""Anthropic-backed text provider."""

from __future__ import annotations

from typing import Any, Optional

from pitchside.llm.errors import EmptyResponseError, LLMConfigurationError
from pitchside.llm.types import GenerateRequest, GenerateResponse


def _usage_counts(usage: Any) -> tuple[int, int]:
    """Normalize Anthropic token usage into input/output counts."""
    if usage is None:
        return 0, 0
    return int(getattr(usage, "input_tokens", 0) or 0), int(getattr(usage, "output_tokens", 0) or 0)


class AnthropicProvider:
    """Provider adapter for the Anthropic Messages API."""

    name = "anthropic"

    def __init__(self, *, api_key: Optional[str] = None, timeout: Optional[float] = None, client: Any = None) -> None:
        if client is not None:
            self._client = client
            return
        try:
            from anthropic import Anthropic
        except Exception as exc:
            raise LLMConfigurationError("anthropic package is required for provider=anthropic") from exc
        key = str(api_key or "").strip()
        if not key:
            raise LLMConfigurationError("ANTHROPIC_API_KEY not configured")
        kwargs: dict[str, Any] = {"api_key": key}
        if timeout:
            kwargs["timeout"] = float(timeout)
        self._client = Anthropic(**kwargs)

    def generate(self, request: GenerateRequest) -> GenerateResponse:
        """Generate text via the Messages API."""
        response = self._client.messages.create(
            model=request.model,
            max_tokens=int(request.max_output_tokens or 2048),
            messages=[{"role": "user", "content": request.prompt}],
        )
        text_parts: list[str] = []
        for block in getattr(response, "content", []) or []:
            if getattr(block, "type", None) == "text":
                val = getattr(block, "text", None)
                if val:
                    text_parts.append(str(val))
        text = "\n".join(text_parts).strip()
        if not text:
            raise EmptyResponseError("Anthropic returned no text")
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
