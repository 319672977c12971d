"""Provider selection for the text-generation endpoint."""

from __future__ import annotations

from typing import Any, Dict, Optional

from pitchside.llm.errors import LLMConfigurationError
from pitchside.llm.interfaces import ChatProvider
from pitchside.llm.providers import AnthropicProvider, GeminiProvider, OpenAIProvider

SUPPORTED_PROVIDERS = ("gemini", "openai", "anthropic")

DEFAULT_MODELS: Dict[str, str] = {
    "gemini": "gemini-2.0-flash",
    "openai": "gpt-4o-mini",
    "anthropic": "claude-3-haiku-20240307",
}

API_KEY_ENV: Dict[str, str] = {
    "gemini": "GEMINI_API_KEY",
    "openai": "OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
}


def normalize_provider(raw: Optional[str], default: str = "gemini") -> str:
    """Return a supported provider id or raise ``LLMConfigurationError``."""
    provider_id = str(raw or "").strip().lower() or default
    if provider_id not in SUPPORTED_PROVIDERS:
        raise LLMConfigurationError(f"Unknown provider: {provider_id}")
    return provider_id


def resolve_model(provider: str, model: Optional[str] = None) -> str:
    """Resolve the model for a provider, falling back to its fixed default."""
    text = str(model or "").strip()
    return text or DEFAULT_MODELS[provider]


def _cfg_value(settings: Any, key: str) -> str:
    if settings is None:
        value = None
    elif isinstance(settings, dict):
        value = settings.get(key)
    else:
        value = getattr(settings, key, None)
    return str(value or "").strip()


def build_text_provider(settings: Any, provider: str) -> ChatProvider:
    """Instantiate one configured provider.

    Raises:
        LLMConfigurationError: If the provider is unknown or its API key is missing.
    """
    provider_id = normalize_provider(provider)
    api_key = _cfg_value(settings, f"{provider_id}_api_key")
    if not api_key:
        raise LLMConfigurationError(f"{API_KEY_ENV[provider_id]} not configured")
    timeout_raw = _cfg_value(settings, "text_timeout_seconds")
    timeout = float(timeout_raw) if timeout_raw else None
    if provider_id == "openai":
        return OpenAIProvider(api_key=api_key, timeout=timeout)
    if provider_id == "anthropic":
        return AnthropicProvider(api_key=api_key, timeout=timeout)
    return GeminiProvider(api_key=api_key, timeout=timeout)
