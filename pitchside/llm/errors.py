"""Errors raised by the text provider layer and the user-facing error taxonomy."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class LLMProviderError(RuntimeError):
    """Base error for provider-layer failures."""


class LLMConfigurationError(LLMProviderError):
    """Raised when provider configuration is invalid or incomplete."""


class EmptyResponseError(LLMProviderError):
    """Raised when a provider answers without any text."""


class ErrorKind(str, Enum):
    """Stable classification of a failed text-generation call."""

    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    UNAVAILABLE = "unavailable"
    TIMEOUT = "timeout"
    QUOTA = "quota"
    INVALID_REQUEST = "invalid_request"
    EMPTY_RESPONSE = "empty_response"
    UNKNOWN = "unknown"


USER_MESSAGES = {
    ErrorKind.AUTH: "AI service authentication failed. Please check the API configuration.",
    ErrorKind.RATE_LIMIT: "Rate limit reached. Please wait a moment and try again.",
    ErrorKind.UNAVAILABLE: "AI service is temporarily unavailable. Please try again shortly.",
    ErrorKind.TIMEOUT: "The request timed out. Try a shorter prompt.",
    ErrorKind.QUOTA: "AI usage quota exceeded. Please try again later.",
    ErrorKind.INVALID_REQUEST: "Invalid request. Please try different input.",
    ErrorKind.EMPTY_RESPONSE: "Failed to generate content.",
    ErrorKind.UNKNOWN: "Content generation failed. Please try again.",
}


def user_message(kind: ErrorKind) -> str:
    """Return the fixed user-facing message for one error kind."""
    return USER_MESSAGES.get(kind, USER_MESSAGES[ErrorKind.UNKNOWN])


def provider_error_status(exc: BaseException) -> int:
    """Map a provider SDK exception to the HTTP status reported to clients.

    openai/anthropic errors expose ``status_code``; google-genai errors expose
    ``code``. SDK timeouts carry neither and are reported as 504.
    """
    for attr in ("status_code", "code"):
        value: Optional[object] = getattr(exc, attr, None)
        if isinstance(value, int) and 400 <= value <= 599:
            return value
    if isinstance(exc, TimeoutError) or "timeout" in type(exc).__name__.lower():
        return 504
    return 500
