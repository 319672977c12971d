"""Text generation: provider adapters, provider selection, and the retrying client."""

from pitchside.llm.client import TextGenerationClient
from pitchside.llm.errors import (
    EmptyResponseError,
    ErrorKind,
    LLMConfigurationError,
    LLMProviderError,
    user_message,
)
from pitchside.llm.parsing import extract_json
from pitchside.llm.retry import RetryPolicy, classify_failure
from pitchside.llm.types import GenerateRequest, GenerateResponse, TextErr, TextOk, TextResult

__all__ = [
    "LLMProviderError",
    "LLMConfigurationError",
    "EmptyResponseError",
    "ErrorKind",
    "user_message",
    "RetryPolicy",
    "classify_failure",
    "GenerateRequest",
    "GenerateResponse",
    "TextOk",
    "TextErr",
    "TextResult",
    "TextGenerationClient",
    "extract_json",
]
