"""Unit tests for text provider selection and the SDK adapters."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from pitchside.core.settings import Settings
from pitchside.llm.errors import EmptyResponseError, LLMConfigurationError, provider_error_status
from pitchside.llm.providers import AnthropicProvider, GeminiProvider, OpenAIProvider
from pitchside.llm.router import DEFAULT_MODELS, build_text_provider, normalize_provider, resolve_model
from pitchside.llm.types import GenerateRequest


def test_normalize_provider_defaults_and_rejects_unknown() -> None:
    assert normalize_provider(None) == "gemini"
    assert normalize_provider(" OpenAI ") == "openai"
    assert normalize_provider("", default="anthropic") == "anthropic"
    with pytest.raises(LLMConfigurationError, match="Unknown provider: mistral"):
        normalize_provider("mistral")


def test_resolve_model_uses_fixed_defaults() -> None:
    assert resolve_model("gemini") == "gemini-2.0-flash"
    assert resolve_model("openai", "") == "gpt-4o-mini"
    assert resolve_model("anthropic", None) == "claude-3-haiku-20240307"
    assert resolve_model("openai", "gpt-4o") == "gpt-4o"
    assert set(DEFAULT_MODELS) == {"gemini", "openai", "anthropic"}


def test_build_text_provider_requires_key() -> None:
    with pytest.raises(LLMConfigurationError, match="OPENAI_API_KEY not configured"):
        build_text_provider(Settings(), "openai")
    with pytest.raises(LLMConfigurationError, match="ANTHROPIC_API_KEY not configured"):
        build_text_provider({"anthropic_api_key": "  "}, "anthropic")


def test_build_text_provider_returns_configured_adapter() -> None:
    provider = build_text_provider(Settings(openai_api_key="sk-test"), "openai")
    assert isinstance(provider, OpenAIProvider)
    assert provider.name == "openai"


def test_openai_provider_uses_chat_completions() -> None:
    calls: list[dict] = []

    def create(**kwargs):
        calls.append(kwargs)
        return SimpleNamespace(
            id="chatcmpl-1",
            choices=[SimpleNamespace(message=SimpleNamespace(content=" Derby day! "))],
            usage=SimpleNamespace(prompt_tokens=12, completion_tokens=4),
        )

    client = SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))
    provider = OpenAIProvider(client=client)

    out = provider.generate(GenerateRequest(model="gpt-4o-mini", prompt="Hype it"))

    assert out.text == "Derby day!"
    assert out.provider == "openai"
    assert out.input_tokens == 12
    assert out.output_tokens == 4
    assert calls[0]["max_tokens"] == 2048
    assert calls[0]["messages"] == [{"role": "user", "content": "Hype it"}]


def test_openai_provider_empty_choice_raises() -> None:
    client = SimpleNamespace(
        chat=SimpleNamespace(completions=SimpleNamespace(create=lambda **_: SimpleNamespace(choices=[])))
    )
    with pytest.raises(EmptyResponseError):
        OpenAIProvider(client=client).generate(GenerateRequest(model="gpt-4o-mini", prompt="x"))


def test_anthropic_provider_joins_text_blocks() -> None:
    calls: list[dict] = []

    def create(**kwargs):
        calls.append(kwargs)
        return SimpleNamespace(
            id="msg_1",
            content=[SimpleNamespace(type="text", text="Full time."), SimpleNamespace(type="tool_use")],
            usage=SimpleNamespace(input_tokens=9, output_tokens=3),
        )

    provider = AnthropicProvider(client=SimpleNamespace(messages=SimpleNamespace(create=create)))

    out = provider.generate(GenerateRequest(model="claude-3-haiku-20240307", prompt="Report"))

    assert out.text == "Full time."
    assert out.provider_request_id == "msg_1"
    assert calls[0]["max_tokens"] == 2048
    assert calls[0]["model"] == "claude-3-haiku-20240307"


def test_anthropic_provider_requires_key_without_client() -> None:
    with pytest.raises(LLMConfigurationError, match="ANTHROPIC_API_KEY"):
        AnthropicProvider(api_key="")


def test_gemini_provider_reads_response_text() -> None:
    calls: list[dict] = []

    def generate_content(**kwargs):
        calls.append(kwargs)
        return SimpleNamespace(text="Gulls win", response_id="r-1", usage_metadata=None)

    provider = GeminiProvider(client=SimpleNamespace(models=SimpleNamespace(generate_content=generate_content)))

    out = provider.generate(GenerateRequest(model="gemini-2.0-flash", prompt="Result"))

    assert out.text == "Gulls win"
    assert out.provider == "gemini"
    assert calls[0]["contents"] == "Result"
    assert calls[0]["config"].max_output_tokens == 2048


def test_gemini_provider_empty_text_raises() -> None:
    provider = GeminiProvider(
        client=SimpleNamespace(models=SimpleNamespace(generate_content=lambda **_: SimpleNamespace(text=None)))
    )
    with pytest.raises(EmptyResponseError):
        provider.generate(GenerateRequest(model="gemini-2.0-flash", prompt="x"))


class _StatusError(Exception):
    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class _CodeError(Exception):
    def __init__(self, message: str, code: int) -> None:
        super().__init__(message)
        self.code = code


class APITimeoutError(Exception):
    pass


def test_provider_error_status_mapping() -> None:
    assert provider_error_status(_StatusError("rate limited", 429)) == 429
    assert provider_error_status(_StatusError("bad key", 401)) == 401
    assert provider_error_status(_CodeError("overloaded", 503)) == 503
    assert provider_error_status(APITimeoutError("timed out")) == 504
    assert provider_error_status(TimeoutError()) == 504
    assert provider_error_status(RuntimeError("boom")) == 500
    assert provider_error_status(_CodeError("weird", 7)) == 500
