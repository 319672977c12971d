"""Provider-agnostic request and result datatypes for text generation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

from pitchside.llm.errors import ErrorKind


@dataclass(frozen=True)
class GenerateRequest:
    """Structured text-generation request sent to one provider."""

    model: str
    prompt: str
    max_output_tokens: int = 2048
    metadata: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class GenerateResponse:
    """Normalized provider response."""

    text: str
    provider: str
    model: str
    provider_request_id: Optional[str] = None
    input_tokens: int = 0
    output_tokens: int = 0
    raw: Any = None


@dataclass(frozen=True)
class TextOk:
    """Successful text generation."""

    text: str
    provider: str
    model: str
    attempts: int = 1

    ok = True

    @property
    def display_text(self) -> str:
        return self.text


@dataclass(frozen=True)
class TextErr:
    """Failed text generation with its classification."""

    kind: ErrorKind
    message: str
    detail: str = ""
    status_code: Optional[int] = None
    attempts: int = 1

    ok = False

    @property
    def display_text(self) -> str:
        return self.message


TextResult = Union[TextOk, TextErr]
