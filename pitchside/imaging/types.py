"""Request, result, and credential types for image generation."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional, Tuple


class ActionKind(str, Enum):
    """Closed set of image actions that select a routing priority."""

    MATCHDAY_GRAPHIC = "generate_matchday_graphic"
    RESULT_GRAPHIC = "generate_result_graphic"
    PLAYER_SPOTLIGHT = "generate_player_spotlight"
    ANNOUNCEMENT = "generate_announcement"
    CUSTOM_IMAGE = "generate_custom_image"


FALLBACK_ACTION = ActionKind.CUSTOM_IMAGE


class AspectRatio(str, Enum):
    SQUARE = "1:1"
    LANDSCAPE = "16:9"
    PORTRAIT = "9:16"
    STANDARD = "4:3"
    TALL = "3:4"


@dataclass(frozen=True)
class ReferenceImage:
    """Base64 image sent alongside the prompt as a style/layout reference."""

    data_base64: str
    mime_type: str = "image/png"


@dataclass(frozen=True)
class GenerationRequest:
    """One image-generation request.

    ``action`` is the raw caller string (``"kind:variant"``); the router
    normalizes it with ``classify_action``.
    """

    prompt: str
    action: str = FALLBACK_ACTION.value
    aspect_ratio: AspectRatio = AspectRatio.SQUARE
    reference_image: Optional[ReferenceImage] = None

    def __post_init__(self) -> None:
        if not str(self.prompt or "").strip():
            raise ValueError("Prompt is required")
        if not isinstance(self.aspect_ratio, AspectRatio):
            object.__setattr__(self, "aspect_ratio", AspectRatio(str(self.aspect_ratio)))


@dataclass(frozen=True)
class ProviderCredentials:
    """API keys keyed by credential name (``gemini``, ``ideogram``)."""

    keys: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, keys: Mapping[str, Optional[str]]) -> "ProviderCredentials":
        cleaned = {str(k): str(v).strip() for k, v in keys.items() if str(v or "").strip()}
        return cls(keys=cleaned)

    def get(self, credential: str) -> Optional[str]:
        value = self.keys.get(credential)
        return value or None


@dataclass(frozen=True)
class ProviderAttempt:
    """Record of one candidate provider during routing."""

    provider: str
    outcome: str  # "skipped" | "failed" | "succeeded"
    error: Optional[str] = None


@dataclass(frozen=True)
class GenerationResult:
    """Generated image plus which provider produced it."""

    image_base64: str
    mime_type: str
    provider: str
    description: Optional[str] = None
    attempts: Tuple[ProviderAttempt, ...] = ()
