"""Image generation: provider adapters, the fallback router, and the HTTP client."""

from pitchside.imaging.errors import (
    AllProvidersExhaustedError,
    ImageConfigurationError,
    ImageGenerationError,
    ImageProviderError,
    NoImageProducedError,
)
from pitchside.imaging.types import (
    ActionKind,
    AspectRatio,
    GenerationRequest,
    GenerationResult,
    ProviderAttempt,
    ProviderCredentials,
    ReferenceImage,
)

__all__ = [
    "ActionKind",
    "AspectRatio",
    "GenerationRequest",
    "GenerationResult",
    "ProviderAttempt",
    "ProviderCredentials",
    "ReferenceImage",
    "ImageProviderError",
    "ImageConfigurationError",
    "ImageGenerationError",
    "NoImageProducedError",
    "AllProvidersExhaustedError",
]
