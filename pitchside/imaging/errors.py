"""Errors raised by the image provider layer."""

from __future__ import annotations

from typing import Optional, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from pitchside.imaging.types import ProviderAttempt


class ImageProviderError(RuntimeError):
    """Base error for image-generation failures."""


class ImageConfigurationError(ImageProviderError):
    """Raised when the routing table or provider registry is malformed."""


class NoImageProducedError(ImageProviderError):
    """Raised by an adapter when its backend answered without a usable image."""


class ImageGenerationError(ImageProviderError):
    """Raised by the HTTP image client when the endpoint reports a failure."""

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class AllProvidersExhaustedError(ImageProviderError):
    """Raised when every candidate provider was skipped or failed."""

    def __init__(
        self,
        action: str,
        attempts: Sequence["ProviderAttempt"],
        last_error: Optional[BaseException] = None,
    ) -> None:
        self.action = action
        self.attempts = tuple(attempts)
        self.last_error = last_error
        if last_error is not None:
            message = f"All image providers failed for {action}: {last_error}"
        else:
            message = f"No image provider configured for {action}"
        super().__init__(message)

    @property
    def detail(self) -> str:
        """Detail of the last failure, or the summary when nothing was attempted."""
        return str(self.last_error) if self.last_error is not None else str(self)
