"""Routing of image requests to providers with ordered fallback.

Each action kind maps to a fixed priority list. Text-heavy graphics (scores,
fixtures) try Ideogram first for accurate lettering; visual graphics try Imagen
first. Gemini closes every chain. Candidates are tried one at a time and the
first success wins.
"""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from pitchside.core.logging_utils import log_event
from pitchside.imaging.errors import AllProvidersExhaustedError, ImageConfigurationError
from pitchside.imaging.interfaces import ImageProvider
from pitchside.imaging.providers import GeminiImageProvider, IdeogramProvider, ImagenProvider
from pitchside.imaging.types import (
    FALLBACK_ACTION,
    ActionKind,
    GenerationRequest,
    GenerationResult,
    ProviderAttempt,
    ProviderCredentials,
)

RoutingTable = Mapping[ActionKind, Sequence[str]]

ROUTING_TABLE: Dict[ActionKind, Tuple[str, ...]] = {
    ActionKind.RESULT_GRAPHIC: ("ideogram", "imagen", "gemini"),
    ActionKind.MATCHDAY_GRAPHIC: ("ideogram", "imagen", "gemini"),
    ActionKind.PLAYER_SPOTLIGHT: ("imagen", "gemini"),
    ActionKind.ANNOUNCEMENT: ("imagen", "ideogram", "gemini"),
    ActionKind.CUSTOM_IMAGE: ("imagen", "gemini"),
}

_ACTION_VALUES = {kind.value: kind for kind in ActionKind}


def classify_action(raw_action: Optional[str]) -> ActionKind:
    """Return the action kind of ``"kind:variant"``, or the custom-image kind if unknown."""
    base = str(raw_action or "").split(":", 1)[0].strip()
    return _ACTION_VALUES.get(base, FALLBACK_ACTION)


def default_registry(timeout: Optional[float] = None) -> Dict[str, ImageProvider]:
    """Build the provider registry keyed by provider id."""
    providers: List[ImageProvider] = [
        ImagenProvider(timeout=timeout),
        IdeogramProvider(timeout=timeout or 60.0),
        GeminiImageProvider(timeout=timeout),
    ]
    return {provider.name: provider for provider in providers}


def validate_routing(routing_table: RoutingTable, registry: Mapping[str, ImageProvider]) -> None:
    """Check that every action kind has a non-empty chain of registered providers."""
    for kind in ActionKind:
        chain = routing_table.get(kind)
        if not chain:
            raise ImageConfigurationError(f"No providers configured for action '{kind.value}'")
        unknown = [provider_id for provider_id in chain if provider_id not in registry]
        if unknown:
            raise ImageConfigurationError(
                f"Action '{kind.value}' references unregistered providers: {', '.join(unknown)}"
            )


def resolve_candidates(action_kind: ActionKind, routing_table: RoutingTable = ROUTING_TABLE) -> Tuple[str, ...]:
    """Return the ordered provider ids for one action kind."""
    chain = routing_table.get(action_kind)
    if not chain:
        raise ImageConfigurationError(f"No providers configured for action '{action_kind}'")
    return tuple(chain)


def primary_provider(raw_action: Optional[str], routing_table: RoutingTable = ROUTING_TABLE) -> str:
    """First provider tried for an action string."""
    return resolve_candidates(classify_action(raw_action), routing_table)[0]


class ImageRouter:
    """Executes the fallback chain for one request at a time.

    The routing table and registry are fixed at construction and validated
    there. The router keeps no per-request state.
    """

    def __init__(
        self,
        routing_table: Optional[RoutingTable] = None,
        registry: Optional[Mapping[str, ImageProvider]] = None,
        *,
        timeout: Optional[float] = None,
    ) -> None:
        self.routing_table: Dict[ActionKind, Tuple[str, ...]] = {
            kind: tuple(chain) for kind, chain in (routing_table or ROUTING_TABLE).items()
        }
        self.registry: Dict[str, ImageProvider] = dict(registry or default_registry(timeout))
        validate_routing(self.routing_table, self.registry)

    def resolve_candidates(self, action_kind: ActionKind) -> Tuple[str, ...]:
        return resolve_candidates(action_kind, self.routing_table)

    def generate(self, request: GenerationRequest, credentials: ProviderCredentials) -> GenerationResult:
        """Try candidates in priority order and return the first success.

        Providers whose credential is missing are skipped without counting as a
        failure.

        Raises:
            AllProvidersExhaustedError: When no candidate succeeded.
        """
        action_kind = classify_action(request.action)
        attempts: List[ProviderAttempt] = []
        last_error: Optional[BaseException] = None

        for provider_id in self.resolve_candidates(action_kind):
            provider = self.registry[provider_id]
            api_key = credentials.get(provider.credential)
            if not api_key:
                attempts.append(ProviderAttempt(provider=provider_id, outcome="skipped"))
                log_event(
                    "image_provider_attempt",
                    {"provider": provider_id, "action": action_kind.value, "outcome": "skipped", "reason": "no_api_key"},
                )
                continue

            log_event("image_provider_attempt", {"provider": provider_id, "action": action_kind.value, "outcome": "started"})
            try:
                result = provider.generate(request, api_key)
            except Exception as exc:
                last_error = exc
                attempts.append(ProviderAttempt(provider=provider_id, outcome="failed", error=str(exc)))
                log_event(
                    "image_provider_attempt",
                    {"provider": provider_id, "action": action_kind.value, "outcome": "failed", "error": str(exc)},
                    level="warning",
                )
                continue

            attempts.append(ProviderAttempt(provider=provider_id, outcome="succeeded"))
            log_event("image_provider_attempt", {"provider": provider_id, "action": action_kind.value, "outcome": "succeeded"})
            return GenerationResult(
                image_base64=result.image_base64,
                mime_type=result.mime_type,
                provider=result.provider or provider_id,
                description=result.description,
                attempts=tuple(attempts),
            )

        raise AllProvidersExhaustedError(action_kind.value, attempts, last_error)


def generate_image(
    request: GenerationRequest,
    credentials: ProviderCredentials,
    *,
    router: Optional[ImageRouter] = None,
) -> GenerationResult:
    """Generate one image with the default routing table and providers."""
    return (router or ImageRouter()).generate(request, credentials)
