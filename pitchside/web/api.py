"""Flask API blueprint for the AI generation endpoints."""

from __future__ import annotations

from typing import Any, Callable, Dict
from uuid import uuid4

from flask import Blueprint, current_app, g, jsonify, request

from pitchside.core.logging_utils import log_event
from pitchside.core.settings import Settings
from pitchside.imaging.errors import AllProvidersExhaustedError
from pitchside.imaging.router import ImageRouter, classify_action
from pitchside.imaging.types import FALLBACK_ACTION, GenerationRequest, ReferenceImage
from pitchside.llm.errors import EmptyResponseError, LLMConfigurationError, provider_error_status
from pitchside.llm.interfaces import ChatProvider
from pitchside.llm.router import normalize_provider, resolve_model
from pitchside.llm.types import GenerateRequest
from pitchside.web.schemas import ImageGenerateRequest, TextGenerateRequest, parse_model

api_bp = Blueprint("api", __name__, url_prefix="/api")

TextProviderFactory = Callable[[Any, str], ChatProvider]


def _request_id() -> str:
    return str(getattr(g, "request_id", "") or uuid4().hex)


def _err(message: str, *, status: int = 400):
    return jsonify({"error": message}), status


def _settings() -> Settings:
    return current_app.config["PITCHSIDE_SETTINGS"]


def _image_router() -> ImageRouter:
    return current_app.config["IMAGE_ROUTER"]


def _text_provider_factory() -> TextProviderFactory:
    return current_app.config["TEXT_PROVIDER_FACTORY"]


def _preflight():
    return "", 200


@api_bp.route("/ai-generate-image", methods=["POST", "OPTIONS"])
def ai_generate_image():
    if request.method == "OPTIONS":
        return _preflight()

    settings = _settings()
    if not settings.gemini_api_key:
        return _err("GEMINI_API_KEY not configured", status=500)

    payload = parse_model(ImageGenerateRequest, request.get_json(silent=True))
    if not (payload.prompt or "").strip():
        return _err("Prompt is required", status=400)

    reference = None
    if payload.reference_image_base64 and payload.reference_mime_type:
        reference = ReferenceImage(data_base64=payload.reference_image_base64, mime_type=payload.reference_mime_type)
    gen_request = GenerationRequest(
        prompt=payload.prompt,
        action=payload.action or FALLBACK_ACTION.value,
        aspect_ratio=payload.aspect_ratio,
        reference_image=reference,
    )

    try:
        result = _image_router().generate(gen_request, settings.provider_credentials())
    except AllProvidersExhaustedError as exc:
        log_event(
            "image_generation_failed",
            {
                "request_id": _request_id(),
                "club_id": payload.club_id,
                "action": classify_action(payload.action).value,
                "attempts": [a.provider + ":" + a.outcome for a in exc.attempts],
                "error": exc.detail,
            },
            level="error",
        )
        return _err(f"Image generation failed: {exc.detail}", status=500)

    log_event(
        "image_generation_completed",
        {
            "request_id": _request_id(),
            "club_id": payload.club_id,
            "action": classify_action(payload.action).value,
            "provider": result.provider,
        },
    )
    body: Dict[str, Any] = {
        "imageBase64": result.image_base64,
        "mimeType": result.mime_type,
        "provider": result.provider,
    }
    if result.description:
        body["description"] = result.description
    return jsonify(body)


@api_bp.route("/ai-generate", methods=["POST", "OPTIONS"])
def ai_generate():
    if request.method == "OPTIONS":
        return _preflight()

    settings = _settings()
    payload = parse_model(TextGenerateRequest, request.get_json(silent=True))
    if not (payload.prompt or "").strip():
        return _err("Prompt is required", status=400)

    try:
        provider_id = normalize_provider(payload.provider, default=settings.ai_provider)
    except LLMConfigurationError as exc:
        return _err(str(exc), status=400)
    model = resolve_model(provider_id, payload.model)

    try:
        provider = _text_provider_factory()(settings, provider_id)
    except LLMConfigurationError as exc:
        return _err(str(exc), status=500)

    gen_request = GenerateRequest(
        model=model,
        prompt=payload.prompt,
        metadata={"club_id": payload.club_id, "action": payload.action},
    )
    try:
        response = provider.generate(gen_request)
    except EmptyResponseError:
        # Empty text maps to empty_response in the client.
        log_event(
            "text_generation_empty",
            {"request_id": _request_id(), "provider": provider_id, "model": model, "action": payload.action},
            level="warning",
        )
        return jsonify({"text": "", "provider": provider_id, "model": model})
    except Exception as exc:
        status = provider_error_status(exc)
        log_event(
            "text_generation_failed",
            {
                "request_id": _request_id(),
                "provider": provider_id,
                "model": model,
                "action": payload.action,
                "status_code": status,
                "error": str(exc),
            },
            level="error",
        )
        return _err(f"AI generation failed: {exc}", status=status)

    log_event(
        "text_generation_completed",
        {
            "request_id": _request_id(),
            "club_id": payload.club_id,
            "provider": provider_id,
            "model": model,
            "action": payload.action,
            "output_tokens": response.output_tokens,
        },
    )
    return jsonify({"text": response.text, "provider": provider_id, "model": model})
