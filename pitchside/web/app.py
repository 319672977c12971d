"""Flask app factory for the Pitchside AI API."""

from __future__ import annotations

import os
from typing import Optional
from uuid import uuid4

from flask import Flask, g, request
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException

from pitchside.core.logging_utils import log_event
from pitchside.core.settings import Settings, load_settings
from pitchside.imaging.router import ImageRouter
from pitchside.llm.router import build_text_provider
from pitchside.web.api import TextProviderFactory, api_bp

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def create_app(
    settings: Optional[Settings] = None,
    *,
    image_router: Optional[ImageRouter] = None,
    text_provider_factory: Optional[TextProviderFactory] = None,
) -> Flask:
    """Create and configure the Flask app.

    Args:
        settings (Optional[Settings]): Resolved settings; loaded from config and env when omitted.
        image_router (Optional[ImageRouter]): Router used by the image endpoint.
        text_provider_factory (Optional[TextProviderFactory]): Builds one text provider per request.

    Returns:
        Flask: Configured application.
    """
    settings = settings or load_settings()
    app = Flask(__name__)
    app.json.sort_keys = False
    app.config["PITCHSIDE_SETTINGS"] = settings
    app.config["IMAGE_ROUTER"] = image_router or ImageRouter(timeout=settings.image_timeout_seconds)
    app.config["TEXT_PROVIDER_FACTORY"] = text_provider_factory or build_text_provider

    @app.before_request
    def attach_request_id():
        req_id = str(request.headers.get("X-Request-Id") or "").strip() or uuid4().hex
        g.request_id = req_id

    @app.after_request
    def attach_headers(response):
        response.headers["X-Request-Id"] = str(getattr(g, "request_id", "") or "")
        for key, value in CORS_HEADERS.items():
            response.headers[key] = value
        log_event(
            "web_request",
            {
                "request_id": getattr(g, "request_id", ""),
                "method": request.method,
                "path": request.path,
                "status": response.status_code,
            },
        )
        return response

    @app.errorhandler(405)
    def handle_method_not_allowed(exc):
        return {"error": "Method not allowed"}, 405

    @app.errorhandler(ValidationError)
    def handle_validation_error(exc: ValidationError):
        log_event(
            "web_api_validation",
            {"request_id": getattr(g, "request_id", ""), "path": request.path, "error": str(exc)},
            level="warning",
        )
        return {"error": f"Invalid request: {exc.errors(include_url=False)[0]['msg']}"}, 400

    @app.errorhandler(Exception)
    def handle_unexpected_error(exc: Exception):
        if isinstance(exc, HTTPException):
            return {"error": exc.description or exc.name}, exc.code or 500
        log_event(
            "web_api_error",
            {
                "request_id": getattr(g, "request_id", ""),
                "path": request.path,
                "method": request.method,
                "error": str(exc),
            },
            level="error",
        )
        return {"error": "Internal server error."}, 500

    app.register_blueprint(api_bp)

    @app.get("/healthz")
    def healthz():
        return {"ok": True, "status": "healthy"}

    return app


def main() -> None:
    """Run a local Flask dev server."""
    app = create_app()
    host = os.getenv("WEB_HOST", "0.0.0.0")
    port = int(os.getenv("WEB_PORT", "8590"))
    debug = str(os.getenv("WEB_DEBUG", "0")).strip().lower() in {"1", "true", "yes", "on"}
    app.run(host=host, port=port, debug=debug)


if __name__ == "__main__":
    main()
