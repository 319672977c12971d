"""Shared google-genai client construction for the Imagen and Gemini adapters."""

from __future__ import annotations

import base64
from typing import Any, Optional

from google import genai
from google.genai import types


def build_genai_client(api_key: str, timeout: Optional[float] = None) -> Any:
    """Create a google-genai client; ``timeout`` is in seconds."""
    http_options = types.HttpOptions(timeout=int(timeout * 1000)) if timeout else None
    return genai.Client(api_key=api_key, http_options=http_options)


def to_base64(data: Any) -> str:
    """Normalize SDK image payloads (raw bytes or base64 text) to base64 text."""
    if isinstance(data, (bytes, bytearray)):
        return base64.b64encode(bytes(data)).decode("ascii")
    return str(data or "")
