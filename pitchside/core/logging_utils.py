"""Structured JSON logging for provider attempts and web requests."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Dict


def log_event(event: str, payload: Dict[str, Any] | None = None, *, level: str = "info") -> None:
    """Emit one structured JSON log line to stdout.

    Args:
        event (str): Event name, e.g. ``image_provider_attempt``.
        payload (Dict[str, Any] | None): Extra fields merged into the log line.
        level (str): Severity label carried in the line.
    """
    data: Dict[str, Any] = {
        "event": event,
        "level": level,
        "service": "pitchside",
        "ts": datetime.now(timezone.utc).isoformat(),
    }
    if payload:
        data.update(payload)
    print(json.dumps(data, ensure_ascii=False, default=str), flush=True)
