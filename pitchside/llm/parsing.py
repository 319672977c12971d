"""Helpers for pulling structured data out of free-form model output."""

from __future__ import annotations

import json
import re
from typing import Any

_FENCE_RE = re.compile(r"```(?:json)?\s*(.*?)```", flags=re.DOTALL)


def extract_json(text: str) -> Any:
    """Extract JSON from model output, tolerating markdown fences and surrounding prose.

    Raises:
        ValueError: When no JSON object or array can be decoded.
    """
    candidate = str(text or "").strip()
    blocks = _FENCE_RE.findall(candidate)
    if blocks:
        candidate = blocks[0].strip()

    starts = [i for i in (candidate.find("["), candidate.find("{")) if i != -1]
    if starts:
        candidate = candidate[min(starts):]

    end = max(candidate.rfind("]"), candidate.rfind("}"))
    if end >= 0:
        candidate = candidate[: end + 1]

    return json.loads(candidate)
