"""Retry policy and failure classification for text-generation calls."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pitchside.llm.errors import ErrorKind

AUTH_STATUSES = frozenset({401, 403})
UNAVAILABLE_STATUSES = frozenset({500, 502, 503})


@dataclass(frozen=True)
class RetryPolicy:
    """Bounded retry with exponential backoff.

    ``max_attempts`` counts the first try, so the default allows two retries.
    """

    max_attempts: int = 3
    base_delay: float = 1.0
    backoff_multiplier: float = 2.0
    timeout: float = 30.0

    def delay_before_retry(self, retry_number: int) -> float:
        """Seconds to wait before retry ``retry_number`` (1-based)."""
        if retry_number < 1:
            return 0.0
        return float(self.base_delay) * float(self.backoff_multiplier) ** (retry_number - 1)


@dataclass(frozen=True)
class FailureClass:
    """Outcome of classifying one failed attempt."""

    kind: ErrorKind
    retryable: bool


def classify_failure(status_code: Optional[int], detail: str = "", *, timed_out: bool = False) -> FailureClass:
    """Classify one failed attempt.

    Status codes are checked before the error text. Timeouts, 429 and 5xx are
    retryable; auth failures and other 4xx abort immediately.
    """
    if timed_out or status_code == 504:
        return FailureClass(ErrorKind.TIMEOUT, True)
    if status_code in AUTH_STATUSES:
        return FailureClass(ErrorKind.AUTH, False)
    if status_code == 429:
        return FailureClass(ErrorKind.RATE_LIMIT, True)
    if status_code in UNAVAILABLE_STATUSES:
        return FailureClass(ErrorKind.UNAVAILABLE, True)
    if status_code == 400:
        return FailureClass(ErrorKind.INVALID_REQUEST, False)

    server_side = status_code is not None and status_code >= 500
    text = str(detail or "").lower()
    if "quota" in text:
        return FailureClass(ErrorKind.QUOTA, False)
    if "invalid" in text:
        return FailureClass(ErrorKind.INVALID_REQUEST, False)
    if server_side:
        return FailureClass(ErrorKind.UNAVAILABLE, True)
    return FailureClass(ErrorKind.UNKNOWN, False)
