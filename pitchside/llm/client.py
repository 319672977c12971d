"""Text-generation client with per-attempt timeout, bounded retry, and error taxonomy.

The client posts to the ``/api/ai-generate`` endpoint and always returns a
``TextResult``. UI-facing callers that only want a string use
``result.display_text`` (or ``invoke_ai``), which is the generated text on
success and the fixed user-facing message on failure.
"""

from __future__ import annotations

import time
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeout
from typing import Any, Callable, Dict, List, Optional

import requests

from pitchside.core.logging_utils import log_event
from pitchside.llm.errors import ErrorKind, user_message
from pitchside.llm.retry import FailureClass, RetryPolicy, classify_failure
from pitchside.llm.types import TextErr, TextOk, TextResult

TEXT_ENDPOINT_PATH = "/api/ai-generate"


class _AttemptFailure(Exception):
    """One failed attempt, already classified."""

    def __init__(self, failure: FailureClass, detail: str, status_code: Optional[int] = None) -> None:
        super().__init__(detail)
        self.failure = failure
        self.detail = detail
        self.status_code = status_code


def _error_detail(resp: requests.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return str(resp.text or "").strip()[:500]
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return str(body)[:500]


class TextGenerationClient:
    """Reliable caller for the text-generation endpoint."""

    def __init__(
        self,
        endpoint_url: str,
        *,
        default_provider: str = "gemini",
        default_model: Optional[str] = None,
        policy: Optional[RetryPolicy] = None,
        session: Optional[requests.Session] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.endpoint_url = str(endpoint_url)
        self.default_provider = str(default_provider or "gemini")
        self.default_model = default_model
        self.policy = policy or RetryPolicy()
        self._session = session or requests.Session()
        self._sleep = sleep

    @classmethod
    def from_base_url(cls, base_url: str, **kwargs: Any) -> "TextGenerationClient":
        return cls(str(base_url).rstrip("/") + TEXT_ENDPOINT_PATH, **kwargs)

    def _attempt(self, payload: Dict[str, Any]) -> TextOk:
        """Run one POST under a wall-clock deadline of ``policy.timeout`` seconds.

        ``requests`` timeouts only bound connect and the gap between reads, so
        the call runs on a worker thread and is abandoned when the deadline
        passes. The open response is closed so the worker stops reading.
        """
        timeout = float(self.policy.timeout)
        opened: List[requests.Response] = []
        pool = ThreadPoolExecutor(max_workers=1)
        try:
            future = pool.submit(self._post, payload, opened)
            try:
                return future.result(timeout=timeout)
            except FutureTimeout as exc:
                for resp in opened:
                    resp.close()
                detail = f"attempt exceeded {timeout:g}s"
                raise _AttemptFailure(classify_failure(None, detail, timed_out=True), detail) from exc
        finally:
            pool.shutdown(wait=False)

    def _post(self, payload: Dict[str, Any], opened: List[requests.Response]) -> TextOk:
        try:
            resp = self._session.post(self.endpoint_url, json=payload, timeout=self.policy.timeout, stream=True)
            opened.append(resp)
            # Reads the streamed body; errors mid-body classify like transport errors.
            _ = resp.content
        except requests.Timeout as exc:
            raise _AttemptFailure(classify_failure(None, str(exc), timed_out=True), str(exc)) from exc
        except requests.ConnectionError as exc:
            raise _AttemptFailure(FailureClass(ErrorKind.UNAVAILABLE, True), str(exc)) from exc
        except requests.RequestException as exc:
            raise _AttemptFailure(classify_failure(None, str(exc)), str(exc)) from exc

        if not resp.ok:
            detail = _error_detail(resp)
            raise _AttemptFailure(classify_failure(resp.status_code, detail), detail, resp.status_code)

        try:
            data = resp.json()
        except ValueError as exc:
            raise _AttemptFailure(
                FailureClass(ErrorKind.EMPTY_RESPONSE, False), "response body is not JSON", resp.status_code
            ) from exc
        text = str((data or {}).get("text") or "") if isinstance(data, dict) else ""
        if not text.strip():
            raise _AttemptFailure(
                FailureClass(ErrorKind.EMPTY_RESPONSE, False), "response contained no text", resp.status_code
            )
        return TextOk(
            text=text,
            provider=str(data.get("provider") or payload.get("provider") or ""),
            model=str(data.get("model") or payload.get("model") or ""),
        )

    def generate_text(
        self,
        prompt: str,
        *,
        model: Optional[str] = None,
        provider: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> TextResult:
        """Generate text, retrying transient failures. Never raises.

        Args:
            prompt (str): Prompt forwarded to the provider.
            model (Optional[str]): Model override; the endpoint picks a per-provider default.
            provider (Optional[str]): Provider override; defaults to ``default_provider``.
            metadata (Optional[Dict[str, Any]]): Extra body fields such as ``clubId`` and ``action``.

        Returns:
            TextResult: ``TextOk`` with the generated text or ``TextErr`` with the classified failure.
        """
        payload: Dict[str, Any] = dict(metadata or {})
        payload.update(
            {
                "prompt": prompt,
                "provider": provider or self.default_provider,
            }
        )
        chosen_model = model or self.default_model
        if chosen_model:
            payload["model"] = chosen_model

        max_attempts = max(1, int(self.policy.max_attempts))
        attempt = 0
        while True:
            attempt += 1
            if attempt > 1:
                self._sleep(self.policy.delay_before_retry(attempt - 1))
            try:
                ok = self._attempt(payload)
            except _AttemptFailure as failure:
                will_retry = failure.failure.retryable and attempt < max_attempts
                log_event(
                    "text_generation_attempt",
                    {
                        "attempt": attempt,
                        "provider": payload["provider"],
                        "action": payload.get("action"),
                        "status_code": failure.status_code,
                        "error_kind": failure.failure.kind.value,
                        "classification": "retryable" if failure.failure.retryable else "terminal",
                        "will_retry": will_retry,
                        "detail": failure.detail[:300],
                    },
                    level="warning",
                )
                if will_retry:
                    continue
                kind = failure.failure.kind
                return TextErr(
                    kind=kind,
                    message=user_message(kind),
                    detail=failure.detail,
                    status_code=failure.status_code,
                    attempts=attempt,
                )
            log_event(
                "text_generation_attempt",
                {"attempt": attempt, "provider": ok.provider, "model": ok.model, "outcome": "success"},
            )
            return TextOk(text=ok.text, provider=ok.provider, model=ok.model, attempts=attempt)

    def invoke_ai(
        self,
        prompt: str,
        *,
        action: str,
        club_id: Optional[str] = None,
        model: Optional[str] = None,
    ) -> str:
        """Generate text for UI code: the text on success, the user-facing message otherwise."""
        metadata: Dict[str, Any] = {"action": action}
        if club_id:
            metadata["clubId"] = club_id
        return self.generate_text(prompt, model=model, metadata=metadata).display_text
