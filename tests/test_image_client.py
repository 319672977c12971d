"""HTTP image client tests against a fake requests session."""

from __future__ import annotations

from types import SimpleNamespace

import pytest
import requests

from pitchside.imaging.client import ImageGenerationClient
from pitchside.imaging.errors import ImageGenerationError
from pitchside.imaging.types import AspectRatio, ReferenceImage


class _FakeSession:
    def __init__(self, outcome) -> None:
        self.outcome = outcome
        self.calls: list[dict] = []

    def post(self, url, json=None, timeout=None):
        self.calls.append({"url": url, "json": json, "timeout": timeout})
        if isinstance(self.outcome, BaseException):
            raise self.outcome
        return self.outcome


def _response(status: int, body) -> SimpleNamespace:
    return SimpleNamespace(ok=200 <= status < 300, status_code=status, json=lambda: body)


def test_generate_image_posts_camel_case_payload() -> None:
    session = _FakeSession(
        _response(200, {"imageBase64": "aW1n", "mimeType": "image/jpeg", "provider": "ideogram", "description": ""})
    )
    client = ImageGenerationClient.from_base_url("http://api.test/", session=session, timeout=45.0)

    result = client.generate_image(
        "Full time",
        action="generate_result_graphic",
        club_id="club-1",
        reference_image=ReferenceImage(data_base64="cmVm", mime_type="image/png"),
        aspect_ratio=AspectRatio.LANDSCAPE,
    )

    assert result.image_base64 == "aW1n"
    assert result.mime_type == "image/jpeg"
    assert result.provider == "ideogram"
    assert result.description is None
    call = session.calls[0]
    assert call["url"] == "http://api.test/api/ai-generate-image"
    assert call["timeout"] == 45.0
    assert call["json"] == {
        "prompt": "Full time",
        "action": "generate_result_graphic",
        "aspectRatio": "16:9",
        "clubId": "club-1",
        "referenceImageBase64": "cmVm",
        "referenceMimeType": "image/png",
    }


def test_generate_image_raises_server_error_message() -> None:
    session = _FakeSession(_response(500, {"error": "Image generation failed: imagen down"}))
    client = ImageGenerationClient("http://api.test/api/ai-generate-image", session=session)

    with pytest.raises(ImageGenerationError, match="imagen down") as excinfo:
        client.generate_image("x", action="generate_custom_image")
    assert excinfo.value.status_code == 500


def test_generate_image_without_image_in_body() -> None:
    client = ImageGenerationClient("http://api.test/x", session=_FakeSession(_response(200, {"description": "txt"})))
    with pytest.raises(ImageGenerationError, match="Failed to generate image."):
        client.generate_image("x", action="generate_custom_image")


def test_generate_image_transport_failure() -> None:
    client = ImageGenerationClient("http://api.test/x", session=_FakeSession(requests.ConnectionError("refused")))
    with pytest.raises(ImageGenerationError, match="refused"):
        client.generate_image("x", action="generate_custom_image")
