"""CLI tests for routing inspection, generation commands, and web launch options."""

from __future__ import annotations

import base64
import json

from pitchside.cli import entrypoints
from pitchside.core.settings import Settings
from pitchside.imaging.errors import ImageGenerationError
from pitchside.imaging.types import GenerationResult
from pitchside.llm.errors import ErrorKind
from pitchside.llm.types import TextErr, TextOk


def test_routes_prints_table(capsys) -> None:
    args = entrypoints.build_parser().parse_args(["routes"])
    assert args.func(args) == 0
    table = json.loads(capsys.readouterr().out)
    assert table["generate_result_graphic"] == ["ideogram", "imagen", "gemini"]
    assert table["generate_custom_image"] == ["imagen", "gemini"]


def test_routes_single_action(capsys) -> None:
    args = entrypoints.build_parser().parse_args(["routes", "--action", "generate_announcement:signing"])
    assert args.func(args) == 0
    assert capsys.readouterr().out.strip() == "imagen"


class _FakeTextClient:
    result = TextOk(text="Up the Gulls", provider="gemini", model="gemini-2.0-flash")
    created: list[dict] = []
    calls: list[dict] = []

    @classmethod
    def from_base_url(cls, base_url, **kwargs):
        cls.created.append({"base_url": base_url, **kwargs})
        return cls()

    def generate_text(self, prompt, *, model=None, provider=None, metadata=None):
        self.calls.append({"prompt": prompt, "model": model, "provider": provider, "metadata": metadata})
        return self.result


def test_generate_text_prints_result(monkeypatch, capsys) -> None:
    monkeypatch.setattr(entrypoints, "load_settings", lambda path=None: Settings(ai_provider="openai"))
    monkeypatch.setattr(entrypoints, "TextGenerationClient", _FakeTextClient)
    _FakeTextClient.created.clear()
    _FakeTextClient.calls.clear()

    args = entrypoints.build_parser().parse_args(["generate-text", "Write a preview", "--club-id", "club-1"])
    assert args.func(args) == 0

    assert capsys.readouterr().out.strip() == "Up the Gulls"
    assert _FakeTextClient.created[0]["base_url"] == "http://localhost:8590"
    assert _FakeTextClient.created[0]["default_provider"] == "openai"
    assert _FakeTextClient.calls[0]["metadata"] == {"action": "cli_generate_text", "clubId": "club-1"}


def test_generate_text_failure_exit_code(monkeypatch, capsys) -> None:
    class _Failing(_FakeTextClient):
        result = TextErr(kind=ErrorKind.RATE_LIMIT, message="Rate limit reached.", attempts=3)

    monkeypatch.setattr(entrypoints, "load_settings", lambda path=None: Settings())
    monkeypatch.setattr(entrypoints, "TextGenerationClient", _Failing)

    args = entrypoints.build_parser().parse_args(["generate-text", "x"])
    assert args.func(args) == 1
    assert "rate_limit" in capsys.readouterr().err


def test_generate_image_writes_file(monkeypatch, tmp_path, capsys) -> None:
    class _FakeImageClient:
        @classmethod
        def from_base_url(cls, base_url, **kwargs):
            return cls()

        def generate_image(self, prompt, **kwargs):
            return GenerationResult(
                image_base64=base64.b64encode(b"png-bytes").decode("ascii"),
                mime_type="image/png",
                provider="imagen",
            )

    monkeypatch.setattr(entrypoints, "load_settings", lambda path=None: Settings())
    monkeypatch.setattr(entrypoints, "ImageGenerationClient", _FakeImageClient)
    out_path = tmp_path / "out" / "poster.png"

    args = entrypoints.build_parser().parse_args(["generate-image", "Poster", "--out", str(out_path)])
    assert args.func(args) == 0

    assert out_path.read_bytes() == b"png-bytes"
    assert json.loads(capsys.readouterr().out)["provider"] == "imagen"


def test_generate_image_failure(monkeypatch, capsys) -> None:
    class _FailingImageClient:
        @classmethod
        def from_base_url(cls, base_url, **kwargs):
            return cls()

        def generate_image(self, prompt, **kwargs):
            raise ImageGenerationError("Image generation failed: all down", status_code=500)

    monkeypatch.setattr(entrypoints, "load_settings", lambda path=None: Settings())
    monkeypatch.setattr(entrypoints, "ImageGenerationClient", _FailingImageClient)

    args = entrypoints.build_parser().parse_args(["generate-image", "Poster"])
    assert args.func(args) == 1
    assert "all down" in capsys.readouterr().err


def test_cmd_web_passes_flags_to_gunicorn(monkeypatch) -> None:
    captured: dict = {}

    def _fake_call(cmd):
        captured["cmd"] = cmd
        return 0

    monkeypatch.setattr(entrypoints.subprocess, "call", _fake_call)
    args = entrypoints.build_parser().parse_args(
        ["web", "--gunicorn", "--port", "9000", "--workers", "3", "--timeout", "120"]
    )
    assert entrypoints.cmd_web(args) == 0

    cmd = captured["cmd"]
    assert cmd[1:3] == ["-m", "gunicorn"]
    assert cmd[cmd.index("--workers") + 1] == "3"
    assert cmd[cmd.index("--timeout") + 1] == "120"
    assert cmd[cmd.index("--bind") + 1] == "0.0.0.0:9000"
    assert cmd[-1] == "pitchside.web.app:create_app()"
