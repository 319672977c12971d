"""Configuration merge and settings tests."""

from __future__ import annotations

from pathlib import Path

from pitchside.core import settings as settings_module
from pitchside.core.config import build_effective_config, load_config
from pitchside.core.settings import Settings, load_settings

_ENV_KEYS = [
    "GEMINI_API_KEY",
    "IDEOGRAM_API_KEY",
    "OPENAI_API_KEY",
    "ANTHROPIC_API_KEY",
    "AI_PROVIDER",
    "AI_TEXT_TIMEOUT_SECONDS",
    "AI_TEXT_MAX_ATTEMPTS",
    "AI_TEXT_BASE_DELAY_SECONDS",
    "AI_IMAGE_TIMEOUT_SECONDS",
    "PITCHSIDE_API_BASE_URL",
    "PITCHSIDE_CONFIG",
]


def _clear_env(monkeypatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_effective_config_defaults() -> None:
    eff = build_effective_config({}, {})
    assert eff["ai_provider"] == "gemini"
    assert eff["text_timeout_seconds"] == 30.0
    assert eff["text_max_attempts"] == 3
    assert eff["text_base_delay_seconds"] == 1.0
    assert eff["image_timeout_seconds"] == 60.0
    assert eff["api_base_url"] == "http://localhost:8590"
    assert eff["gemini_api_key"] == ""


def test_env_wins_over_config_and_bad_values_fall_back() -> None:
    config = {"ai_provider": "openai", "text_max_attempts": 5, "text_timeout_seconds": 12}
    env = {"AI_PROVIDER": "Anthropic", "AI_TEXT_MAX_ATTEMPTS": "0", "AI_TEXT_TIMEOUT_SECONDS": "soon"}
    eff = build_effective_config(config, env)
    assert eff["ai_provider"] == "anthropic"
    assert eff["text_max_attempts"] == 1
    assert eff["text_timeout_seconds"] == 30.0


def test_load_config_reads_pitchside_section(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text('[pitchside]\nai_provider = "openai"\ntext_max_attempts = 4\n', encoding="utf-8")
    assert load_config(path) == {"ai_provider": "openai", "text_max_attempts": 4}
    assert load_config(tmp_path / "missing.toml") == {}


def test_load_settings_merges_file_dotenv_and_env(tmp_path: Path, monkeypatch) -> None:
    _clear_env(monkeypatch)
    cfg = tmp_path / "config.toml"
    cfg.write_text(
        '[pitchside]\ngemini_api_key = "from-config"\ntext_base_delay_seconds = 0.25\n',
        encoding="utf-8",
    )
    dotenv = tmp_path / ".env"
    dotenv.write_text("IDEOGRAM_API_KEY='from-dotenv'\n# comment\n", encoding="utf-8")
    monkeypatch.setattr(settings_module, "DOTENV_PATH", dotenv)
    monkeypatch.setenv("AI_TEXT_MAX_ATTEMPTS", "2")

    settings = load_settings(cfg)

    assert settings.gemini_api_key == "from-config"
    assert settings.ideogram_api_key == "from-dotenv"
    assert settings.text_max_attempts == 2
    assert settings.config_path == cfg
    policy = settings.retry_policy()
    assert policy.max_attempts == 2
    assert policy.base_delay == 0.25
    assert policy.timeout == 30.0


def test_provider_credentials_drop_blank_keys() -> None:
    creds = Settings(gemini_api_key="g-key", ideogram_api_key=" ").provider_credentials()
    assert creds.get("gemini") == "g-key"
    assert creds.get("ideogram") is None
    assert "ideogram" not in creds.keys
