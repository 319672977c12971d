"""Configuration loader for Pitchside. Merges an optional TOML file with environment variables."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Mapping

try:
    import tomllib
except ImportError:  # pragma: no cover - fallback for older Python
    import tomli as tomllib  # type: ignore


PROJECT_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "config.toml"

# Config keys that are pushed into the environment when not already set there.
ENV_CONFIG_MAP = {
    "GEMINI_API_KEY": "gemini_api_key",
    "IDEOGRAM_API_KEY": "ideogram_api_key",
    "OPENAI_API_KEY": "openai_api_key",
    "ANTHROPIC_API_KEY": "anthropic_api_key",
    "AI_PROVIDER": "ai_provider",
}


def load_config(path: Path | None) -> Dict[str, Any]:
    """Load a TOML config file and return the pitchside section or top-level dict."""
    if not path or not path.exists():
        return {}
    data = tomllib.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict) and "pitchside" in data and isinstance(data["pitchside"], dict):
        return data["pitchside"]
    return data or {}


def _env_or_config(env: Mapping[str, str], config: Mapping[str, Any], env_key: str, config_key: str, default: Any) -> Any:
    if env_key in env and env[env_key] != "":
        return env[env_key]
    if config_key in config:
        return config[config_key]
    return default


def _coerce_int(value: Any, default: int) -> int:
    try:
        return int(value)
    except Exception:
        return default


def _coerce_float(value: Any, default: float) -> float:
    try:
        return float(value)
    except Exception:
        return default


def _coerce_str(value: Any) -> str:
    return str(value or "").strip()


def build_effective_config(config: Mapping[str, Any], env: Mapping[str, str]) -> Dict[str, Any]:
    """Build the effective config with env overrides applied."""
    max_attempts = _coerce_int(_env_or_config(env, config, "AI_TEXT_MAX_ATTEMPTS", "text_max_attempts", 3), 3)
    return {
        "gemini_api_key": _coerce_str(_env_or_config(env, config, "GEMINI_API_KEY", "gemini_api_key", "")),
        "ideogram_api_key": _coerce_str(_env_or_config(env, config, "IDEOGRAM_API_KEY", "ideogram_api_key", "")),
        "openai_api_key": _coerce_str(_env_or_config(env, config, "OPENAI_API_KEY", "openai_api_key", "")),
        "anthropic_api_key": _coerce_str(_env_or_config(env, config, "ANTHROPIC_API_KEY", "anthropic_api_key", "")),
        "ai_provider": _coerce_str(_env_or_config(env, config, "AI_PROVIDER", "ai_provider", "gemini")).lower()
        or "gemini",
        "text_timeout_seconds": _coerce_float(
            _env_or_config(env, config, "AI_TEXT_TIMEOUT_SECONDS", "text_timeout_seconds", 30.0), 30.0
        ),
        "text_max_attempts": max(1, max_attempts),
        "text_base_delay_seconds": _coerce_float(
            _env_or_config(env, config, "AI_TEXT_BASE_DELAY_SECONDS", "text_base_delay_seconds", 1.0), 1.0
        ),
        "image_timeout_seconds": _coerce_float(
            _env_or_config(env, config, "AI_IMAGE_TIMEOUT_SECONDS", "image_timeout_seconds", 60.0), 60.0
        ),
        "api_base_url": _coerce_str(
            _env_or_config(env, config, "PITCHSIDE_API_BASE_URL", "api_base_url", "http://localhost:8590")
        ).rstrip("/"),
    }


def apply_config_env_overrides(config: Mapping[str, Any], env: Mapping[str, str]) -> None:
    """Populate API-key env vars from config when not already set."""
    for env_key, config_key in ENV_CONFIG_MAP.items():
        if env_key in env and env[env_key] != "":
            continue
        value_str = _coerce_str(config.get(config_key))
        if value_str == "":
            continue
        os.environ[env_key] = value_str
