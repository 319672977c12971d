"""Runtime settings for the web layer, CLI, and clients."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from pitchside.core.config import (
    DEFAULT_CONFIG_PATH,
    PROJECT_ROOT,
    apply_config_env_overrides,
    build_effective_config,
    load_config,
)
from pitchside.imaging.types import ProviderCredentials
from pitchside.llm.retry import RetryPolicy

DOTENV_PATH = PROJECT_ROOT / ".env"


@dataclass(frozen=True)
class Settings:
    """Resolved configuration.

    Attributes:
        gemini_api_key: Key for Gemini text and Imagen/Gemini image generation.
        ideogram_api_key: Optional key enabling the Ideogram image provider.
        openai_api_key: Key for the OpenAI text provider.
        anthropic_api_key: Key for the Anthropic text provider.
        ai_provider: Default text provider used by the text client.
        text_timeout_seconds: Per-attempt wall-clock budget for text calls.
        text_max_attempts: Total attempts (first try plus retries) for text calls.
        text_base_delay_seconds: Delay before the first retry.
        image_timeout_seconds: Per-provider timeout for image calls.
        api_base_url: Base URL of the Pitchside HTTP API used by the clients.
    """

    gemini_api_key: str = ""
    ideogram_api_key: str = ""
    openai_api_key: str = ""
    anthropic_api_key: str = ""
    ai_provider: str = "gemini"
    text_timeout_seconds: float = 30.0
    text_max_attempts: int = 3
    text_base_delay_seconds: float = 1.0
    image_timeout_seconds: float = 60.0
    api_base_url: str = "http://localhost:8590"
    config_path: Path | None = None

    def retry_policy(self) -> RetryPolicy:
        """Build the text-client retry policy from these settings."""
        return RetryPolicy(
            max_attempts=int(self.text_max_attempts),
            base_delay=float(self.text_base_delay_seconds),
            timeout=float(self.text_timeout_seconds),
        )

    def provider_credentials(self) -> ProviderCredentials:
        """Credentials handed to the image router for one request."""
        return ProviderCredentials.from_mapping(
            {
                "gemini": self.gemini_api_key,
                "ideogram": self.ideogram_api_key,
            }
        )


def load_env(path: Path) -> None:
    """Load environment variables from a .env-style file.

    Existing environment variables win over file values.
    """
    if not path.exists():
        return
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key and key not in os.environ:
            os.environ[key] = value


def settings_from_mapping(effective: Dict[str, Any], *, config_path: Path | None = None) -> Settings:
    """Build ``Settings`` from an effective config dict."""
    return Settings(
        gemini_api_key=str(effective.get("gemini_api_key") or ""),
        ideogram_api_key=str(effective.get("ideogram_api_key") or ""),
        openai_api_key=str(effective.get("openai_api_key") or ""),
        anthropic_api_key=str(effective.get("anthropic_api_key") or ""),
        ai_provider=str(effective.get("ai_provider") or "gemini"),
        text_timeout_seconds=float(effective.get("text_timeout_seconds") or 30.0),
        text_max_attempts=int(effective.get("text_max_attempts") or 3),
        text_base_delay_seconds=float(effective.get("text_base_delay_seconds") or 0.0),
        image_timeout_seconds=float(effective.get("image_timeout_seconds") or 60.0),
        api_base_url=str(effective.get("api_base_url") or "http://localhost:8590"),
        config_path=config_path,
    )


def load_settings(config_path: Path | None = None) -> Settings:
    """Load runtime settings from config file, .env, environment variables, and defaults.

    Args:
        config_path (Path | None): Path to the configuration file.

    Returns:
        Settings: Frozen settings object.
    """
    load_env(DOTENV_PATH)
    cfg_path = config_path or Path(os.getenv("PITCHSIDE_CONFIG", DEFAULT_CONFIG_PATH))
    cfg = load_config(cfg_path)
    apply_config_env_overrides(cfg, os.environ)
    effective = build_effective_config(cfg, os.environ)
    return settings_from_mapping(effective, config_path=cfg_path if cfg_path.exists() else None)
