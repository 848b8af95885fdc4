"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    openai_api_key: str | None = None
    openai_model: str = "gpt-5.2"
    openai_reasoning_effort: str | None = "low"
    openai_store: bool = False
    advisory_timeout_seconds: float = 10.0
    advisory_history_turns: int = 6
    conversation_log_limit: int = 50
    session_max_idle_seconds: int = 6 * 60 * 60
    session_sweep_interval_seconds: int = 6 * 60 * 60
    renderer_base_url: str = "http://localhost:8081"
    downloads_dir: str = "downloads"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def advisory_enabled(settings: Settings) -> bool:
    """Return whether an advisory model is configured."""
    return bool(settings.openai_api_key and settings.openai_api_key.strip())
