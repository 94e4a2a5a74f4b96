"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Generation service settings loaded from environment variables."""

    supabase_url: str
    supabase_anon_key: str
    openai_api_key: str | None = None
    openai_model: str = "gpt-4o-mini"
    openai_temperature: float = 0.7
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


class ClientSettings(BaseSettings):
    """Settings for the recipe request client."""

    api_base_url: str = "http://localhost:8000"
    request_timeout: float = 60.0

    model_config = SettingsConfigDict(
        env_prefix="SMART_PANTRY_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def has_credential(raw: str | None) -> bool:
    """Return true when a credential value is present and non-blank."""
    return raw is not None and raw.strip() != ""
