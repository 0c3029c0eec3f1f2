"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    openai_api_key: str
    openai_image_model: str = "gpt-image-1"
    openai_timeout_seconds: float = 120.0
    provider_transport_retries: int = 1
    share_base_url: str = "http://localhost:8000"
    share_table: str = "shares"
    share_max_payload_bytes: int = 10 * 1024 * 1024
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def normalize_base_url(raw: str) -> str:
    """Strip whitespace and trailing slashes from a public base URL."""
    cleaned = raw.strip()
    while cleaned.endswith("/"):
        cleaned = cleaned[:-1]
    return cleaned
