"""Application configuration."""

import os

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    photos_api_base_url: str
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @field_validator("photos_api_base_url")
    @classmethod
    def _normalize_photos_api_base_url(cls, value: str) -> str:
        return normalize_base_url(value)


def normalize_base_url(raw: str) -> str:
    """Strip whitespace and trailing slashes from a base URL."""
    cleaned = raw.strip().rstrip("/")
    if not cleaned:
        raise ValueError("base URL must not be empty")
    return cleaned
