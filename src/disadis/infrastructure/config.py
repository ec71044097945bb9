"""Application configuration, loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from disadis.domain.value_objects import FedoraBaseUrl


class Settings(BaseSettings):
    """Central configuration loaded from env vars (or ``.env`` file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    fedora_url: str = "http://localhost:8983/fedora/"
    fedora_namespace: str = ""
    fedora_timeout: float | None = None  # seconds; None waits forever
    log_level: str = "INFO"
    log_file: str | None = None
    host: str = "0.0.0.0"
    port: int = 8080

    @field_validator("fedora_url")
    @classmethod
    def _valid_fedora_url(cls, v: str) -> str:
        return str(FedoraBaseUrl.from_string(v))


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the singleton application settings (cached after first call)."""
    return Settings()
