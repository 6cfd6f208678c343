"""Application-wide configuration loaded from the environment."""

from __future__ import annotations

from functools import cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class BackendSettings(BaseSettings):
    """Centralized settings for the Roster backend service."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_prefix: str = "/api"
    app_version: str = "1.0.0"
    cors_origins: list[str] = ["http://localhost:3000"]
    log_level: str = "INFO"
    seed_demo_users: bool = True


@cache
def get_settings() -> BackendSettings:
    """Return the cached settings instance."""

    return BackendSettings()


settings = get_settings()

__all__ = ["BackendSettings", "get_settings", "settings"]
