"""Runtime configuration helpers for the meetings backend."""

from __future__ import annotations

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Empty defaults let the app boot; calls fail with ConfigError until set.
    API_KEY: str = ""
    API_SECRET: str = ""
    API_BASE_URL: str = ""
    API_TIMEOUT_SECONDS: float = 30.0
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


_settings: Optional[Settings] = None


def set_settings(settings: Settings) -> None:
    """Set the singleton settings instance used across the application."""

    global _settings
    _settings = settings


def get_settings() -> Settings:
    """Return the active settings instance, loading it from the environment if needed."""

    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


__all__ = ["Settings", "get_settings", "set_settings"]
