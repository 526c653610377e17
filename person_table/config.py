"""
Configuration settings for the person table application.

Uses Pydantic Settings to load environment variables for logging, the
reference date used by validation and age classification, and registry
defaults.
"""
from __future__ import annotations

from datetime import date
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Clock; unset means the system date
    reference_date: Optional[date] = Field(None, alias="REFERENCE_DATE")

    # Registry defaults
    registry_start_id: int = Field(1, alias="REGISTRY_START_ID")
    seed_on_start: bool = Field(True, alias="SEED_ON_START")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
        env_ignore_empty=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
