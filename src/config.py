# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Application configuration loaded from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Runtime settings, overridable through the environment or a .env file."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "Fibreus Portal Access"
    log_level: LogLevel = "INFO"
    # JSON list in the environment, e.g. CORS_ORIGINS='["https://portal.example"]'
    cors_origins: list[str] = ["http://localhost:5173"]

    # Visitor session deduplication
    visitor_tracking_enabled: bool = True
    visitor_cache_size: int = Field(default=10_000, gt=0)
    visitor_cache_ttl_seconds: int = Field(default=3600, gt=0)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept log level names in any case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v


@lru_cache
def get_settings() -> Settings:
    """Get the process-wide settings instance."""
    return Settings()
