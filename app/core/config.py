"""
Application configuration for the Pagination Links Service.

Settings are read from the environment (and an optional ``.env`` file).
Nested groups use ``__`` as the delimiter, e.g. ``PAGINATION__MAX_DISTANCE=20``.
"""

from functools import lru_cache
from typing import List

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.constants import (
    DEFAULT_DISTANCE,
    DEFAULT_ELLIPSIS_LABEL,
    DEFAULT_NEXT_LABEL,
    DEFAULT_PREVIOUS_LABEL,
)


class AppServerSettings(BaseModel):
    """Uvicorn server settings."""
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False


class CorsSettings(BaseModel):
    """CORS middleware settings."""
    enabled: bool = True
    allowed_origins: List[str] = ["*"]
    allow_credentials: bool = False
    allowed_methods: List[str] = ["GET", "OPTIONS"]
    allowed_headers: List[str] = ["*"]


class PaginationSettings(BaseModel):
    """Default link options and limits applied to API callers."""
    default_distance: int = Field(default=DEFAULT_DISTANCE, ge=1)
    # Callers choose the distance, so cap the window they can ask for
    max_distance: int = Field(default=50, ge=1)
    next_label: str = DEFAULT_NEXT_LABEL
    previous_label: str = DEFAULT_PREVIOUS_LABEL
    ellipsis_label: str = DEFAULT_ELLIPSIS_LABEL

    @model_validator(mode="after")
    def check_default_within_max(self) -> "PaginationSettings":
        if self.default_distance > self.max_distance:
            raise ValueError("default_distance must not exceed max_distance")
        return self


class Settings(BaseSettings):
    """Service settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "Pagination Links Service"
    app_version: str = "1.0.0"
    environment: str = "development"
    log_level: str = "INFO"
    log_format: str = "json"

    app: AppServerSettings = AppServerSettings()
    cors: CorsSettings = CorsSettings()
    pagination: PaginationSettings = PaginationSettings()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        fmt = v.lower()
        if fmt not in {"json", "console"}:
            raise ValueError("log_format must be 'json' or 'console'")
        return fmt


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
