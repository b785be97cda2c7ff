"""Application configuration utilities."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingConfig(BaseModel):
    level: str = Field(default="WARNING", description="Root logger level")
    json_logs: bool = Field(default=False, description="Enable JSON formatted logs")


class Settings(BaseSettings):
    """Rendering defaults loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="QRICON_",
        env_file=(Path(__file__).resolve().parent.parent / ".env"),
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    canvas_size: int = Field(default=400, ge=1, description="Target canvas side before module snapping")
    icon_ratio: int = Field(default=5, ge=1, description="Canvas side divided by this gives the icon bound")
    safe_margin: int = Field(
        default=5,
        ge=0,
        validation_alias=AliasChoices("QRICON_SAFE_MARGIN", "QRICON_MARGIN"),
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return memoized application settings."""

    return Settings()


settings = get_settings()
