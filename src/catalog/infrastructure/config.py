"""Application configuration using Pydantic Settings."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Settings loaded from ``CATALOG_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="CATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    collection_name: str = Field(
        default="products",
        description="Store collection holding the product records",
    )
    store_backend: Literal["json", "memory"] = Field(
        default="json",
        description="Store implementation: json (file) or memory",
    )
    data_file: Path = Field(
        default=Path("data") / "catalog.json",
        description="Location of the JSON store document",
    )
    log_level: str = Field(default="WARNING", description="Logging level")

    @field_validator("collection_name")
    @classmethod
    def validate_collection_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Collection name cannot be empty")
        return v.strip()

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"Unknown log level '{v}', expected one of {', '.join(LOG_LEVELS)}"
            )
        return level


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
