"""
Configuration management for asset schema validation.
Uses pydantic-settings for environment-based configuration.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Validation settings loaded from ASSET_SCHEMAS_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ASSET_SCHEMAS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Reject standard wearables that carry a content mapping
    REJECT_STANDARD_CONTENT: bool = False

    # Logging
    LOG_REJECTIONS: bool = True

    # Cap on rejection reasons gathered for a single value
    MAX_REPORTED_ERRORS: int = Field(default=20, ge=1)


@lru_cache
def get_settings() -> Settings:
    """
    Get cached validation settings.
    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
