"""
PhishGuard Application Configuration

Configuration management using pydantic-settings.
All configuration values are loaded from environment variables.
"""

from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from phishguard.utils.constants import (
    APP_NAME,
    APP_VERSION,
    THREAT_DB_MAX_AGE_SECONDS,
    THREAT_FEED_REFRESH_INTERVAL_SECONDS,
)


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Values can be set via:
    1. Environment variables
    2. .env file (local development)
    3. Default values defined here

    Scoring thresholds are fixed constants, not settings.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # =========================================================================
    # Application
    # =========================================================================
    app_name: str = APP_NAME
    app_version: str = APP_VERSION
    debug: bool = False
    log_level: str = "INFO"

    # =========================================================================
    # Server
    # =========================================================================
    host: str = "0.0.0.0"
    port: int = Field(default=8000, description="HTTP port")
    cors_origins: List[str] = ["http://localhost:3000", "http://localhost:5173"]

    # =========================================================================
    # Threat Database
    # =========================================================================
    threat_db_max_age_seconds: int = Field(
        default=THREAT_DB_MAX_AGE_SECONDS,
        description="Snapshot age after which analysis refreshes it first",
    )
    threat_feed_refresh_interval_seconds: int = Field(
        default=THREAT_FEED_REFRESH_INTERVAL_SECONDS,
        description="Background refresh period",
    )
    threat_feed_path: Optional[str] = Field(
        default=None,
        description="JSON threat feed file; built-in database when unset",
    )

    # =========================================================================
    # Domain Lists (seed values)
    # =========================================================================
    whitelisted_domains: List[str] = Field(default_factory=list)
    custom_blacklist: List[str] = Field(default_factory=list)

    # =========================================================================
    # Navigation Behaviour
    # =========================================================================
    block_suspicious: bool = False
    show_warnings: bool = True

    # =========================================================================
    # Activity Records
    # =========================================================================
    statistics_enabled: bool = Field(
        default=True,
        description="Keep a history of analyzed URLs",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are cached to avoid re-reading environment on every access.
    Use get_settings.cache_clear() to reload settings.
    """
    return Settings()
