# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Application configuration settings using Pydantic Settings.

This module provides centralized configuration management for GreenLaunch.
Settings are loaded from environment variables with sensible defaults.

The Settings class is the main entry point and aggregates all subsettings.
A singleton instance is provided via get_settings() for dependency injection.

Example:
    >>> from greenlaunch.core.config.settings import get_settings
    >>> settings = get_settings()
    >>> print(settings.environment)
    'development'
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal, Self

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CatalogSettings(BaseSettings):
    """Reference catalog configuration.

    The packaged seed catalog (rockets, destinations, launch sites) is always
    loaded. When a path is configured, that file is merged on top of the seed
    so deployments can add or adjust entries without code changes.

    Attributes:
        path: Optional YAML file overriding the packaged seed catalog.
    """

    model_config = SettingsConfigDict(
        env_prefix="GREENLAUNCH_CATALOG_",
        extra="ignore",
    )

    path: Path | None = None

    @model_validator(mode="after")
    def validate_path(self) -> Self:
        """Reject a configured catalog path that is not an existing file.

        Raises:
            ValueError: If the path is set but does not point to a file.
        """
        if self.path is not None and not self.path.is_file():
            raise ValueError(
                f"Catalog override '{self.path}' does not exist or is not a file. "
                "Unset GREENLAUNCH_CATALOG_PATH to use the packaged catalog."
            )
        return self


class Settings(BaseSettings):
    """Main application settings aggregating all subsettings.

    Use get_settings() to obtain a cached singleton instance.

    Attributes:
        environment: Current environment (development, staging, production).
        debug: Enable debug mode.
        log_level: Logging level.
        catalog: Reference catalog settings.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = True
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "DEBUG"

    catalog: CatalogSettings = Field(default_factory=CatalogSettings)

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    Call clear_settings_cache() if you need to reload settings.

    Returns:
        Cached Settings instance.
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache.

    Call this if you need to reload settings from environment.
    Useful for testing or dynamic configuration updates.
    """
    get_settings.cache_clear()
