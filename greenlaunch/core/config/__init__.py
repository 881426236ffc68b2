# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Configuration package for GreenLaunch.

This package provides centralized configuration management:
- Settings: Pydantic-based settings loaded from environment variables
- YAML loader: Utilities for loading the reference catalog data files

Example:
    >>> from greenlaunch.core.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.environment)
    'development'
"""

from greenlaunch.core.config.settings import (
    CatalogSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from greenlaunch.core.config.yaml_loader import (
    YAMLLoadError,
    deep_merge,
    load_yaml,
)

__all__ = [
    # Settings
    "Settings",
    "CatalogSettings",
    "get_settings",
    "clear_settings_cache",
    # YAML utilities
    "load_yaml",
    "deep_merge",
    "YAMLLoadError",
]
