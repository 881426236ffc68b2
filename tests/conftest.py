# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Pytest configuration and shared fixtures.

This module provides fixtures used across the unit tests:
- Reference catalog fixtures (packaged seed data)
- Cache isolation for settings and the process-wide catalog
"""

import copy
from collections.abc import Generator
from typing import Any

import pytest
import structlog

from greenlaunch.core.config import clear_settings_cache, load_yaml
from greenlaunch.domains.emissions.catalog import (
    DEFAULT_CATALOG_PATH,
    ReferenceCatalog,
    clear_catalog_cache,
    load_catalog,
)


# =============================================================================
# Marker Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )


# =============================================================================
# Cache Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_caches(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Reset cached settings, catalog and logging config around every test.

    Also removes a catalog override from the developer's environment so
    tests always start from the packaged seed data.
    """
    monkeypatch.delenv("GREENLAUNCH_CATALOG_PATH", raising=False)
    clear_settings_cache()
    clear_catalog_cache()
    yield
    clear_settings_cache()
    clear_catalog_cache()
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()


# =============================================================================
# Catalog Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def seed_catalog_data() -> dict[str, Any]:
    """Provide the raw packaged catalog data."""
    return load_yaml(DEFAULT_CATALOG_PATH)


@pytest.fixture
def catalog_data(seed_catalog_data: dict[str, Any]) -> dict[str, Any]:
    """Provide a mutable copy of the packaged catalog data."""
    return copy.deepcopy(seed_catalog_data)


@pytest.fixture(scope="session")
def catalog() -> ReferenceCatalog:
    """Provide the packaged seed catalog."""
    return load_catalog()
