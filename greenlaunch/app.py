# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Application bootstrap.

Loads settings, configures logging and loads the reference catalog once,
then hands out the EmissionService that transport layers call into.

Example:
    >>> from greenlaunch.app import init_app
    >>> service = init_app()
    >>> service.assess("falcon9", "moon", "timmins").risk.overall.label
    <RiskLabel.MEDIUM: 'Medium'>
"""

import logging
from functools import lru_cache

from greenlaunch.core.config import Settings, get_settings
from greenlaunch.domains.emissions import EmissionService, load_catalog
from greenlaunch.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def init_app(settings: Settings | None = None) -> EmissionService:
    """Initialize logging and the reference catalog.

    Args:
        settings: Settings to use. Defaults to get_settings().

    Returns:
        An EmissionService bound to the freshly loaded catalog.

    Raises:
        CatalogLoadError: If the reference catalog cannot be loaded.
    """
    settings = settings or get_settings()
    setup_logging(settings)

    logger.info(
        "Starting GreenLaunch emissions service (environment=%s, debug=%s)",
        settings.environment,
        settings.debug,
    )

    catalog = load_catalog(override_path=settings.catalog.path)
    return EmissionService(catalog)


@lru_cache(maxsize=1)
def get_emission_service() -> EmissionService:
    """Get the process-wide emission service, initializing it on first use.

    Returns:
        Cached EmissionService instance.
    """
    return init_app()
