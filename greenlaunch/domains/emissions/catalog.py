# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Reference catalogs of rockets, destinations and launch sites.

This module provides:
- ReferenceCatalog: Read-only lookup of reference records by identifier
- load_catalog: Build a catalog from the packaged YAML seed plus overrides
- get_default_catalog: Process-wide catalog, loaded once on first use

The catalog is immutable once built. Extending it means adding entries to
a catalog file, never changing calculator code.

Usage:
    from greenlaunch.domains.emissions.catalog import get_default_catalog

    catalog = get_default_catalog()
    rocket = catalog.get_rocket("falcon9")
    site = catalog.find_launch_site("kapuskasing")  # None if unknown
"""

import logging
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from greenlaunch.core.config import YAMLLoadError, deep_merge, get_settings, load_yaml
from greenlaunch.domains.emissions.errors import CatalogLoadError, UnsupportedReferenceError
from greenlaunch.domains.emissions.models import (
    DestinationFactor,
    LaunchSiteFactor,
    RocketProfile,
)

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parents[2] / "data" / "reference_catalog.yaml"

_ModelT = TypeVar("_ModelT", bound=BaseModel)


def _parse_section(
    data: Mapping[str, Any],
    section: str,
    model: type[_ModelT],
    source: str,
) -> dict[str, _ModelT]:
    raw = data.get(section)
    if not isinstance(raw, Mapping) or not raw:
        raise CatalogLoadError(f"section '{section}' must be a non-empty mapping", source)

    records: dict[str, _ModelT] = {}
    for identifier, fields in raw.items():
        try:
            records[str(identifier)] = model.model_validate(fields)
        except ValidationError as e:
            raise CatalogLoadError(f"{section}.{identifier}: {e}", source) from e
    return records


class ReferenceCatalog:
    """Read-only catalogs of rocket, destination and launch site records.

    Lookups come in two flavours: get_*() raises UnsupportedReferenceError
    with the valid identifiers, find_*() returns None.

    Attributes:
        rockets: Rocket profiles keyed by identifier.
        destinations: Destination factors keyed by identifier.
        launch_sites: Launch site factors keyed by identifier.
    """

    def __init__(
        self,
        rockets: Mapping[str, RocketProfile],
        destinations: Mapping[str, DestinationFactor],
        launch_sites: Mapping[str, LaunchSiteFactor],
    ) -> None:
        self._rockets = MappingProxyType(dict(rockets))
        self._destinations = MappingProxyType(dict(destinations))
        self._launch_sites = MappingProxyType(dict(launch_sites))

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, Any],
        source: str = "<mapping>",
    ) -> "ReferenceCatalog":
        """Validate raw catalog data and build a catalog.

        Args:
            data: Mapping with "rockets", "destinations" and "launch_sites".
            source: Where the data came from, used in error messages.

        Returns:
            A new ReferenceCatalog.

        Raises:
            CatalogLoadError: If a section is missing or a record is invalid.
        """
        return cls(
            rockets=_parse_section(data, "rockets", RocketProfile, source),
            destinations=_parse_section(data, "destinations", DestinationFactor, source),
            launch_sites=_parse_section(data, "launch_sites", LaunchSiteFactor, source),
        )

    @property
    def rockets(self) -> Mapping[str, RocketProfile]:
        return self._rockets

    @property
    def destinations(self) -> Mapping[str, DestinationFactor]:
        return self._destinations

    @property
    def launch_sites(self) -> Mapping[str, LaunchSiteFactor]:
        return self._launch_sites

    def get_rocket(self, rocket_id: str) -> RocketProfile:
        """Get a rocket profile by identifier.

        Raises:
            UnsupportedReferenceError: If the rocket is unknown.
        """
        rocket = self._rockets.get(rocket_id)
        if rocket is None:
            raise UnsupportedReferenceError("rocket", rocket_id, list(self._rockets))
        return rocket

    def get_destination(self, destination_id: str) -> DestinationFactor:
        """Get a destination factor by identifier.

        Raises:
            UnsupportedReferenceError: If the destination is unknown.
        """
        destination = self._destinations.get(destination_id)
        if destination is None:
            raise UnsupportedReferenceError(
                "destination", destination_id, list(self._destinations)
            )
        return destination

    def get_launch_site(self, launch_site_id: str) -> LaunchSiteFactor:
        """Get a launch site by identifier.

        Raises:
            UnsupportedReferenceError: If the launch site is unknown.
        """
        site = self._launch_sites.get(launch_site_id)
        if site is None:
            raise UnsupportedReferenceError(
                "launch_site", launch_site_id, list(self._launch_sites)
            )
        return site

    def find_rocket(self, rocket_id: str) -> RocketProfile | None:
        return self._rockets.get(rocket_id)

    def find_destination(self, destination_id: str) -> DestinationFactor | None:
        return self._destinations.get(destination_id)

    def find_launch_site(self, launch_site_id: str) -> LaunchSiteFactor | None:
        return self._launch_sites.get(launch_site_id)

    def as_dict(self) -> dict[str, dict[str, dict[str, Any]]]:
        """Render all three catalogs as plain data.

        Returns:
            Dict with "rockets", "destinations" and "launch_sites", each
            mapping identifiers to JSON-compatible records.
        """
        return {
            "rockets": {k: v.model_dump(mode="json") for k, v in self._rockets.items()},
            "destinations": {
                k: v.model_dump(mode="json") for k, v in self._destinations.items()
            },
            "launch_sites": {
                k: v.model_dump(mode="json") for k, v in self._launch_sites.items()
            },
        }

    def __repr__(self) -> str:
        return (
            f"ReferenceCatalog(rockets={list(self._rockets)}, "
            f"destinations={list(self._destinations)}, "
            f"launch_sites={list(self._launch_sites)})"
        )


def load_catalog(
    path: Path | None = None,
    override_path: Path | None = None,
) -> ReferenceCatalog:
    """Load a reference catalog from YAML.

    Args:
        path: Base catalog file. Defaults to the packaged seed catalog.
        override_path: Optional file deep-merged on top of the base, so it
            only needs to contain the entries it adds or changes.

    Returns:
        The validated catalog.

    Raises:
        CatalogLoadError: If a file cannot be read or the data is invalid.
    """
    base_path = path or DEFAULT_CATALOG_PATH
    source = str(base_path)

    try:
        data = load_yaml(base_path)
        if override_path is not None:
            data = deep_merge(data, load_yaml(override_path))
            source = f"{base_path} + {override_path}"
    except YAMLLoadError as e:
        raise CatalogLoadError(e.reason, str(e.path)) from e

    catalog = ReferenceCatalog.from_mapping(data, source=source)

    logger.info(
        "Loaded reference catalog from %s: %d rockets, %d destinations, %d launch sites",
        source,
        len(catalog.rockets),
        len(catalog.destinations),
        len(catalog.launch_sites),
    )

    return catalog


@lru_cache(maxsize=1)
def get_default_catalog() -> ReferenceCatalog:
    """Get the process-wide catalog.

    The packaged seed is merged with GREENLAUNCH_CATALOG_PATH when set.
    Loaded once; call clear_catalog_cache() to reload.

    Returns:
        Cached ReferenceCatalog instance.
    """
    settings = get_settings()
    return load_catalog(override_path=settings.catalog.path)


def clear_catalog_cache() -> None:
    """Drop the cached process-wide catalog."""
    get_default_catalog.cache_clear()
