# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Launch emissions domain package.

This package provides:
- Reference catalogs of rockets, destinations and launch sites
- Emission summary calculation for a launch configuration
- Transparent weighted risk scoring of an emission summary

Usage:
    from greenlaunch.domains.emissions import compute_emission_summary, compute_risk_report

    summary = compute_emission_summary("falcon9", "moon", "timmins", 2100)
    report = compute_risk_report(summary)
"""

from greenlaunch.domains.emissions.calculator import compute_emission_summary
from greenlaunch.domains.emissions.catalog import (
    ReferenceCatalog,
    clear_catalog_cache,
    get_default_catalog,
    load_catalog,
)
from greenlaunch.domains.emissions.errors import (
    CatalogLoadError,
    EmissionsError,
    MissingCapacityDataError,
    UnsupportedReferenceError,
)
from greenlaunch.domains.emissions.models import (
    ComplianceFlags,
    DestinationFactor,
    EmissionAssumptions,
    EmissionIntensity,
    EmissionSummary,
    EmissionTotals,
    LaunchSiteFactor,
    MissionAssessment,
    RiskDimensions,
    RiskLabel,
    RiskOverall,
    RiskReport,
    RiskWeights,
    RocketProfile,
    TransportAuthorityStatus,
)
from greenlaunch.domains.emissions.risk import RISK_WEIGHTS, compute_risk_report, normalize
from greenlaunch.domains.emissions.service import EmissionService

__all__ = [
    # Catalog
    "ReferenceCatalog",
    "load_catalog",
    "get_default_catalog",
    "clear_catalog_cache",
    # Calculation
    "compute_emission_summary",
    "compute_risk_report",
    "normalize",
    "RISK_WEIGHTS",
    "EmissionService",
    # Errors
    "EmissionsError",
    "UnsupportedReferenceError",
    "MissingCapacityDataError",
    "CatalogLoadError",
    # Models
    "RocketProfile",
    "DestinationFactor",
    "LaunchSiteFactor",
    "EmissionSummary",
    "EmissionTotals",
    "EmissionIntensity",
    "EmissionAssumptions",
    "ComplianceFlags",
    "TransportAuthorityStatus",
    "RiskReport",
    "RiskDimensions",
    "RiskOverall",
    "RiskWeights",
    "RiskLabel",
    "MissionAssessment",
]
