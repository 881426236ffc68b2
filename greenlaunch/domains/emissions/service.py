# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Emission service for launch estimates and risk scoring.

This module provides the EmissionService class, the entry point a
transport layer calls for:
- Emission estimates for a launch configuration
- Risk reports for an estimate
- Reference data listings
"""

from typing import Any

from greenlaunch.domains.emissions.calculator import compute_emission_summary
from greenlaunch.domains.emissions.catalog import ReferenceCatalog
from greenlaunch.domains.emissions.errors import EmissionsError
from greenlaunch.domains.emissions.models import (
    EmissionSummary,
    MissionAssessment,
    RiskReport,
)
from greenlaunch.domains.emissions.risk import compute_risk_report
from greenlaunch.utils.logging import bind_context, clear_context, get_logger

logger = get_logger(__name__)


class EmissionService:
    """Service for estimating launch emissions and scoring their risk.

    Holds no state besides the read-only catalog, so one instance can
    serve concurrent callers.

    Attributes:
        catalog: Reference catalog used for every estimate.
    """

    def __init__(self, catalog: ReferenceCatalog) -> None:
        """Initialize emission service.

        Args:
            catalog: Reference catalog of rockets, destinations and sites.
        """
        self.catalog = catalog

    def estimate(
        self,
        rocket_id: str,
        destination_id: str,
        launch_site_id: str,
        payload_mass_kg: float | None = None,
    ) -> EmissionSummary:
        """Estimate emissions for a launch configuration.

        Args:
            rocket_id: Rocket identifier.
            destination_id: Destination identifier.
            launch_site_id: Launch site identifier.
            payload_mass_kg: Optional payload mass in kg.

        Returns:
            Emission summary.

        Raises:
            UnsupportedReferenceError: If an identifier is unknown.
            MissingCapacityDataError: If capacity data is missing.
        """
        try:
            summary = compute_emission_summary(
                rocket_id,
                destination_id,
                launch_site_id,
                payload_mass_kg,
                catalog=self.catalog,
            )
        except EmissionsError as e:
            logger.warning(
                "Emission estimate rejected",
                rocket_id=rocket_id,
                destination_id=destination_id,
                launch_site_id=launch_site_id,
                error=e.message,
            )
            raise

        logger.info(
            "Emission estimate computed",
            rocket_id=rocket_id,
            destination_id=destination_id,
            launch_site_id=launch_site_id,
            co2_kg=summary.totals_kg.co2,
            utilization_percent=summary.assumptions.utilization_percent,
            transport_status=summary.compliance.transport_authority_status.value,
        )
        return summary

    def risk(self, summary: EmissionSummary) -> RiskReport:
        """Score the risk of an emission summary."""
        report = compute_risk_report(summary)
        logger.info(
            "Risk report computed",
            score=report.overall.score,
            label=report.overall.label.value,
        )
        return report

    def assess(
        self,
        rocket_id: str,
        destination_id: str,
        launch_site_id: str,
        payload_mass_kg: float | None = None,
    ) -> MissionAssessment:
        """Estimate emissions and score their risk in one call.

        Raises:
            UnsupportedReferenceError: If an identifier is unknown.
            MissingCapacityDataError: If capacity data is missing.
        """
        bind_context(
            rocket_id=rocket_id,
            destination_id=destination_id,
            launch_site_id=launch_site_id,
        )
        try:
            summary = self.estimate(
                rocket_id, destination_id, launch_site_id, payload_mass_kg
            )
            return MissionAssessment(summary=summary, risk=self.risk(summary))
        finally:
            clear_context()

    def reference_data(self) -> dict[str, Any]:
        """List the rockets, destinations and launch sites available."""
        return self.catalog.as_dict()
