# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for the emission service."""

import pytest
import structlog

from greenlaunch.domains.emissions import (
    EmissionService,
    MissingCapacityDataError,
    ReferenceCatalog,
    RiskLabel,
    UnsupportedReferenceError,
    compute_emission_summary,
    compute_risk_report,
)


@pytest.fixture
def emission_service(catalog: ReferenceCatalog) -> EmissionService:
    """Create emission service over the seed catalog."""
    return EmissionService(catalog=catalog)


class TestEmissionServiceEstimate:
    """Tests for estimate()."""

    def test_estimate_matches_calculator(
        self, emission_service: EmissionService, catalog: ReferenceCatalog
    ) -> None:
        """Test estimate delegates to the calculator with its catalog."""
        result = emission_service.estimate("ariane6", "moon", "chapleau", 3000)

        assert result == compute_emission_summary(
            "ariane6", "moon", "chapleau", 3000, catalog=catalog
        )

    def test_estimate_uses_injected_catalog(self, catalog_data) -> None:
        """Test the service resolves ids against its own catalog."""
        del catalog_data["rockets"]["ariane6"]
        service = EmissionService(catalog=ReferenceCatalog.from_mapping(catalog_data))

        with pytest.raises(UnsupportedReferenceError) as exc_info:
            service.estimate("ariane6", "moon", "timmins")

        assert exc_info.value.available == ["falcon9", "newGlenn"]

    def test_estimate_propagates_unknown_reference(
        self, emission_service: EmissionService
    ) -> None:
        """Test unknown ids are raised, not swallowed."""
        with pytest.raises(UnsupportedReferenceError):
            emission_service.estimate("saturnV", "moon", "timmins")

    def test_estimate_propagates_missing_capacity(self, catalog_data) -> None:
        """Test missing capacity data is raised, not swallowed."""
        del catalog_data["rockets"]["newGlenn"]["payload_capacity_kg"]["moon"]
        service = EmissionService(catalog=ReferenceCatalog.from_mapping(catalog_data))

        with pytest.raises(MissingCapacityDataError):
            service.estimate("newGlenn", "moon", "timmins")


class TestEmissionServiceRisk:
    """Tests for risk() and assess()."""

    def test_risk_matches_generator(self, emission_service: EmissionService) -> None:
        """Test risk delegates to the risk generator."""
        summary = emission_service.estimate("falcon9", "moon", "timmins", 2100)

        assert emission_service.risk(summary) == compute_risk_report(summary)

    def test_assess_returns_summary_and_risk(self, emission_service: EmissionService) -> None:
        """Test assess combines estimate and risk."""
        assessment = emission_service.assess("falcon9", "moon", "timmins")

        assert assessment.summary.assumptions.payload_mass_kg == 2100
        assert assessment.risk.overall.score == 56
        assert assessment.risk.overall.label == RiskLabel.MEDIUM

    def test_assess_clears_log_context(self, emission_service: EmissionService) -> None:
        """Test the mission log context does not leak after assess."""
        emission_service.assess("newGlenn", "mars", "chapleau")

        assert structlog.contextvars.get_contextvars() == {}

    def test_assess_clears_log_context_on_error(
        self, emission_service: EmissionService
    ) -> None:
        """Test the mission log context is cleared when assess fails."""
        with pytest.raises(UnsupportedReferenceError):
            emission_service.assess("falcon9", "venus", "timmins")

        assert structlog.contextvars.get_contextvars() == {}


class TestEmissionServiceReferenceData:
    """Tests for reference_data()."""

    def test_reference_data(self, emission_service: EmissionService) -> None:
        """Test the catalog listing."""
        data = emission_service.reference_data()

        assert list(data["rockets"]) == ["falcon9", "newGlenn", "ariane6"]
        assert list(data["destinations"]) == ["moon", "mars"]
        assert list(data["launch_sites"]) == ["timmins", "chapleau"]
        assert data["destinations"]["moon"]["trajectory"] == "Trans-Lunar Injection (TLI)"
