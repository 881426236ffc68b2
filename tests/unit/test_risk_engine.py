# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for the risk report generator."""

import pytest

from greenlaunch.domains.emissions import (
    RISK_WEIGHTS,
    ComplianceFlags,
    EmissionAssumptions,
    EmissionIntensity,
    EmissionSummary,
    EmissionTotals,
    ReferenceCatalog,
    RiskLabel,
    TransportAuthorityStatus,
    compute_emission_summary,
    compute_risk_report,
    normalize,
)


def make_summary(
    co2: int = 300_000,
    nox: int = 1_200,
    utilization_percent: int | None = 80,
    status: TransportAuthorityStatus = TransportAuthorityStatus.STANDARD,
    consultation: bool = True,
    adjustments: list[str] | None = None,
    notes: list[str] | None = None,
) -> EmissionSummary:
    """Build a summary with only the fields the risk model reads varied."""
    return EmissionSummary(
        rocket_name="Test Rocket",
        destination_name="Moon",
        launch_site_name="Test Site",
        totals_kg=EmissionTotals(co2=co2, nox=nox, black_carbon=500, water_vapor=70000),
        intensity=EmissionIntensity(per_kg_payload=100, per_km=0.8),
        assumptions=EmissionAssumptions(
            payload_mass_kg=2000,
            payload_capacity_kg=3000,
            utilization_percent=utilization_percent,
            trajectory_type="Trans-Lunar Injection (TLI)",
            mission_duration_days=5,
            adjustments=adjustments if adjustments is not None else ["a", "b"],
        ),
        compliance=ComplianceFlags(
            transport_authority_status=status,
            indigenous_consultation_required=consultation,
            additional_notes=notes if notes is not None else [],
        ),
    )


class TestNormalize:
    """Tests for normalize()."""

    def test_midpoint(self) -> None:
        """Test a value halfway through the range."""
        assert normalize(450_000, 200_000, 700_000) == 0.5

    def test_clamps_below_and_above(self) -> None:
        """Test values outside the range clamp to 0 and 1."""
        assert normalize(100, 800, 2_500) == 0
        assert normalize(9_000, 800, 2_500) == 1

    def test_degenerate_range_is_zero(self) -> None:
        """Test a zero-width range returns 0 instead of dividing by zero."""
        assert normalize(5, 5, 5) == 0
        assert normalize(42, 5, 5) == 0


class TestReferenceMissionRisk:
    """Tests for the risk of falcon9 -> moon from timmins at 2100 kg."""

    @pytest.fixture
    def report(self, catalog: ReferenceCatalog):
        summary = compute_emission_summary("falcon9", "moon", "timmins", 2100, catalog=catalog)
        return compute_risk_report(summary)

    def test_dimensions(self, report) -> None:
        """Test each dimension score."""
        dims = report.dimensions

        assert dims.co2_risk == 64
        assert dims.nox_risk == 55
        assert dims.efficiency_risk == 14
        assert dims.compliance_risk == 85
        assert dims.local_env_risk == 10

    def test_overall(self, report) -> None:
        """Test weighted overall score and label."""
        assert report.overall.score == 56
        assert report.overall.label == RiskLabel.MEDIUM

    def test_recommendations(self, report) -> None:
        """Test the four recommendation slots."""
        assert report.recommendations == [
            "Increase payload utilization or rideshare to cut intensity",
            "Consider methalox/hydrolox upper stage or trajectory optimization",
            "Engage the transport authority pre-brief and file mitigation plan",
            "Begin Indigenous consultation early; co-develop monitoring plan",
        ]

    def test_wildlife_site_is_high_risk(self, catalog: ReferenceCatalog) -> None:
        """Test falcon9 -> mars from chapleau crosses into High."""
        summary = compute_emission_summary("falcon9", "mars", "chapleau", catalog=catalog)
        report = compute_risk_report(summary)

        assert report.dimensions.co2_risk == 100
        assert report.dimensions.local_env_risk == 25
        assert report.overall.score == 70
        assert report.overall.label == RiskLabel.HIGH


class TestDimensions:
    """Tests for individual risk dimensions."""

    def test_review_required_compliance_risk(self) -> None:
        """Test review plus consultation scores 65 + 20."""
        summary = make_summary(
            co2=500_000,
            status=TransportAuthorityStatus.REVIEW_REQUIRED,
            consultation=True,
        )

        assert compute_risk_report(summary).dimensions.compliance_risk == 85

    def test_standard_compliance_risk(self) -> None:
        """Test standard path with and without consultation."""
        with_consultation = compute_risk_report(make_summary(consultation=True))
        without = compute_risk_report(make_summary(consultation=False))

        assert with_consultation.dimensions.compliance_risk == 45
        assert without.dimensions.compliance_risk == 25

    def test_efficiency_risk_below_target(self) -> None:
        """Test under-utilization penalty."""
        report = compute_risk_report(make_summary(utilization_percent=35))

        assert report.dimensions.efficiency_risk == 50

    def test_efficiency_risk_at_or_above_target(self) -> None:
        """Test no penalty from 70% utilization upwards."""
        for utilization in (70, 85, 100):
            report = compute_risk_report(make_summary(utilization_percent=utilization))
            assert report.dimensions.efficiency_risk == 0
            assert report.recommendations[0] == "Payload efficiency acceptable"

    def test_missing_utilization_defaults_to_sixty(self) -> None:
        """Test absent utilization is scored as 60%."""
        missing = compute_risk_report(make_summary(utilization_percent=None))
        sixty = compute_risk_report(make_summary(utilization_percent=60))

        assert missing.dimensions.efficiency_risk == sixty.dimensions.efficiency_risk == 14

    def test_local_env_risk_counts_adjustments_and_wildlife(self) -> None:
        """Test adjustments add 5 each and a wildlife note adds 15."""
        plain = make_summary(adjustments=["a", "b", "c"], notes=["Polar corridor"])
        wildlife = make_summary(adjustments=["a"], notes=["WILDLIFE corridor review"])

        assert compute_risk_report(plain).dimensions.local_env_risk == 15
        assert compute_risk_report(wildlife).dimensions.local_env_risk == 20

    def test_local_env_risk_is_capped(self) -> None:
        """Test many adjustments never push local risk past 100."""
        summary = make_summary(adjustments=[f"adj {i}" for i in range(40)], notes=["wildlife"])

        assert compute_risk_report(summary).dimensions.local_env_risk == 100

    def test_co2_risk_is_monotonic(self) -> None:
        """Test more CO2 never lowers CO2 risk inside the scoring range."""
        scores = [
            compute_risk_report(make_summary(co2=co2)).dimensions.co2_risk
            for co2 in range(200_000, 700_001, 12_500)
        ]

        assert scores == sorted(scores)
        assert scores[0] == 0
        assert scores[-1] == 100


class TestOverallScore:
    """Tests for the weighted overall score and label."""

    def test_low_label(self) -> None:
        """Test a clean mission is Low."""
        summary = make_summary(
            co2=100_000,
            nox=100,
            utilization_percent=100,
            consultation=False,
            adjustments=[],
        )
        report = compute_risk_report(summary)

        # Only the 25 point standard compliance baseline contributes
        assert report.overall.score == 8
        assert report.overall.label == RiskLabel.LOW
        assert report.recommendations == [
            "Payload efficiency acceptable",
            "CO₂ within expected bounds",
            "Standard compliance path",
            "No Indigenous consultation flagged",
        ]

    def test_scores_stay_in_bounds(self, catalog: ReferenceCatalog) -> None:
        """Test every dimension and the overall score stay within 0-100."""
        summaries = [
            make_summary(
                co2=10**9,
                nox=10**7,
                utilization_percent=0,
                status=TransportAuthorityStatus.REVIEW_REQUIRED,
                adjustments=["x"] * 100,
                notes=["wildlife"],
            ),
            make_summary(co2=0, nox=0, utilization_percent=100, consultation=False, adjustments=[]),
        ]
        for rocket_id, rocket in catalog.rockets.items():
            for destination_id, capacity in rocket.payload_capacity_kg.items():
                for site_id in catalog.launch_sites:
                    for payload in (1, capacity, capacity * 2):
                        summaries.append(
                            compute_emission_summary(
                                rocket_id, destination_id, site_id, payload, catalog=catalog
                            )
                        )

        for summary in summaries:
            report = compute_risk_report(summary)
            for value in report.dimensions.model_dump().values():
                assert 0 <= value <= 100
            assert 0 <= report.overall.score <= 100

    def test_weights_are_exposed(self) -> None:
        """Test reports carry the fixed weighting scheme."""
        report = compute_risk_report(make_summary())

        assert report.weights == RISK_WEIGHTS
        assert report.weights.model_dump() == {
            "co2": 0.30,
            "nox": 0.15,
            "efficiency": 0.15,
            "compliance": 0.30,
            "local": 0.10,
        }
        assert sum(report.weights.model_dump().values()) == pytest.approx(1.0)

    def test_report_is_deterministic(self) -> None:
        """Test the same summary always yields the same report."""
        summary = make_summary(co2=480_000, status=TransportAuthorityStatus.REVIEW_REQUIRED)

        assert compute_risk_report(summary) == compute_risk_report(summary)
