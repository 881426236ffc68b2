# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Risk report generator.

Turns an EmissionSummary into five independently normalized 0-100 risk
dimensions, a weighted overall score with a label, and four fixed-slot
recommendations. The weights travel with every report so a UI can show
how the overall score was built.

The weights and normalization bounds are heuristics kept for scoring
compatibility; they are not taken from a published methodology.
"""

from greenlaunch.domains.emissions.calculator import TRANSPORT_REVIEW_THRESHOLD_KG
from greenlaunch.domains.emissions.models import (
    EmissionSummary,
    RiskDimensions,
    RiskLabel,
    RiskOverall,
    RiskReport,
    RiskWeights,
    TransportAuthorityStatus,
)
from greenlaunch.utils.numeric import clamp, round_half_up

RISK_WEIGHTS = RiskWeights(
    co2=0.30,
    nox=0.15,
    efficiency=0.15,
    compliance=0.30,
    local=0.10,
)

CO2_RISK_BOUNDS_KG = (200_000, 700_000)
NOX_RISK_BOUNDS_KG = (800, 2_500)

TARGET_UTILIZATION_PERCENT = 70
DEFAULT_UTILIZATION_PERCENT = 60

REVIEW_REQUIRED_RISK = 65
STANDARD_COMPLIANCE_RISK = 25
CONSULTATION_RISK = 20

ADJUSTMENT_RISK = 5
WILDLIFE_RISK = 15

HIGH_RISK_THRESHOLD = 70
MEDIUM_RISK_THRESHOLD = 40


def normalize(value: float, lower: float, upper: float) -> float:
    """Map value onto [0, 1] relative to [lower, upper], clamping outside.

    A degenerate range (lower == upper) yields 0.

    Example:
        >>> normalize(450_000, 200_000, 700_000)
        0.5
    """
    if upper == lower:
        return 0
    return clamp((value - lower) / (upper - lower), 0, 1)


def _label_for(score: int) -> RiskLabel:
    if score >= HIGH_RISK_THRESHOLD:
        return RiskLabel.HIGH
    if score >= MEDIUM_RISK_THRESHOLD:
        return RiskLabel.MEDIUM
    return RiskLabel.LOW


def compute_risk_report(summary: EmissionSummary) -> RiskReport:
    """Score the environmental and regulatory risk of an emission summary.

    Args:
        summary: A summary from compute_emission_summary(), or one built
            by the caller with the same shape.

    Returns:
        A new RiskReport.
    """
    totals = summary.totals_kg
    compliance = summary.compliance
    assumptions = summary.assumptions

    co2_risk = round_half_up(normalize(totals.co2, *CO2_RISK_BOUNDS_KG) * 100)
    nox_risk = round_half_up(normalize(totals.nox, *NOX_RISK_BOUNDS_KG) * 100)

    utilization = assumptions.utilization_percent
    if utilization is None:
        utilization = DEFAULT_UTILIZATION_PERCENT
    under_utilized = utilization < TARGET_UTILIZATION_PERCENT
    if under_utilized:
        shortfall = (TARGET_UTILIZATION_PERCENT - utilization) / TARGET_UTILIZATION_PERCENT
        efficiency_risk = round_half_up(clamp(shortfall, 0, 1) * 100)
    else:
        efficiency_risk = 0

    review_required = (
        compliance.transport_authority_status == TransportAuthorityStatus.REVIEW_REQUIRED
    )
    compliance_risk = (
        REVIEW_REQUIRED_RISK if review_required else STANDARD_COMPLIANCE_RISK
    ) + (CONSULTATION_RISK if compliance.indigenous_consultation_required else 0)

    site_notes = " ".join(compliance.additional_notes).lower()
    wildlife_risk = WILDLIFE_RISK if "wildlife" in site_notes else 0
    local_env_risk = min(100, len(assumptions.adjustments) * ADJUSTMENT_RISK + wildlife_risk)

    dimensions = RiskDimensions(
        co2_risk=co2_risk,
        nox_risk=nox_risk,
        efficiency_risk=efficiency_risk,
        compliance_risk=min(100, compliance_risk),
        local_env_risk=local_env_risk,
    )

    weighted = (
        dimensions.co2_risk * RISK_WEIGHTS.co2
        + dimensions.nox_risk * RISK_WEIGHTS.nox
        + dimensions.efficiency_risk * RISK_WEIGHTS.efficiency
        + dimensions.compliance_risk * RISK_WEIGHTS.compliance
        + dimensions.local_env_risk * RISK_WEIGHTS.local
    )
    score = int(clamp(round_half_up(weighted), 0, 100))

    recommendations = [
        "Increase payload utilization or rideshare to cut intensity"
        if under_utilized
        else "Payload efficiency acceptable",
        "Consider methalox/hydrolox upper stage or trajectory optimization"
        if totals.co2 > TRANSPORT_REVIEW_THRESHOLD_KG
        else "CO₂ within expected bounds",
        "Engage the transport authority pre-brief and file mitigation plan"
        if review_required
        else "Standard compliance path",
        "Begin Indigenous consultation early; co-develop monitoring plan"
        if compliance.indigenous_consultation_required
        else "No Indigenous consultation flagged",
    ]

    return RiskReport(
        overall=RiskOverall(score=score, label=_label_for(score)),
        dimensions=dimensions,
        weights=RISK_WEIGHTS,
        recommendations=recommendations,
    )
