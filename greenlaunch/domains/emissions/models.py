# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Data models for the emissions domain.

This module defines Pydantic models for:
- Reference data (rocket profiles, destination factors, launch sites)
- Emission summaries produced by the calculator
- Risk reports produced by the risk generator

Reference models are frozen; summaries and reports are created fresh
for every call and owned by the caller.
"""

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class TransportAuthorityStatus(str, Enum):
    """Regulatory review path for a mission's CO2 output."""

    STANDARD = "standard"
    REVIEW_REQUIRED = "review-required"


class RiskLabel(str, Enum):
    """Coarse label for the overall risk score."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


# =============================================================================
# Reference data
# =============================================================================


class RocketProfile(BaseModel):
    """Per-launch emission baseline of a launch vehicle."""

    model_config = ConfigDict(frozen=True)

    display_name: str
    fuel_type: str
    base_co2_per_launch_kg: float = Field(ge=0)
    base_nox_per_launch_kg: float = Field(ge=0)
    base_black_carbon_kg: float = Field(ge=0)
    base_water_vapor_kg: float = Field(ge=0)
    payload_capacity_kg: Mapping[str, float] = Field(
        default_factory=dict,
        validate_default=True,
        description="Payload capacity per destination id",
    )

    @field_validator("payload_capacity_kg", mode="after")
    @classmethod
    def freeze_capacities(cls, value: Mapping[str, float]) -> Mapping[str, float]:
        """Store capacities behind a read-only view."""
        return MappingProxyType(dict(value))

    @field_serializer("payload_capacity_kg")
    def serialize_capacities(self, value: Mapping[str, float]) -> dict[str, float]:
        return dict(value)


class DestinationFactor(BaseModel):
    """Mission-profile multipliers for a destination body."""

    model_config = ConfigDict(frozen=True)

    display_name: str
    distance_km: float = Field(gt=0)
    trajectory: str
    co2_multiplier: float = Field(gt=0)
    nox_multiplier: float = Field(gt=0)
    mission_duration_days: int = Field(ge=0)
    correction_factor: float = Field(gt=0)


class LaunchSiteFactor(BaseModel):
    """Location and regulatory context of a launch site."""

    model_config = ConfigDict(frozen=True)

    name: str
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    elevation_m: float
    regulatory_notes: tuple[str, ...] = ()
    local_weather_penalty: float = Field(gt=0)


# =============================================================================
# Emission summary
# =============================================================================


class EmissionTotals(BaseModel):
    """Absolute emissions per launch, in kilograms."""

    co2: int
    nox: int
    black_carbon: float
    water_vapor: float


class EmissionIntensity(BaseModel):
    """CO2 normalized per kg of payload and per km travelled."""

    per_kg_payload: int
    per_km: float


class EmissionAssumptions(BaseModel):
    """Inputs and adjustments that shaped an estimate."""

    payload_mass_kg: float
    payload_capacity_kg: float
    utilization_percent: int | None = None
    trajectory_type: str
    mission_duration_days: int
    adjustments: list[str] = Field(default_factory=list)


class ComplianceFlags(BaseModel):
    """Regulatory flags derived from an estimate."""

    transport_authority_status: TransportAuthorityStatus
    indigenous_consultation_required: bool
    additional_notes: list[str] = Field(default_factory=list)


class EmissionSummary(BaseModel):
    """Emission estimate for one launch configuration."""

    rocket_name: str
    destination_name: str
    launch_site_name: str
    totals_kg: EmissionTotals
    intensity: EmissionIntensity
    assumptions: EmissionAssumptions
    compliance: ComplianceFlags


# =============================================================================
# Risk report
# =============================================================================


class RiskWeights(BaseModel):
    """Weights of each risk dimension in the overall score. Sum to 1."""

    model_config = ConfigDict(frozen=True)

    co2: float
    nox: float
    efficiency: float
    compliance: float
    local: float


class RiskDimensions(BaseModel):
    """Independently normalized 0-100 risk contributors."""

    co2_risk: int = Field(ge=0, le=100)
    nox_risk: int = Field(ge=0, le=100)
    efficiency_risk: int = Field(ge=0, le=100)
    compliance_risk: int = Field(ge=0, le=100)
    local_env_risk: int = Field(ge=0, le=100)


class RiskOverall(BaseModel):
    """Weighted overall score and its label."""

    score: int = Field(ge=0, le=100)
    label: RiskLabel


class RiskReport(BaseModel):
    """Transparent risk scoring of an emission summary."""

    overall: RiskOverall
    dimensions: RiskDimensions
    weights: RiskWeights
    recommendations: list[str]


class MissionAssessment(BaseModel):
    """An emission summary together with its risk report."""

    summary: EmissionSummary
    risk: RiskReport
