# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Emission summary calculator.

Combines a rocket profile, destination factor and launch site with a
payload mass into absolute emissions, per-unit intensity and compliance
flags. The result is a pure function of the inputs and the catalog.

Model:
- CO2 scales with destination, site weather and regional correction, and
  with payload utilization from a 50% floor (fixed launch overhead) to 100%.
- NOx scales with destination and with utilization from a 70% floor.
- Black carbon and water vapor are engine characteristics, reported at the
  rocket's base values.
"""

import logging

from greenlaunch.domains.emissions.catalog import ReferenceCatalog, get_default_catalog
from greenlaunch.domains.emissions.errors import MissingCapacityDataError
from greenlaunch.domains.emissions.models import (
    ComplianceFlags,
    EmissionAssumptions,
    EmissionIntensity,
    EmissionSummary,
    EmissionTotals,
    TransportAuthorityStatus,
)
from greenlaunch.utils.numeric import round_half_up

logger = logging.getLogger(__name__)

DEFAULT_PAYLOAD_FRACTION = 0.6
# Utilization scaling: floor + slope * ratio, reaching 1.0 at full capacity.
CO2_UTILIZATION_FLOOR, CO2_UTILIZATION_SLOPE = 0.5, 0.5
NOX_UTILIZATION_FLOOR, NOX_UTILIZATION_SLOPE = 0.7, 0.3
TRANSPORT_REVIEW_THRESHOLD_KG = 450_000

# Fixed policy assumption, not derived from site data.
INDIGENOUS_CONSULTATION_REQUIRED = True


def compute_emission_summary(
    rocket_id: str,
    destination_id: str,
    launch_site_id: str,
    payload_mass_kg: float | None = None,
    *,
    catalog: ReferenceCatalog | None = None,
) -> EmissionSummary:
    """Estimate the emissions of one launch configuration.

    Args:
        rocket_id: Rocket identifier, e.g. "falcon9".
        destination_id: Destination identifier, e.g. "moon".
        launch_site_id: Launch site identifier, e.g. "timmins".
        payload_mass_kg: Payload mass. When absent or not positive, 60% of
            the rocket's capacity for the destination is assumed. Values above
            capacity are accepted: utilization and the reported
            payload are capped at capacity, while intensity per kg divides
            by the payload as given.
        catalog: Reference catalog. Defaults to the process-wide catalog.

    Returns:
        A new EmissionSummary.

    Raises:
        UnsupportedReferenceError: If any identifier is unknown.
        MissingCapacityDataError: If the rocket has no capacity for the destination.
    """
    catalog = catalog or get_default_catalog()

    rocket = catalog.get_rocket(rocket_id)
    destination = catalog.get_destination(destination_id)
    site = catalog.get_launch_site(launch_site_id)

    capacity = rocket.payload_capacity_kg.get(destination_id)
    if not capacity or capacity <= 0:
        raise MissingCapacityDataError(
            rocket_id,
            destination_id,
            rocket_name=rocket.display_name,
            destination_name=destination.display_name,
        )

    if payload_mass_kg is not None and payload_mass_kg > 0:
        payload = payload_mass_kg
    else:
        payload = round_half_up(capacity * DEFAULT_PAYLOAD_FRACTION)

    utilization_ratio = min(payload / capacity, 1)
    if payload > capacity:
        logger.warning(
            "Payload %s kg exceeds %s capacity to %s (%s kg); reporting full utilization",
            payload,
            rocket.display_name,
            destination.display_name,
            capacity,
        )

    co2 = (
        rocket.base_co2_per_launch_kg
        * destination.co2_multiplier
        * site.local_weather_penalty
        * destination.correction_factor
        * (CO2_UTILIZATION_FLOOR + CO2_UTILIZATION_SLOPE * utilization_ratio)
    )
    nox = (
        rocket.base_nox_per_launch_kg
        * destination.nox_multiplier
        * (NOX_UTILIZATION_FLOOR + NOX_UTILIZATION_SLOPE * utilization_ratio)
    )

    if co2 > TRANSPORT_REVIEW_THRESHOLD_KG:
        transport_status = TransportAuthorityStatus.REVIEW_REQUIRED
    else:
        transport_status = TransportAuthorityStatus.STANDARD

    return EmissionSummary(
        rocket_name=rocket.display_name,
        destination_name=destination.display_name,
        launch_site_name=site.name,
        totals_kg=EmissionTotals(
            co2=round_half_up(co2),
            nox=round_half_up(nox),
            black_carbon=rocket.base_black_carbon_kg,
            water_vapor=rocket.base_water_vapor_kg,
        ),
        intensity=EmissionIntensity(
            per_kg_payload=round_half_up(co2 / payload),
            per_km=round_half_up(co2 / destination.distance_km, 3),
        ),
        assumptions=EmissionAssumptions(
            payload_mass_kg=min(payload, capacity),
            payload_capacity_kg=capacity,
            utilization_percent=round_half_up(utilization_ratio * 100),
            trajectory_type=destination.trajectory,
            mission_duration_days=destination.mission_duration_days,
            adjustments=[
                f"Regional correction factor {destination.correction_factor}",
                f"Local weather penalty {site.local_weather_penalty}",
            ],
        ),
        compliance=ComplianceFlags(
            transport_authority_status=transport_status,
            indigenous_consultation_required=INDIGENOUS_CONSULTATION_REQUIRED,
            additional_notes=list(site.regulatory_notes),
        ),
    )
