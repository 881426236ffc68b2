# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Exceptions raised by the emissions domain.

UnsupportedReferenceError and MissingCapacityDataError are validation
failures of a single estimate request and map to client errors.
CatalogLoadError means the reference data itself is unusable and is
raised once, at startup.
"""

from typing import Any


class EmissionsError(Exception):
    """Base exception for emissions domain errors.

    Attributes:
        message: Error description.
        details: Additional structured error details.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class UnsupportedReferenceError(EmissionsError):
    """Raised when a rocket, destination or launch site id is unknown.

    Attributes:
        kind: Which catalog was searched ("rocket", "destination", "launch_site").
        identifier: The identifier that was not found.
        available: Valid identifiers for that catalog, in catalog order.
    """

    def __init__(self, kind: str, identifier: str, available: list[str]) -> None:
        self.kind = kind
        self.identifier = identifier
        self.available = available
        available_str = ", ".join(available)
        message = (
            f'Unsupported {kind} "{identifier}". '
            f"Available: {available_str or 'none'}"
        )
        super().__init__(
            message,
            details={"kind": kind, "identifier": identifier, "available": available},
        )


class MissingCapacityDataError(EmissionsError):
    """Raised when a rocket has no payload capacity for a destination.

    Signals a gap in the reference data rather than a caller mistake.

    Attributes:
        rocket_id: Rocket identifier.
        destination_id: Destination identifier.
    """

    def __init__(
        self,
        rocket_id: str,
        destination_id: str,
        rocket_name: str | None = None,
        destination_name: str | None = None,
    ) -> None:
        self.rocket_id = rocket_id
        self.destination_id = destination_id
        message = (
            f"No payload capacity data for {rocket_name or rocket_id} "
            f"to {destination_name or destination_id}"
        )
        super().__init__(
            message,
            details={"rocket_id": rocket_id, "destination_id": destination_id},
        )


class CatalogLoadError(EmissionsError):
    """Raised when reference catalog data cannot be loaded or validated.

    Attributes:
        source: File or description of the data that failed to load.
        reason: Why loading failed.
    """

    def __init__(self, reason: str, source: str = "<mapping>") -> None:
        self.source = source
        self.reason = reason
        super().__init__(
            f"Invalid reference catalog {source}: {reason}",
            details={"source": source},
        )
