"""GreenLaunch Emissions Backend.

Deterministic launch-emissions estimation and transparent risk scoring for
the GreenLaunch educational mission planner.

Copyright (C) 2025 Global Digital Labs (gdlabs.io)
SPDX-License-Identifier: LGPL-3.0-or-later
"""

__version__ = "1.0.0"
