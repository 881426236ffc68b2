# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Utility functions and helpers for GreenLaunch.

This package contains cross-cutting utilities:
- logging: Structured logging with structlog
- numeric: Explicit rounding and clamping helpers
"""

from greenlaunch.utils.logging import bind_context, clear_context, get_logger, setup_logging
from greenlaunch.utils.numeric import clamp, round_half_up

__all__ = [
    # Logging
    "setup_logging",
    "get_logger",
    "bind_context",
    "clear_context",
    # Numeric
    "round_half_up",
    "clamp",
]
