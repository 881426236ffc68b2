# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Numeric helpers with explicit rounding semantics.

Python's built-in round() uses banker's rounding (round(2.5) == 2). Emission
figures and scores are published with half-up rounding instead, so every
reported number goes through round_half_up().
"""

from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float, ndigits: int = 0) -> float | int:
    """Round a number half away from zero on its decimal representation.

    Ties are judged on the shortest repr of the float, not on its exact
    binary value, so round_half_up(1.0005, 3) is 1.001 even though
    1.0005 is stored slightly below the tie. JavaScript toFixed() judges
    the binary value and yields 1.000 there; published figures follow the
    decimal reading.

    Args:
        value: Number to round.
        ndigits: Decimal places to keep. Zero returns an int.

    Returns:
        The rounded value, an int when ndigits is 0.

    Example:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(1.35549, 3)
        1.355
    """
    quantum = Decimal(1).scaleb(-ndigits)
    rounded = Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    if ndigits == 0:
        return int(rounded)
    return float(rounded)


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp value into the closed interval [lower, upper]."""
    return max(lower, min(upper, value))
