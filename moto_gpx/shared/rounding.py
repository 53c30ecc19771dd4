"""
Rounding helpers for reported statistics.

Python's round() uses banker's rounding (round(2.5) == 2). Route
statistics round halves up instead (2.5 -> 3, -2.5 -> -2).
"""

import math


def round_half_up(value: float, ndigits: int = 0) -> float:
    """
    Round to ndigits decimals, halves rounding up.

    Args:
        value: Value to round
        ndigits: Number of decimal places

    Returns:
        Rounded value (a float; wrap in int() for whole numbers)
    """
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def round_to_int(value: float) -> int:
    """Round half up to the nearest integer."""
    return int(math.floor(value + 0.5))
