"""
Elevation utility functions.

Shared functions for elevation data processing.
"""

from typing import Optional, Sequence, Tuple


def calculate_elevation_changes(
    elevations: Sequence[Optional[float]]
) -> Tuple[float, float]:
    """
    Calculate total elevation gain and loss along a route.

    Unknown samples (None) are skipped without resetting the reference:
    each known elevation is compared with the last known one before it,
    so a gap in the data never counts as a climb from or drop to zero.

    Args:
        elevations: Elevation per point in meters, None where unknown

    Returns:
        Tuple of (elevation_gain, elevation_loss) in meters, unrounded

    Example:
        >>> calculate_elevation_changes([50, 55, None, 60, 58])
        (10.0, 2.0)
    """
    gain = 0.0
    loss = 0.0
    last_known: Optional[float] = None

    for elevation in elevations:
        if elevation is None:
            continue
        if last_known is not None:
            diff = elevation - last_known
            if diff > 0:
                gain += diff
            else:
                loss += abs(diff)
        last_known = elevation

    return gain, loss


def known_elevations(elevations: Sequence[Optional[float]]) -> list[float]:
    """Drop unknown samples."""
    return [e for e in elevations if e is not None]
