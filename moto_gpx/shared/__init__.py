"""
Shared utilities (NOT GPX parsing logic).

Usage:
    from moto_gpx.shared import haversine, calculate_elevation_changes
    from moto_gpx.shared.formatters import format_distance_km
"""
from .geo import (
    haversine,
    calculate_total_distance,
    EARTH_RADIUS_KM,
)
from .elevation import (
    calculate_elevation_changes,
    known_elevations,
)
from .rounding import (
    round_half_up,
    round_to_int,
)
from .formatters import (
    format_duration_min,
    format_distance_km,
    format_elevation,
)

__all__ = [
    # geo
    "haversine",
    "calculate_total_distance",
    "EARTH_RADIUS_KM",
    # elevation
    "calculate_elevation_changes",
    "known_elevations",
    # rounding
    "round_half_up",
    "round_to_int",
    # formatters
    "format_duration_min",
    "format_distance_km",
    "format_elevation",
]
