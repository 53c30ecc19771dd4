"""
Formatting utilities for display.

Used for upload previews and log lines.
"""


def format_duration_min(minutes: int) -> str:
    """
    Format minutes as 'Xh Ymin'.

    Args:
        minutes: Duration in whole minutes (e.g., 150)

    Returns:
        Formatted string (e.g., '2h 30min')
    """
    if minutes < 0:
        return "—"

    h = minutes // 60
    m = minutes % 60

    if h == 0:
        return f"{m}min"
    elif m == 0:
        return f"{h}h"
    else:
        return f"{h}h {m}min"


def format_distance_km(km: float) -> str:
    """
    Format distance.

    Args:
        km: Distance in kilometers

    Returns:
        Formatted string (e.g., '12.5 km' or '850 m')
    """
    if km < 1:
        return f"{int(km * 1000)} m"
    return f"{km:.1f} km"


def format_elevation(meters: float) -> str:
    """
    Format elevation with sign.

    Args:
        meters: Elevation in meters

    Returns:
        Formatted string (e.g., '+850 m')
    """
    if meters >= 0:
        return f"+{int(meters)} m"
    return f"{int(meters)} m"
