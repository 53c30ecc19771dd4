"""
Tests for display formatters and rounding helpers.
"""

from moto_gpx.shared.formatters import (
    format_distance_km,
    format_duration_min,
    format_elevation,
)
from moto_gpx.shared.rounding import round_half_up, round_to_int


# =============================================================================
# Test Formatters
# =============================================================================

class TestFormatDurationMin:

    def test_minutes_only(self):
        assert format_duration_min(45) == "45min"

    def test_whole_hours(self):
        assert format_duration_min(120) == "2h"

    def test_hours_and_minutes(self):
        assert format_duration_min(150) == "2h 30min"

    def test_zero(self):
        assert format_duration_min(0) == "0min"

    def test_negative(self):
        assert format_duration_min(-1) == "—"


class TestFormatDistanceKm:

    def test_kilometers(self):
        assert format_distance_km(12.46) == "12.5 km"

    def test_meters_below_one_km(self):
        assert format_distance_km(0.85) == "850 m"


class TestFormatElevation:

    def test_positive_has_plus(self):
        assert format_elevation(850) == "+850 m"

    def test_zero_has_plus(self):
        assert format_elevation(0) == "+0 m"

    def test_negative(self):
        assert format_elevation(-120) == "-120 m"


# =============================================================================
# Test Rounding
# =============================================================================

class TestRounding:
    """Halves round up, unlike the built-in round()."""

    def test_half_rounds_up(self):
        assert round_to_int(2.5) == 3
        assert round_to_int(0.5) == 1

    def test_negative_half_rounds_up(self):
        assert round_to_int(-2.5) == -2

    def test_below_half_rounds_down(self):
        assert round_to_int(2.49) == 2

    def test_returns_int(self):
        assert isinstance(round_to_int(7.0), int)

    def test_two_decimals(self):
        assert round_half_up(4.2049, 2) == 4.2
        assert round_half_up(4.2051, 2) == 4.21

    def test_zero_decimals(self):
        assert round_half_up(8.5) == 9.0
