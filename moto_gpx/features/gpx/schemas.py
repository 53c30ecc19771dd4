"""
GPX-related schemas.

Pydantic models for parsed tracks and the route fields derived from them.
All models are frozen: once the parser builds them nothing mutates them.
"""

from typing import List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class TrackPoint(BaseModel):
    """Single sampled position along a route."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)
    elevation: Optional[float] = None  # None = unknown, not sea level
    timestamp: Optional[str] = None  # kept verbatim, never parsed


class ParsedTrack(BaseModel):
    """Result of parsing one GPX document."""

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    points: Tuple[TrackPoint, ...] = Field(min_length=2)

    # Metrics
    total_distance_km: float = Field(ge=0)
    elevation_gain_m: int = Field(ge=0)
    elevation_loss_m: int = Field(ge=0)
    estimated_duration_min: int = Field(ge=0)

    # Speed assumption behind estimated_duration_min
    average_speed_kmh: float = Field(gt=0)

    @property
    def point_count(self) -> int:
        return len(self.points)

    @property
    def start_point(self) -> TrackPoint:
        return self.points[0]

    @property
    def end_point(self) -> TrackPoint:
        return self.points[-1]


class RoutePoint(BaseModel):
    """Start or end coordinate of a stored route."""

    model_config = ConfigDict(frozen=True)

    lat: float
    lon: float


class LineStringGeometry(BaseModel):
    """GeoJSON LineString; coordinates are [lon, lat] or [lon, lat, ele]."""

    model_config = ConfigDict(frozen=True)

    type: Literal["LineString"] = "LineString"
    coordinates: List[List[float]]


class RouteSummary(BaseModel):
    """Route fields a create-route handler persists for an uploaded GPX."""

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None

    # Metrics
    distance_km: float
    elevation_gain_m: int
    elevation_loss_m: int
    estimated_time_min: int
    max_elevation_m: Optional[float] = None
    min_elevation_m: Optional[float] = None

    # Geometry
    geometry: LineStringGeometry
    start_point: RoutePoint
    end_point: RoutePoint
    elevation_data: List[float]

    # Points count
    points_count: int = 0

    # Route type
    is_loop: bool = False  # True if start and end points are close
