"""
Derived route data for map, chart and storage consumers.

Projections of a ParsedTrack; nothing here re-reads the GPX document.
"""

from typing import List, Tuple

from moto_gpx.config import settings
from moto_gpx.shared.elevation import known_elevations
from moto_gpx.shared.geo import haversine

from .schemas import LineStringGeometry, ParsedTrack, RoutePoint, RouteSummary


def to_map_coordinates(track: ParsedTrack) -> List[Tuple[float, float]]:
    """
    Points as (longitude, latitude) pairs, the GeoJSON axis order.

    Args:
        track: Parsed track

    Returns:
        One (lon, lat) pair per point, in track order
    """
    return [(p.longitude, p.latitude) for p in track.points]


def extract_elevation_series(track: ParsedTrack) -> List[float]:
    """
    One elevation per point for charting.

    Unknown elevations become 0.0. This is lossy on purpose: charts need a
    dense numeric series. Use TrackPoint.elevation when unknown matters.
    """
    return [p.elevation if p.elevation is not None else 0.0 for p in track.points]


def to_geojson(track: ParsedTrack, include_elevation: bool = False) -> LineStringGeometry:
    """
    GeoJSON LineString for the track.

    Args:
        track: Parsed track
        include_elevation: Emit [lon, lat, ele] triples (unknown ele = 0.0)

    Returns:
        LineStringGeometry
    """
    if include_elevation:
        coordinates = [
            [lon, lat, ele]
            for (lon, lat), ele in zip(to_map_coordinates(track), extract_elevation_series(track))
        ]
    else:
        coordinates = [[lon, lat] for lon, lat in to_map_coordinates(track)]
    return LineStringGeometry(coordinates=coordinates)


def build_route_summary(track: ParsedTrack) -> RouteSummary:
    """
    Route fields for a create-route handler.

    Args:
        track: Parsed track

    Returns:
        RouteSummary with statistics, 2D geometry and endpoints
    """
    start, end = track.start_point, track.end_point
    elevations = known_elevations([p.elevation for p in track.points])

    # Check if route is a loop (start and end close together)
    start_end_distance = haversine(
        start.latitude, start.longitude,
        end.latitude, end.longitude
    )
    is_loop = start_end_distance < settings.loop_threshold_km

    return RouteSummary(
        name=track.name,
        distance_km=track.total_distance_km,
        elevation_gain_m=track.elevation_gain_m,
        elevation_loss_m=track.elevation_loss_m,
        estimated_time_min=track.estimated_duration_min,
        max_elevation_m=max(elevations) if elevations else None,
        min_elevation_m=min(elevations) if elevations else None,
        geometry=to_geojson(track),
        start_point=RoutePoint(lat=start.latitude, lon=start.longitude),
        end_point=RoutePoint(lat=end.latitude, lon=end.longitude),
        elevation_data=extract_elevation_series(track),
        points_count=track.point_count,
        is_loop=is_loop,
    )
