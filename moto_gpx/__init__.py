"""
moto-gpx: GPX track parsing and route statistics for ADV Moto Hub.

Usage:
    from moto_gpx import parse, build_route_summary

    track = parse(gpx_text)
    summary = build_route_summary(track)
"""

from moto_gpx.features.gpx import (
    GPXError,
    GPXParserService,
    InsufficientPoints,
    MalformedDocument,
    NoTrackData,
    ParsedTrack,
    RouteSummary,
    TrackPoint,
    build_route_summary,
    extract_elevation_series,
    parse,
    parse_file,
    serialize,
    to_geojson,
    to_map_coordinates,
)

__version__ = "0.1.0"

__all__ = [
    "GPXParserService",
    "parse",
    "parse_file",
    "to_map_coordinates",
    "extract_elevation_series",
    "to_geojson",
    "build_route_summary",
    "serialize",
    "TrackPoint",
    "ParsedTrack",
    "RouteSummary",
    "GPXError",
    "MalformedDocument",
    "NoTrackData",
    "InsufficientPoints",
]
