"""
GPX track handling module.

Usage:
    from moto_gpx.features.gpx import parse, build_route_summary, serialize

Components:
- GPXParserService / parse / parse_file: GPX document -> ParsedTrack
- to_map_coordinates, extract_elevation_series, to_geojson: map & chart data
- build_route_summary: route fields for create-route handlers
- serialize: ParsedTrack -> GPX 1.1 document
- GPXError and subclasses: the three ways a document is rejected
"""

from .exceptions import GPXError, InsufficientPoints, MalformedDocument, NoTrackData
from .geometry import (
    build_route_summary,
    extract_elevation_series,
    to_geojson,
    to_map_coordinates,
)
from .parser import GPXParserService, parse, parse_file
from .schemas import LineStringGeometry, ParsedTrack, RoutePoint, RouteSummary, TrackPoint
from .serializer import escape_xml, serialize

__all__ = [
    # Services
    "GPXParserService",
    "parse",
    "parse_file",
    "to_map_coordinates",
    "extract_elevation_series",
    "to_geojson",
    "build_route_summary",
    "serialize",
    "escape_xml",
    # Schemas
    "TrackPoint",
    "ParsedTrack",
    "RoutePoint",
    "LineStringGeometry",
    "RouteSummary",
    # Errors
    "GPXError",
    "MalformedDocument",
    "NoTrackData",
    "InsufficientPoints",
]
