"""
GPX serializer.

Writes a ParsedTrack back out as a minimal GPX 1.1 document for download.
Points are always written as trkpt, whatever tier they were parsed from.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import List, Optional
from xml.sax.saxutils import escape

from moto_gpx.config import settings

from .schemas import ParsedTrack, TrackPoint

GPX_NAMESPACE = "http://www.topografix.com/GPX/1/1"

# saxutils.escape covers &, < and >
_EXTRA_ENTITIES = {'"': "&quot;", "'": "&apos;"}


def escape_xml(value: str) -> str:
    """Escape &, <, >, " and ' for text and attribute content."""
    return escape(value, _EXTRA_ENTITIES)


def format_number(value: float) -> str:
    """
    Shortest text that parses back to the same float, no exponent.

    Examples:
        50.0 -> '50', 39.9 -> '39.9', 1e-05 -> '0.00001'
    """
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def serialize(
    track: ParsedTrack,
    title: str,
    created_at: Optional[datetime] = None
) -> str:
    """
    Generate GPX file content for a parsed track.

    Args:
        track: Parsed track
        title: Route title, used as metadata and track name
        created_at: Metadata timestamp; defaults to now. Naive datetimes
            are taken as local time.

    Returns:
        GPX 1.1 document as text
    """
    created_at = created_at or datetime.now(timezone.utc)
    name = escape_xml(title)

    lines: List[str] = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<gpx version="1.1" creator="{escape_xml(settings.gpx_creator)}" '
        f'xmlns="{GPX_NAMESPACE}">',
        '  <metadata>',
        f'    <name>{name}</name>',
        f'    <time>{_format_time(created_at)}</time>',
        '  </metadata>',
        '  <trk>',
        f'    <name>{name}</name>',
        '    <trkseg>',
    ]
    for point in track.points:
        lines.extend(_trkpt_lines(point))
    lines.extend([
        '    </trkseg>',
        '  </trk>',
        '</gpx>',
    ])
    return "\n".join(lines) + "\n"


def _trkpt_lines(point: TrackPoint) -> List[str]:
    lines = [
        f'      <trkpt lat="{format_number(point.latitude)}" '
        f'lon="{format_number(point.longitude)}">'
    ]
    if point.elevation is not None:
        lines.append(f'        <ele>{format_number(point.elevation)}</ele>')
    if point.timestamp is not None:
        lines.append(f'        <time>{escape_xml(point.timestamp)}</time>')
    lines.append('      </trkpt>')
    return lines


def _format_time(value: datetime) -> str:
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
