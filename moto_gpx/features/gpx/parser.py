"""
GPX Parser Service

Parses GPX documents into a ParsedTrack with route statistics.
"""

import logging
import math
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from moto_gpx.config import settings
from moto_gpx.shared.elevation import calculate_elevation_changes
from moto_gpx.shared.formatters import (
    format_distance_km,
    format_duration_min,
    format_elevation,
)
from moto_gpx.shared.geo import calculate_total_distance
from moto_gpx.shared.rounding import round_half_up, round_to_int

from .exceptions import InsufficientPoints, MalformedDocument, NoTrackData
from .schemas import ParsedTrack, TrackPoint

logger = logging.getLogger(__name__)

# Point element tiers in priority order; only the first non-empty one is used
POINT_TIERS = ("trkpt", "rtept", "wpt")

MIN_POINTS = 2


class GPXParserService:
    """Service for parsing GPX documents."""

    def __init__(self, average_speed_kmh: Optional[float] = None):
        """
        Args:
            average_speed_kmh: Speed assumption for duration estimates.
                None means settings.average_speed_kmh, read at parse time.
        """
        if average_speed_kmh is not None:
            _check_speed(average_speed_kmh)
        self.average_speed_kmh = average_speed_kmh

    @property
    def speed_kmh(self) -> float:
        if self.average_speed_kmh is not None:
            return self.average_speed_kmh
        return settings.average_speed_kmh

    def parse(self, document: Union[str, bytes]) -> ParsedTrack:
        """
        Parse GPX content and compute route statistics.

        Args:
            document: GPX text, or raw bytes (the XML encoding
                declaration is honored)

        Returns:
            ParsedTrack with points and statistics

        Raises:
            MalformedDocument: If the input is not well-formed XML
            NoTrackData: If there are no trkpt/rtept/wpt elements
            InsufficientPoints: If fewer than 2 points have valid coordinates
        """
        root = self._parse_xml(document)
        tier, elements = self._select_tier(root)

        points: List[TrackPoint] = []
        for element in elements:
            point = self._parse_point(element)
            if point is None:
                logger.debug(
                    f"Skipping {tier} with invalid coordinates: "
                    f"lat={element.get('lat')!r} lon={element.get('lon')!r}"
                )
                continue
            points.append(point)

        skipped = len(elements) - len(points)
        if len(points) < MIN_POINTS:
            logger.warning(
                f"GPX has {len(points)} valid {tier} points "
                f"({skipped} skipped), need at least {MIN_POINTS}"
            )
            raise InsufficientPoints(len(points))

        track = self._build_track(self._extract_name(root), points)
        logger.info(
            f"Parsed GPX '{track.name or 'unnamed'}': "
            f"{track.point_count} {tier} points ({skipped} skipped), "
            f"{format_distance_km(track.total_distance_km)}, "
            f"{format_elevation(track.elevation_gain_m)} / "
            f"{format_elevation(-track.elevation_loss_m)}, "
            f"~{format_duration_min(track.estimated_duration_min)}"
        )
        return track

    def parse_file(self, path: Union[str, Path]) -> ParsedTrack:
        """Parse a local GPX file."""
        path = Path(path)
        logger.debug(f"Reading GPX file {path}")
        return self.parse(path.read_bytes())

    @staticmethod
    def _parse_xml(document: Union[str, bytes]) -> ET.Element:
        if isinstance(document, str):
            document = document.lstrip("\ufeff")  # strip BOM if present
        try:
            return ET.fromstring(document)
        except ET.ParseError as e:
            logger.error(f"Failed to parse GPX: {e}")
            raise MalformedDocument() from e

    @staticmethod
    def _select_tier(root: ET.Element) -> Tuple[str, List[ET.Element]]:
        """Return the first tier with at least one element, in document order."""
        found: Dict[str, List[ET.Element]] = {tier: [] for tier in POINT_TIERS}
        for element in root.iter():
            name = _local_name(element.tag)
            if name in found:
                found[name].append(element)

        for tier in POINT_TIERS:
            if found[tier]:
                logger.debug(f"Using {len(found[tier])} {tier} elements")
                return tier, found[tier]

        logger.warning("GPX contains no trkpt, rtept or wpt elements")
        raise NoTrackData()

    @staticmethod
    def _parse_point(element: ET.Element) -> Optional[TrackPoint]:
        """Build a TrackPoint, or None if lat/lon are missing or invalid."""
        lat = _parse_float(element.get("lat"))
        lon = _parse_float(element.get("lon"))
        if lat is None or lon is None:
            return None
        if not (-90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0):
            return None

        timestamp = _child_text(element, "time")
        if timestamp is not None and not timestamp.strip():
            timestamp = None

        return TrackPoint(
            latitude=lat,
            longitude=lon,
            elevation=_parse_float(_child_text(element, "ele")),
            timestamp=timestamp,
        )

    @staticmethod
    def _extract_name(root: ET.Element) -> Optional[str]:
        """
        Document name: metadata/name (GPX 1.1), gpx/name (GPX 1.0),
        then the first trk/name or rte/name. Waypoint names are ignored.
        """
        candidates = [
            _child_text(_find_child(root, "metadata"), "name"),
            _child_text(root, "name"),
            _child_text(_find_child(root, "trk"), "name"),
            _child_text(_find_child(root, "rte"), "name"),
        ]
        for candidate in candidates:
            if candidate and candidate.strip():
                return candidate.strip()
        return None

    def _build_track(self, name: Optional[str], points: List[TrackPoint]) -> ParsedTrack:
        speed = self.speed_kmh

        distance_km = round_half_up(
            calculate_total_distance([(p.latitude, p.longitude) for p in points]),
            2
        )
        gain, loss = calculate_elevation_changes([p.elevation for p in points])

        return ParsedTrack(
            name=name,
            points=tuple(points),
            total_distance_km=distance_km,
            elevation_gain_m=round_to_int(gain),
            elevation_loss_m=round_to_int(loss),
            estimated_duration_min=round_to_int(distance_km / speed * 60),
            average_speed_kmh=speed,
        )


def parse(
    document: Union[str, bytes],
    average_speed_kmh: Optional[float] = None
) -> ParsedTrack:
    """Parse a GPX document. See GPXParserService.parse."""
    return GPXParserService(average_speed_kmh).parse(document)


def parse_file(
    path: Union[str, Path],
    average_speed_kmh: Optional[float] = None
) -> ParsedTrack:
    """Parse a GPX file from disk. OSError propagates unchanged."""
    return GPXParserService(average_speed_kmh).parse_file(path)


def _check_speed(average_speed_kmh: float) -> None:
    if not (math.isfinite(average_speed_kmh) and average_speed_kmh > 0):
        raise ValueError(
            f"average_speed_kmh must be a positive number, got {average_speed_kmh}"
        )


def _local_name(tag) -> str:
    """'{http://www.topografix.com/GPX/1/1}trkpt' -> 'trkpt'."""
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def _find_child(element: Optional[ET.Element], name: str) -> Optional[ET.Element]:
    """First direct child with the given local name, ignoring namespaces."""
    if element is None:
        return None
    for child in element:
        if _local_name(child.tag) == name:
            return child
    return None


def _child_text(element: Optional[ET.Element], name: str) -> Optional[str]:
    child = _find_child(element, name)
    if child is None:
        return None
    return child.text


def _parse_float(value: Optional[str]) -> Optional[float]:
    """Parse a finite float, None on anything else."""
    if value is None:
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number
