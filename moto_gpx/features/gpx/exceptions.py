"""
GPX parsing errors.

All of them subclass ValueError, so handlers that wrap parsing in
`except ValueError` keep working.
"""

from typing import Optional


class GPXError(ValueError):
    """Base class for documents the engine refuses to turn into a track."""

    default_message = "Invalid GPX file"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)


class MalformedDocument(GPXError):
    """Input is not well-formed XML."""

    default_message = "GPX file format is invalid"


class NoTrackData(GPXError):
    """No trkpt, rtept or wpt element anywhere in the document."""

    default_message = "No track points found in GPX file"


class InsufficientPoints(GPXError):
    """Fewer than two points survived coordinate validation."""

    default_message = "GPX file has fewer than 2 valid track points"

    def __init__(self, valid_points: int, message: Optional[str] = None):
        self.valid_points = valid_points
        super().__init__(message)
