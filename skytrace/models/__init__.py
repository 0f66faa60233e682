"""
Data models for skytrace.

Immutable dataclasses decoded from OpenSky API payloads:
1. Flight - named-field records from the /flights endpoints
2. TrackResponse / Waypoint - trajectories from the /tracks endpoint
3. ErrorResponse - error bodies accompanying non-200 responses
"""

from skytrace.models.base import normalize_callsign
from skytrace.models.error_response import ErrorResponse
from skytrace.models.flight import Flight
from skytrace.models.track import TrackResponse, UnstructuredTrackResponse, Waypoint

__all__ = [
    'normalize_callsign',
    'ErrorResponse',
    'Flight',
    'TrackResponse',
    'UnstructuredTrackResponse',
    'Waypoint',
]
