"""
skytrace - client for the OpenSky Network historical flight API.

Modules:
    models/      Typed records (Flight, TrackResponse, Waypoint) and wire helpers
    ingestion/   HTTP client, scalar coercion and positional track decoding
    errors.py    Exception hierarchy shared by the client and the decoders
    config.py    Centralized configuration from environment variables
"""

from skytrace.errors import (
    OpenSkyError,
    TransportError,
    UpstreamError,
    ResponseDecodeError,
    InvalidWaypoint,
    TypeMismatch,
)
from skytrace.ingestion import OpenSkyClient, parse_track_response, parse_waypoint
from skytrace.models import Flight, TrackResponse, Waypoint

__version__ = '1.0.0'

__all__ = [
    'OpenSkyClient',
    'parse_track_response',
    'parse_waypoint',
    'Flight',
    'TrackResponse',
    'Waypoint',
    'OpenSkyError',
    'TransportError',
    'UpstreamError',
    'ResponseDecodeError',
    'InvalidWaypoint',
    'TypeMismatch',
]
