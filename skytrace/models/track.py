"""
Track models - an aircraft's trajectory from the /tracks endpoint.

The API sends waypoints as positional arrays rather than objects:

0: time          - Unix timestamp (may be null)
1: latitude      - WGS84 latitude (may be null)
2: longitude     - WGS84 longitude (may be null)
3: baro_altitude - Barometric altitude in meters (may be null)
4: true_track    - Track angle in degrees, 0=north (may be null)
5: on_ground     - Boolean, always present

Trailing elements beyond index 5 are ignored. UnstructuredTrackResponse
holds the body before those arrays are validated; see
skytrace.ingestion.track_parser for the decoding rules.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List, Optional, Tuple

from skytrace.errors import ResponseDecodeError
from skytrace.models.base import normalize_callsign, require_object, get_str, get_number


def _isoformat(moment: Optional[datetime]) -> Optional[str]:
    return moment.isoformat() if moment else None


@dataclass(frozen=True)
class Waypoint:
    """
    One trajectory sample.

    Optional fields are None when the API reported null (or an unusable
    value); they are never defaulted to 0.
    """
    time: Optional[datetime]
    latitude: Optional[float]
    longitude: Optional[float]
    baro_altitude: Optional[float]
    true_track: Optional[float]
    on_ground: bool

    def has_position(self) -> bool:
        """Check if this waypoint has valid position data."""
        return self.latitude is not None and self.longitude is not None

    def to_dict(self) -> dict:
        return {
            'time': _isoformat(self.time),
            'latitude': self.latitude,
            'longitude': self.longitude,
            'baro_altitude': self.baro_altitude,
            'true_track': self.true_track,
            'on_ground': self.on_ground,
        }


@dataclass(frozen=True)
class TrackResponse:
    """Trajectory of one aircraft, waypoints in the order the API sent them."""
    icao24: str
    callsign: Optional[str]
    start_time: Optional[datetime]
    end_time: Optional[datetime]
    path: Tuple[Waypoint, ...] = ()

    def to_dict(self) -> dict:
        return {
            'icao24': self.icao24,
            'callsign': self.callsign,
            'startTime': _isoformat(self.start_time),
            'endTime': _isoformat(self.end_time),
            'path': [waypoint.to_dict() for waypoint in self.path],
        }


@dataclass
class UnstructuredTrackResponse:
    """
    Raw track body, before the positional waypoint arrays are validated.

    start_time/end_time stay as floats since the service does not
    guarantee integer timestamps.
    """
    icao24: str
    callsign: Optional[str]
    start_time: Optional[float]
    end_time: Optional[float]
    path: List[Any] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> 'UnstructuredTrackResponse':
        """
        Receive the track body as decoded from JSON.

        Raises:
            ResponseDecodeError: body is not an object, or path is not a list
        """
        data = require_object(data, 'track')

        path = data.get('path')
        if path is None:
            path = []
        elif not isinstance(path, list):
            raise ResponseDecodeError(f"field 'path': expected list, got {type(path).__name__}")

        return cls(
            icao24=get_str(data, 'icao24') or '',
            callsign=normalize_callsign(get_str(data, 'callsign')),
            start_time=get_number(data, 'startTime'),
            end_time=get_number(data, 'endTime'),
            path=path,
        )
