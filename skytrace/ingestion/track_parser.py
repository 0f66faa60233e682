"""
Track decoding - turns positional waypoint arrays into typed Waypoints.

Validation rules per waypoint array (see skytrace.models.track for layout):
- fewer than 6 elements: invalid
- time, when not null, must be a number (truncated to epoch seconds)
- latitude/longitude/baro_altitude/true_track: a number, otherwise None
- on_ground must be a boolean

A single invalid waypoint fails the whole track. Partial trajectories are
never returned because continuity can no longer be verified.
"""

import logging
from datetime import datetime
from typing import Any, List, Optional

from skytrace.coercion import number_to_int, optional_float, epoch_to_datetime
from skytrace.errors import InvalidWaypoint, ResponseDecodeError, TypeMismatch
from skytrace.models import TrackResponse, UnstructuredTrackResponse, Waypoint

logger = logging.getLogger(__name__)

# time, lat, lon, baro_altitude, true_track, on_ground
MIN_WAYPOINT_FIELDS = 6


def parse_waypoint(raw: Any, index: int) -> Waypoint:
    """
    Parse a single waypoint array from a track response.

    Args:
        raw: Positional array as decoded from JSON
        index: Position of the waypoint in the track path (diagnostics only)

    Raises:
        InvalidWaypoint: array too short, bad time value, or bad on_ground flag
    """
    if not isinstance(raw, list):
        raise InvalidWaypoint(index, raw, f'expected array, got {type(raw).__name__}')

    if len(raw) < MIN_WAYPOINT_FIELDS:
        raise InvalidWaypoint(
            index, raw,
            f'response contains {len(raw)} values, expected at least {MIN_WAYPOINT_FIELDS}',
        )

    # time
    parsed_time: Optional[datetime] = None
    if raw[0] is not None:
        try:
            parsed_time = epoch_to_datetime(number_to_int(raw[0]))
        except TypeMismatch as e:
            raise InvalidWaypoint(index, raw[0], f'invalid time_position value: {e}', cause=e) from e
        except (OverflowError, OSError, ValueError) as e:
            raise InvalidWaypoint(index, raw[0], f'time_position out of range: {e}') from e

    # on_ground
    on_ground = raw[5]
    if not isinstance(on_ground, bool):
        raise InvalidWaypoint(index, on_ground, f'invalid on_ground value: {on_ground!r}')

    return Waypoint(
        time=parsed_time,
        latitude=optional_float(raw[1]),
        longitude=optional_float(raw[2]),
        baro_altitude=optional_float(raw[3]),
        true_track=optional_float(raw[4]),
        on_ground=on_ground,
    )


def _timestamp(value: Optional[float], name: str) -> Optional[datetime]:
    """Truncate a float epoch value to whole seconds and convert it."""
    if value is None:
        return None
    try:
        return epoch_to_datetime(number_to_int(value))
    except TypeMismatch as e:
        raise ResponseDecodeError(f'invalid {name} value: {e}') from e
    except (OverflowError, OSError, ValueError) as e:
        raise ResponseDecodeError(f'{name} out of range: {e}') from e


def parse_track_response(raw: UnstructuredTrackResponse) -> TrackResponse:
    """
    Assemble a TrackResponse from the unstructured body.

    Waypoints keep the order the API delivered them in. Decoding stops at the
    first invalid waypoint and its InvalidWaypoint is raised; nothing after it
    is looked at.
    """
    waypoints: List[Waypoint] = []
    for i, s in enumerate(raw.path):
        try:
            waypoints.append(parse_waypoint(s, i))
        except InvalidWaypoint:
            logger.debug(f'Rejecting track for {raw.icao24}: waypoint {i} invalid')
            raise

    return TrackResponse(
        icao24=raw.icao24,
        callsign=raw.callsign,
        start_time=_timestamp(raw.start_time, 'startTime'),
        end_time=_timestamp(raw.end_time, 'endTime'),
        path=tuple(waypoints),
    )
