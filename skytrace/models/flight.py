"""
Flight model - one completed flight as reported by the /flights endpoints.

Unlike track waypoints, flights arrive as JSON objects with named fields,
so decoding is a plain field-by-field read. Airports are estimated by
OpenSky and frequently null (e.g. the aircraft left coverage before
landing), which is why most fields are Optional.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from skytrace.coercion import epoch_to_datetime
from skytrace.models.base import normalize_callsign, require_object, get_str, get_int


@dataclass(frozen=True)
class Flight:
    """
    Completed flight record.

    first_seen/last_seen are epoch seconds as delivered by the API;
    use first_seen_at/last_seen_at for datetimes.
    """
    icao24: str
    first_seen: Optional[int]
    est_departure_airport: Optional[str]
    last_seen: Optional[int]
    est_arrival_airport: Optional[str]
    callsign: Optional[str]

    # Distances (meters) to the candidate airports
    est_departure_airport_horiz_distance: Optional[int]
    est_departure_airport_vert_distance: Optional[int]
    est_arrival_airport_horiz_distance: Optional[int]
    est_arrival_airport_vert_distance: Optional[int]

    departure_airport_candidates_count: Optional[int]
    arrival_airport_candidates_count: Optional[int]

    @classmethod
    def from_dict(cls, data: dict) -> 'Flight':
        """
        Decode a single flight object from the API.

        Raises:
            ResponseDecodeError: the object has a field of the wrong type
        """
        data = require_object(data, 'flight')
        return cls(
            icao24=get_str(data, 'icao24') or '',
            first_seen=get_int(data, 'firstSeen'),
            est_departure_airport=get_str(data, 'estDepartureAirport'),
            last_seen=get_int(data, 'lastSeen'),
            est_arrival_airport=get_str(data, 'estArrivalAirport'),
            callsign=normalize_callsign(get_str(data, 'callsign')),
            est_departure_airport_horiz_distance=get_int(data, 'estDepartureAirportHorizDistance'),
            est_departure_airport_vert_distance=get_int(data, 'estDepartureAirportVertDistance'),
            est_arrival_airport_horiz_distance=get_int(data, 'estArrivalAirportHorizDistance'),
            est_arrival_airport_vert_distance=get_int(data, 'estArrivalAirportVertDistance'),
            departure_airport_candidates_count=get_int(data, 'departureAirportCandidatesCount'),
            arrival_airport_candidates_count=get_int(data, 'arrivalAirportCandidatesCount'),
        )

    @property
    def first_seen_at(self) -> Optional[datetime]:
        if self.first_seen is None:
            return None
        return epoch_to_datetime(self.first_seen)

    @property
    def last_seen_at(self) -> Optional[datetime]:
        if self.last_seen is None:
            return None
        return epoch_to_datetime(self.last_seen)

    def to_dict(self) -> dict:
        """Convert back to the API's wire field names."""
        return {
            'icao24': self.icao24,
            'firstSeen': self.first_seen,
            'estDepartureAirport': self.est_departure_airport,
            'lastSeen': self.last_seen,
            'estArrivalAirport': self.est_arrival_airport,
            'callsign': self.callsign,
            'estDepartureAirportHorizDistance': self.est_departure_airport_horiz_distance,
            'estDepartureAirportVertDistance': self.est_departure_airport_vert_distance,
            'estArrivalAirportHorizDistance': self.est_arrival_airport_horiz_distance,
            'estArrivalAirportVertDistance': self.est_arrival_airport_vert_distance,
            'departureAirportCandidatesCount': self.departure_airport_candidates_count,
            'arrivalAirportCandidatesCount': self.arrival_airport_candidates_count,
        }
