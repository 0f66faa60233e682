"""
OpenSky Network API client for historical flights and tracks.

Handles communication with the OpenSky REST API, including:
- Authentication (optional, HTTP basic auth)
- Optional begin/end/time window parameters
- Error classification (transport vs. non-200 responses)
- Decoding of flight lists and positional track payloads

Endpoints used:
    /flights/all        all flights in [begin, end]
    /flights/aircraft   flights of one icao24 in [begin, end]
    /flights/arrival    flights arriving at an airport in [begin, end]
    /flights/departure  flights departing an airport in [begin, end]
    /tracks/all         trajectory of one icao24 around a point in time

If no flights are found for the given period the API answers 404, which
surfaces as UpstreamError like any other non-200 status.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

import requests
from requests.auth import HTTPBasicAuth

from skytrace.coercion import datetime_to_epoch
from skytrace.config import config
from skytrace.errors import ResponseDecodeError, TransportError, UpstreamError
from skytrace.ingestion.track_parser import parse_track_response
from skytrace.models import ErrorResponse, Flight, TrackResponse, UnstructuredTrackResponse

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = 'https://opensky-network.org/api'
DEFAULT_TIMEOUT_SECONDS = 300.0


def _window_params(begin: Optional[datetime], end: Optional[datetime]) -> Dict[str, int]:
    """Build begin/end parameters, omitting unset bounds entirely."""
    params = {}
    if begin is not None:
        params['begin'] = datetime_to_epoch(begin)
    if end is not None:
        params['end'] = datetime_to_epoch(end)
    return params


class OpenSkyClient:
    """
    Client for the OpenSky Network historical API.

    All operations are synchronous GET requests guarded by a single
    client-wide timeout. Nothing is retried or cached; errors propagate
    to the caller as skytrace exceptions.
    """

    def __init__(
        self,
        username: Optional[str] = None,
        password: Optional[str] = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.auth = None
        if username and password:
            self.auth = HTTPBasicAuth(username, password)
            logger.info('OpenSky client initialized with authentication')
        else:
            logger.warning('OpenSky client running without authentication (lower rate limits)')

        self.session = session or requests.Session()

    @classmethod
    def from_config(cls) -> 'OpenSkyClient':
        """Create client from application configuration."""
        return cls(
            username=config.opensky.username,
            password=config.opensky.password,
            base_url=config.opensky.base_url,
            timeout=config.opensky.timeout_seconds,
        )

    def _new_request(self, path: str, params: Dict[str, Any]) -> requests.PreparedRequest:
        """Create a GET request with the Accept header and auth already set."""
        request = requests.Request(
            'GET',
            f'{self.base_url}{path}',
            params=params,
            headers={'Accept': 'application/json; charset=utf-8'},
            auth=self.auth,
        )
        return self.session.prepare_request(request)

    def _do_http(self, request: requests.PreparedRequest) -> Any:
        """
        Perform a request and return the decoded JSON body.

        Raises:
            TransportError: network failure or timeout
            UpstreamError: any status code other than 200
            ResponseDecodeError: a 200 body that is not valid JSON
        """
        logger.debug(f'Fetching {request.url}')

        # Honour REQUESTS_CA_BUNDLE, proxy variables etc. as session.get() would
        settings = self.session.merge_environment_settings(request.url, {}, None, None, None)

        try:
            response = self.session.send(request, timeout=self.timeout, **settings)
        except requests.exceptions.Timeout as e:
            logger.error('OpenSky API timeout')
            raise TransportError(str(e)) from e
        except requests.exceptions.RequestException as e:
            logger.error(f'OpenSky request failed: {e}')
            raise TransportError(str(e)) from e

        if response.status_code != 200:
            raise self._upstream_error(response)

        try:
            return response.json()
        except ValueError as e:
            raise ResponseDecodeError(f'invalid JSON body from {request.url}: {e}') from e

    @staticmethod
    def _upstream_error(response: requests.Response) -> UpstreamError:
        """Classify a non-200 response, preferring the API's own message."""
        status = response.status_code
        if status == 429:
            logger.warning('OpenSky rate limit exceeded')
        else:
            logger.error(f'OpenSky API error: {status}')

        try:
            error_body = ErrorResponse.from_dict(response.json())
        except ValueError:
            error_body = None

        if error_body is not None and error_body.message:
            return UpstreamError(status, error_body.message)
        return UpstreamError(status, f'unknown error, status code: {status}')

    def _get_flights(self, path: str, params: Dict[str, Any]) -> List[Flight]:
        data = self._do_http(self._new_request(path, params))
        if not isinstance(data, list):
            raise ResponseDecodeError(
                f'expected JSON array of flights, got {type(data).__name__}'
            )

        flights = [Flight.from_dict(item) for item in data]
        logger.info(f'Received {len(flights)} flights from OpenSky ({path})')
        return flights

    def get_flights(
        self,
        begin: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> List[Flight]:
        """
        Retrieve all flights within a time interval.

        Flights departed and arrived within the [begin, end] boundaries
        are returned. A None bound is left out of the query.
        """
        return self._get_flights('/flights/all', _window_params(begin, end))

    def get_flights_by_interval(
        self,
        begin: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> List[Flight]:
        """Retrieve flights for a time interval [begin, end]. Same as get_flights."""
        return self.get_flights(begin, end)

    def get_flights_by_aircraft(
        self,
        icao24: str,
        begin: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> List[Flight]:
        """Retrieve flights of the aircraft identified by icao24 within [begin, end]."""
        params = _window_params(begin, end)
        if icao24:
            params['icao24'] = icao24
        return self._get_flights('/flights/aircraft', params)

    def get_flights_by_arrival(
        self,
        airport: str,
        begin: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> List[Flight]:
        """Retrieve flights which arrived at airport (ICAO code) within [begin, end]."""
        params = _window_params(begin, end)
        if airport:
            params['airport'] = airport
        return self._get_flights('/flights/arrival', params)

    def get_flights_by_departure(
        self,
        airport: str,
        begin: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> List[Flight]:
        """Retrieve flights which departed from airport (ICAO code) within [begin, end]."""
        params = _window_params(begin, end)
        if airport:
            params['airport'] = airport
        return self._get_flights('/flights/departure', params)

    def get_track_by_aircraft(
        self,
        icao24: str,
        time: Optional[datetime] = None,
    ) -> TrackResponse:
        """
        Retrieve the trajectory of an aircraft at a given time.

        The trajectory is a list of waypoints containing position, barometric
        altitude, true track and an on-ground flag. Without a time the API
        returns the live track.

        Raises:
            InvalidWaypoint: a waypoint in the path failed validation
        """
        params: Dict[str, Any] = {}
        if icao24:
            params['icao24'] = icao24
        if time is not None:
            params['time'] = datetime_to_epoch(time)

        data = self._do_http(self._new_request('/tracks/all', params))
        track = parse_track_response(UnstructuredTrackResponse.from_dict(data))

        logger.info(f'Received track for {track.icao24} with {len(track.path)} waypoints')
        return track
