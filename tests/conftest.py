import json

import pytest
import requests


def make_response(status_code: int, body=None, text: str = None) -> requests.Response:
    """Build a real requests.Response carrying a JSON (or raw text) body."""
    response = requests.Response()
    response.status_code = status_code
    if body is not None:
        text = json.dumps(body)
    response._content = (text or '').encode('utf-8')
    response._content_consumed = True
    response.encoding = 'utf-8'
    response.headers['Content-Type'] = 'application/json'
    return response


class FakeSession(requests.Session):
    """Session that records prepared requests instead of hitting the network."""

    def __init__(self, responses=None, error: Exception = None):
        super().__init__()
        self.trust_env = False
        self.responses = list(responses or [])
        self.error = error
        self.sent = []
        self.send_kwargs = []

    def send(self, request, **kwargs):
        self.sent.append(request)
        self.send_kwargs.append(kwargs)
        if self.error is not None:
            raise self.error
        response = self.responses.pop(0)
        response.request = request
        response.url = request.url
        return response


@pytest.fixture
def flight_payload():
    return {
        'icao24': '3c675a',
        'firstSeen': 1517220729,
        'estDepartureAirport': 'EDDF',
        'lastSeen': 1517230737,
        'estArrivalAirport': None,
        'callsign': 'DLH2VC  ',
        'estDepartureAirportHorizDistance': 1241,
        'estDepartureAirportVertDistance': 41,
        'estArrivalAirportHorizDistance': None,
        'estArrivalAirportVertDistance': None,
        'departureAirportCandidatesCount': 1,
        'arrivalAirportCandidatesCount': 0,
    }


@pytest.fixture
def track_payload():
    return {
        'icao24': '3c4b26',
        'callsign': 'DLH9LF  ',
        'startTime': 1600000000.0,
        'endTime': 1600003600.7,
        'path': [
            [1600000000, 50.0379, 8.5622, None, 250.0, True],
            [1600000300, 50.1, 8.7, 1200.0, 270.5, False],
            [1600000600, 50.3, 9.1, 3500.0, 271.2, False, 'padding'],
        ],
    }
