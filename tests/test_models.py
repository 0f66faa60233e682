import pytest

from skytrace.errors import ResponseDecodeError
from skytrace.models import ErrorResponse, Flight, UnstructuredTrackResponse, normalize_callsign


@pytest.mark.parametrize('raw, expected', [
    (' "UAL123 " ', 'UAL123'),
    ('DLH2VC  ', 'DLH2VC'),
    ('"BAW1"', 'BAW1'),
    ("'EZY42'", 'EZY42'),
    ('""', ''),
    ('   ', ''),
    ('"unbalanced', '"unbalanced'),
])
def test_normalize_callsign(raw, expected):
    assert normalize_callsign(raw) == expected


def test_normalize_callsign_strips_only_one_layer():
    assert normalize_callsign('""AFR7""') == '"AFR7"'


def test_normalize_callsign_none():
    assert normalize_callsign(None) is None


def test_flight_from_dict(flight_payload):
    flight = Flight.from_dict(flight_payload)

    assert flight.icao24 == '3c675a'
    assert flight.first_seen == 1517220729
    assert flight.last_seen == 1517230737
    assert flight.est_departure_airport == 'EDDF'
    assert flight.est_arrival_airport is None
    assert flight.callsign == 'DLH2VC'
    assert flight.est_departure_airport_horiz_distance == 1241
    assert flight.est_departure_airport_vert_distance == 41
    assert flight.est_arrival_airport_horiz_distance is None
    assert flight.departure_airport_candidates_count == 1
    assert flight.arrival_airport_candidates_count == 0
    assert flight.first_seen_at.year == 2018


def test_flight_to_dict_uses_wire_names(flight_payload):
    data = Flight.from_dict(flight_payload).to_dict()

    assert data['firstSeen'] == 1517220729
    assert data['estDepartureAirport'] == 'EDDF'
    assert data['callsign'] == 'DLH2VC'
    assert set(data) == set(flight_payload)


def test_flight_missing_fields_are_none():
    flight = Flight.from_dict({'icao24': 'abc123'})
    assert flight.first_seen is None
    assert flight.callsign is None
    assert flight.first_seen_at is None


def test_flight_wrong_type_is_decode_error(flight_payload):
    flight_payload['firstSeen'] = 'yesterday'
    with pytest.raises(ResponseDecodeError, match='firstSeen'):
        Flight.from_dict(flight_payload)


def test_flight_is_immutable(flight_payload):
    flight = Flight.from_dict(flight_payload)
    with pytest.raises(AttributeError):
        flight.icao24 = 'other'


def test_unstructured_track_normalizes_callsign(track_payload):
    track_payload['callsign'] = ' "UAL123 " '
    raw = UnstructuredTrackResponse.from_dict(track_payload)

    assert raw.callsign == 'UAL123'
    assert raw.start_time == 1600000000.0
    assert len(raw.path) == 3


def test_unstructured_track_null_path_is_empty(track_payload):
    track_payload['path'] = None
    assert UnstructuredTrackResponse.from_dict(track_payload).path == []


@pytest.mark.parametrize('payload', [
    [],
    'track',
    {'icao24': 'abc', 'path': {'0': []}},
    {'icao24': 'abc', 'startTime': '1600000000', 'path': []},
])
def test_unstructured_track_rejects_bad_shapes(payload):
    with pytest.raises(ResponseDecodeError):
        UnstructuredTrackResponse.from_dict(payload)


def test_error_response_from_dict():
    body = ErrorResponse.from_dict({
        'timestamp': 1600000000,
        'status': 404,
        'error': 'Not Found',
        'message': 'No flights found',
        'path': '/api/flights/all',
    })
    assert body.status == 404
    assert body.message == 'No flights found'
    assert body.exception is None


def test_error_response_rejects_non_objects():
    assert ErrorResponse.from_dict(['nope']) is None
    assert ErrorResponse.from_dict('Not Found') is None


def test_error_response_wrongly_typed_fields_are_absent():
    body = ErrorResponse.from_dict({
        'timestamp': '2020-09-13T12:26:40.000+0000',
        'status': 404,
        'message': 'No flights found',
        'path': 12,
    })
    assert body.timestamp is None
    assert body.path is None
    assert body.status == 404
    assert body.message == 'No flights found'
