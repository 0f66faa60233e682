import json
from datetime import datetime, timezone

import pytest

from conftest import FakeSession, make_response
from skytrace import __main__ as cli
from skytrace.ingestion import OpenSkyClient


def _client(*responses):
    return OpenSkyClient(base_url='https://example.test/api', session=FakeSession(responses))


def test_parser_converts_epoch_arguments():
    args = cli.build_parser().parse_args(['arrivals', 'EDDF', '--begin', '1517227200', '--end', '0'])

    assert args.airport == 'EDDF'
    assert args.begin == datetime(2018, 1, 29, 12, 0, tzinfo=timezone.utc)
    assert args.end is None


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args([])


def test_run_flights(flight_payload):
    args = cli.build_parser().parse_args(['aircraft', '3c675a'])

    result = cli.run(args, _client(make_response(200, [flight_payload])))

    assert result[0]['icao24'] == '3c675a'
    assert result[0]['callsign'] == 'DLH2VC'


def test_run_track(track_payload):
    args = cli.build_parser().parse_args(['track', '3c4b26', '--time', '1600000200'])

    result = cli.run(args, _client(make_response(200, track_payload)))

    assert result['callsign'] == 'DLH9LF'
    assert len(result['path']) == 3


def test_main_prints_json(monkeypatch, capsys, flight_payload):
    monkeypatch.setattr(
        cli.OpenSkyClient, 'from_config',
        classmethod(lambda cls: _client(make_response(200, [flight_payload]))),
    )

    assert cli.main(['flights']) == 0
    assert json.loads(capsys.readouterr().out)[0]['estDepartureAirport'] == 'EDDF'


def test_main_reports_errors(monkeypatch, capsys):
    monkeypatch.setattr(
        cli.OpenSkyClient, 'from_config',
        classmethod(lambda cls: _client(make_response(404, {'message': 'No flights found'}))),
    )

    assert cli.main(['departures', 'EDDF']) == 1
    assert capsys.readouterr().out == ''
