"""
Command-line access to the OpenSky historical API.

Usage examples:
    python -m skytrace flights --begin 1517227200 --end 1517230800
    python -m skytrace aircraft 3c675a --begin 1517184000 --end 1517270400
    python -m skytrace arrivals EDDF --begin 1517227200 --end 1517230800
    python -m skytrace departures EDDF --begin 1517227200 --end 1517230800
    python -m skytrace track 3c4b26 --time 0

Credentials are read from OPENSKY_USERNAME / OPENSKY_PASSWORD (or .env).
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from skytrace.coercion import epoch_to_datetime
from skytrace.config import config
from skytrace.errors import OpenSkyError
from skytrace.ingestion import OpenSkyClient

logger = logging.getLogger('skytrace')


def _epoch(value: str):
    """argparse type: epoch seconds, 0 meaning unset."""
    seconds = int(value)
    return epoch_to_datetime(seconds) if seconds else None


def _add_window(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('--begin', type=_epoch, default=None, help='Start of interval (epoch seconds)')
    parser.add_argument('--end', type=_epoch, default=None, help='End of interval (epoch seconds)')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='skytrace', description='Query OpenSky historical flight data')
    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('flights', help='All flights in an interval')
    _add_window(p)

    p = sub.add_parser('aircraft', help='Flights of one aircraft')
    p.add_argument('icao24')
    _add_window(p)

    p = sub.add_parser('arrivals', help='Flights arriving at an airport')
    p.add_argument('airport')
    _add_window(p)

    p = sub.add_parser('departures', help='Flights departing an airport')
    p.add_argument('airport')
    _add_window(p)

    p = sub.add_parser('track', help='Trajectory of one aircraft')
    p.add_argument('icao24')
    p.add_argument('--time', type=_epoch, default=None, help='Point in time (epoch seconds)')

    return parser


def run(args: argparse.Namespace, client: OpenSkyClient):
    """Dispatch a parsed command and return a JSON-serializable result."""
    if args.command == 'flights':
        flights = client.get_flights(args.begin, args.end)
    elif args.command == 'aircraft':
        flights = client.get_flights_by_aircraft(args.icao24, args.begin, args.end)
    elif args.command == 'arrivals':
        flights = client.get_flights_by_arrival(args.airport, args.begin, args.end)
    elif args.command == 'departures':
        flights = client.get_flights_by_departure(args.airport, args.begin, args.end)
    else:
        return client.get_track_by_aircraft(args.icao24, args.time).to_dict()
    return [flight.to_dict() for flight in flights]


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(
        level=logging.DEBUG if config.debug else logging.INFO,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        stream=sys.stderr,
    )
    args = build_parser().parse_args(argv)

    try:
        result = run(args, OpenSkyClient.from_config())
    except OpenSkyError as e:
        logger.error(f'Query failed: {e}')
        return 1

    json.dump(result, sys.stdout, indent=2)
    sys.stdout.write('\n')
    return 0


if __name__ == '__main__':
    sys.exit(main())
