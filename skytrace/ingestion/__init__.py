"""
Data ingestion module for skytrace.

Handles querying the OpenSky API and decoding its positional track
payloads into typed models.
"""

from skytrace.ingestion.opensky_client import OpenSkyClient
from skytrace.ingestion.track_parser import parse_track_response, parse_waypoint

__all__ = ['OpenSkyClient', 'parse_track_response', 'parse_waypoint']
