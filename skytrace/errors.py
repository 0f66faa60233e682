"""
Exception hierarchy for skytrace.

Everything raised by the client derives from OpenSkyError so callers can
catch a single type. Network failures and non-200 responses are surfaced
unchanged; decode failures abort the whole response.
"""

from typing import Any, Optional


class OpenSkyError(Exception):
    """Base class for all skytrace errors."""


class TransportError(OpenSkyError):
    """Network or timeout failure while talking to the API."""


class UpstreamError(OpenSkyError):
    """The API answered with a non-200 status code."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class ResponseDecodeError(OpenSkyError):
    """A success body was not JSON, or not the shape the endpoint promises."""


class TypeMismatch(OpenSkyError):
    """A required scalar could not be coerced to the expected type."""

    def __init__(self, value: Any):
        super().__init__(f"couldn't parse {value!r} as number")
        self.value = value


class InvalidWaypoint(OpenSkyError):
    """
    A waypoint array failed validation.

    Carries the waypoint's position in the track path and the offending raw
    value. When the failure came from a scalar coercion, the TypeMismatch is
    available as `cause` (and as __cause__ via exception chaining).
    """

    def __init__(
        self,
        index: int,
        value: Any,
        reason: str,
        cause: Optional[TypeMismatch] = None,
    ):
        super().__init__(f'invalid waypoint object at position {index}: {reason}')
        self.index = index
        self.value = value
        self.reason = reason
        self.cause = cause
