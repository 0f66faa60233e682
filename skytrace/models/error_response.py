"""
Error body returned by the API alongside non-200 status codes.

Fields are read independently: a body whose timestamp is an ISO string
(as Spring-style error pages send) still yields its message.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from skytrace.errors import ResponseDecodeError
from skytrace.models.base import get_str, get_int


def _lenient(reader: Callable[[dict, str], Any], data: dict, key: str) -> Any:
    """Read one field, treating a wrongly typed value as absent."""
    try:
        return reader(data, key)
    except ResponseDecodeError:
        return None


@dataclass(frozen=True)
class ErrorResponse:
    timestamp: Optional[int] = None
    status: Optional[int] = None
    error: Optional[str] = None
    exception: Optional[str] = None
    message: Optional[str] = None
    path: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> Optional['ErrorResponse']:
        """Decode an error body, or None if it is not a JSON object."""
        if not isinstance(data, dict):
            return None
        return cls(
            timestamp=_lenient(get_int, data, 'timestamp'),
            status=_lenient(get_int, data, 'status'),
            error=_lenient(get_str, data, 'error'),
            exception=_lenient(get_str, data, 'exception'),
            message=_lenient(get_str, data, 'message'),
            path=_lenient(get_str, data, 'path'),
        )
