"""
Shared helpers for decoding wire payloads into model objects.
"""

from typing import Any, Optional

from skytrace.coercion import is_number, number_to_int
from skytrace.errors import ResponseDecodeError, TypeMismatch

_QUOTE_CHARS = ('"', "'")


def normalize_callsign(raw: Optional[str]) -> Optional[str]:
    """
    Clean a callsign as delivered by the API.

    Some payloads double-encode the string, so one layer of surrounding
    quotes is stripped before trimming whitespace:

        ' "UAL123 " '  ->  'UAL123'
    """
    if raw is None:
        return None
    value = raw.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in _QUOTE_CHARS:
        value = value[1:-1]
    return value.strip()


def require_object(payload: Any, what: str) -> dict:
    """Ensure a decoded JSON body is an object."""
    if not isinstance(payload, dict):
        raise ResponseDecodeError(
            f'expected JSON object for {what}, got {type(payload).__name__}'
        )
    return payload


def get_str(payload: dict, key: str) -> Optional[str]:
    """Read a string field; null/absent -> None, other types are an error."""
    value = payload.get(key)
    if value is None or isinstance(value, str):
        return value
    raise ResponseDecodeError(f'field {key!r}: expected string, got {value!r}')


def get_number(payload: dict, key: str) -> Optional[float]:
    """Read a numeric field; null/absent -> None, other types are an error."""
    value = payload.get(key)
    if value is None:
        return None
    if not is_number(value):
        raise ResponseDecodeError(f'field {key!r}: expected number, got {value!r}')
    return value


def get_int(payload: dict, key: str) -> Optional[int]:
    value = get_number(payload, key)
    if value is None:
        return None
    try:
        return number_to_int(value)
    except TypeMismatch as e:
        raise ResponseDecodeError(f'field {key!r}: {e}') from e
