"""
Scalar coercion for untyped JSON values.

The OpenSky API mixes numbers, nulls and booleans in positional arrays and
is loose about which optional fields are omitted, null, or simply wrong.
Required values go through number_to_int and raise TypeMismatch; every
other extraction degrades to None instead of failing.

Note that bool is a subclass of int in Python, so every numeric check
has to exclude it explicitly (JSON true is never a number).
"""

import math
from datetime import datetime, timezone
from typing import Any, Optional

from skytrace.errors import TypeMismatch


def is_number(value: Any) -> bool:
    """True for JSON numbers (int/float), False for bool and everything else."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def number_to_int(value: Any) -> int:
    """
    Convert a JSON number to an integer, truncating toward zero.

    Raises:
        TypeMismatch: value is not a finite number
    """
    if not is_number(value):
        raise TypeMismatch(value)
    if isinstance(value, float) and not math.isfinite(value):
        raise TypeMismatch(value)
    return int(value)


def optional_float(value: Any) -> Optional[float]:
    """
    Float value of a JSON number, or None for null or any other type.

    Integers too large for a float and non-finite values (NaN/Infinity,
    which Python's json module accepts) are treated as absent.
    """
    if not is_number(value):
        return None
    try:
        result = float(value)
    except OverflowError:
        return None
    return result if math.isfinite(result) else None


def epoch_to_datetime(seconds: int) -> datetime:
    """Unix epoch seconds to an aware UTC datetime."""
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


def datetime_to_epoch(moment: datetime) -> int:
    """
    Aware (or local naive) datetime to integer epoch seconds.

    Naive datetimes are interpreted in local time, matching datetime.timestamp().
    """
    return int(moment.timestamp())
