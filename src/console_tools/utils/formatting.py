"""Pure text formatting for numbers and timestamps."""

from __future__ import annotations

import math
from datetime import datetime

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_MAX_PLAIN_INTEGER = 1e15


def format_number(value: float) -> str:
    """Render *value* with the shortest round-trip representation.

    Integral values print without a fractional part (``5`` rather than
    ``5.0``); very large magnitudes keep exponent notation.
    """
    if math.isfinite(value) and value.is_integer() and abs(value) < _MAX_PLAIN_INTEGER:
        return str(int(value))
    return repr(value)


def format_timestamp(moment: datetime) -> str:
    """Render *moment* as ``YYYY-MM-DD HH:MM:SS``."""
    return moment.strftime(TIMESTAMP_FORMAT)
