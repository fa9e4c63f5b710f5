from __future__ import annotations

import datetime
import enum
import math
import uuid
from decimal import Decimal
from typing import Any

from .errors import CastError
from .stringer import is_direct_stringer


def _format_float(value: float) -> str:
    # shortest round-trip digits, never in exponent form: 1e20 -> "100000000000000000000"
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _format_decimal(value: Decimal) -> str:
    if not value.is_finite():
        return str(value)
    return format(value, "f")


def to_string(value: Any) -> str:
    """
    Best-effort conversion of a scalar to its canonical query-string form.
    Raises CastError for containers, mappings, records and other composite values.
    """
    if isinstance(value, enum.Enum):
        return to_string(value.value)
    if isinstance(value, str):
        return str(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(int(value))
    if isinstance(value, float):
        return _format_float(float(value))
    if isinstance(value, Decimal):
        return _format_decimal(value)
    if isinstance(value, (bytes, bytearray)):
        try:
            return bytes(value).decode("utf-8")
        except UnicodeDecodeError as e:
            raise CastError(value) from e
    if value is None:
        return ""
    if isinstance(value, (datetime.date, datetime.time)):
        return value.isoformat()
    if isinstance(value, (datetime.timedelta, uuid.UUID)):
        return str(value)
    if is_direct_stringer(value):
        return value.string()
    if isinstance(value, BaseException):
        return str(value)
    raise CastError(value)
