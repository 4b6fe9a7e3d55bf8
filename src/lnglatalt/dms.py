"""
DMS Module

This module converts between decimal degrees and signed
degree[:minute[:second]] strings.

format_dms rounds each component half-up to two decimal places but writes it
in its shortest plain form: trailing fractional zeros are dropped, so
36000.0 formats as "1:0:0" rather than "1.00:0.00:0.00", and 1000.0 as
"0.03:1.67:40". Whole components therefore read back as the integer literals
convert requires for degrees and for minutes followed by seconds.

Functions:
    convert: Parse and validate a DMS string into decimal degrees
    format_dms: Render a raw value as a rounded D:M:S string
"""

import logging
import math
import numbers
import re
from decimal import Context, Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Optional

from .constants import (
    MAX_DEGREES,
    MAX_MINUTES,
    MAX_SECONDS,
    NEGATIVE_180,
    NEGATIVE_SIGN,
    NORMALIZATION_SCALE,
    ROUNDING_QUANTUM,
    SECONDS_PER_DEGREE,
    SECONDS_PER_MINUTE,
    SEPARATOR,
)
from .errors import InvalidFormatError, NullInputError

# Configure logger
logger = logging.getLogger(__name__)

_INTEGER_PATTERN = re.compile(r"[0-9]+")
_DECIMAL_PATTERN = re.compile(r"(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

# Wide enough to quantize any finite float to two places without rounding the integer part
_DECIMAL_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)


def _invalid(coordinate: Any, reason: str) -> InvalidFormatError:
    logger.debug(f"Rejected coordinate {coordinate!r}: {reason}")
    return InvalidFormatError(f"Invalid coordinate: {coordinate!r} ({reason})", coordinate)


def _parse_integer(token: str, coordinate: str) -> int:
    if not _INTEGER_PATTERN.fullmatch(token):
        raise _invalid(coordinate, f"'{token}' is not an integer")
    try:
        return int(token)
    except ValueError as e:
        # int() refuses strings beyond the interpreter's digit limit
        raise _invalid(coordinate, f"'{token[:20]}...' has too many digits") from e


def _parse_decimal(token: str, coordinate: str) -> float:
    if not _DECIMAL_PATTERN.fullmatch(token):
        raise _invalid(coordinate, f"'{token}' is not a decimal number")
    value = float(token)
    if not math.isfinite(value):
        raise _invalid(coordinate, f"'{token}' is out of floating point range")
    return value


def convert(coordinate: Optional[str]) -> float:
    """
    Convert a signed degree[:minute[:second]] string to decimal degrees.

    A single token is read as plain decimal degrees and is not range checked.
    With two or more tokens the degrees must be an integer in [0, 179], the
    minutes in [0, 59] and the seconds in [0, 59]; "-180:0:0" is the only
    accepted value beyond 179 degrees. When seconds are given the minutes
    must be an integer. Empty tokens are skipped and tokens after the
    seconds are ignored.

    Args:
        coordinate: String such as "12.5", "-12:30" or "12:30:15.5"

    Returns:
        Decimal degrees, negative when the string starts with '-'

    Raises:
        NullInputError: If coordinate is None
        InvalidFormatError: If the string is malformed or out of range

    Examples:
        >>> convert("-12:30")
        -12.5
        >>> convert("-180:0:0")
        -180.0
    """
    if coordinate is None:
        logger.debug("Rejected coordinate: None")
        raise NullInputError("Coordinate string is required, got None")
    if not isinstance(coordinate, str):
        raise _invalid(coordinate, f"expected str, got {type(coordinate).__name__}")

    text = coordinate
    negative = text.startswith(NEGATIVE_SIGN)
    if negative:
        text = text[len(NEGATIVE_SIGN):]

    tokens = [token for token in text.split(SEPARATOR) if token]
    if not tokens:
        raise _invalid(coordinate, "no degree value")

    # Plain decimal degrees, deliberately unchecked
    if len(tokens) == 1:
        value = _parse_decimal(tokens[0], coordinate)
        return -value if negative else value

    degrees = _parse_integer(tokens[0], coordinate)
    if len(tokens) > 2:
        minutes = _parse_integer(tokens[1], coordinate)
        seconds = _parse_decimal(tokens[2], coordinate)
    else:
        minutes = _parse_decimal(tokens[1], coordinate)
        seconds = 0.0

    is_negative_180 = negative and degrees == NEGATIVE_180 and minutes == 0 and seconds == 0

    if degrees < 0 or (degrees > MAX_DEGREES and not is_negative_180):
        raise _invalid(coordinate, f"degrees {degrees} out of range")
    if minutes < 0 or minutes > MAX_MINUTES:
        raise _invalid(coordinate, f"minutes {minutes} out of range")
    if seconds < 0 or seconds > MAX_SECONDS:
        raise _invalid(coordinate, f"seconds {seconds} out of range")

    value = degrees * SECONDS_PER_DEGREE + minutes * SECONDS_PER_MINUTE + seconds
    value /= SECONDS_PER_DEGREE
    return -value if negative else value


def _format_component(component: float) -> str:
    """Round half-up to two places and drop trailing fractional zeros."""
    try:
        rounded = Decimal(component).quantize(ROUNDING_QUANTUM, context=_DECIMAL_CONTEXT)
    except InvalidOperation as e:
        raise _invalid(component, "cannot round component") from e
    return format(rounded.normalize(context=_DECIMAL_CONTEXT), "f")


def format_dms(value: float) -> str:
    """
    Format a raw value as a "[-]D:M:S" string.

    The magnitude is divided by the fixed normalization scale to give the
    degrees; the minutes are the fractional part of the degrees times 60 and
    the seconds the fractional part of the minutes times 60. Each component is
    rounded half-up to two decimal places from the exact binary value of the
    float, so 59.996 seconds becomes "60". Whole components are written
    without a fractional part.

    Args:
        value: Raw coordinate value

    Returns:
        Formatted string, e.g. "1:0:0" for 36000.0

    Raises:
        InvalidFormatError: If value is NaN or infinite
    """
    if not isinstance(value, numbers.Real) or isinstance(value, bool) or not math.isfinite(value):
        raise _invalid(value, "expected a finite number")

    magnitude = abs(float(value))
    degrees = magnitude / NORMALIZATION_SCALE
    minutes = (degrees % 1) * 60
    seconds = (minutes % 1) * 60

    sign = NEGATIVE_SIGN if value < 0 else ""
    return sign + SEPARATOR.join(_format_component(c) for c in (degrees, minutes, seconds))
