"""
Codec Module

This module converts positions to and from their array form,
[longitude, latitude] or [longitude, latitude, altitude], and provides a JSON
encoder hook for documents that embed positions.
"""

import json
import logging
import math
import numbers
from collections.abc import Sequence
from typing import Any, List, Union

import numpy as np

from .errors import MalformedRecordError
from .normalizer import normalize
from .position import LngLatAlt

# Configure logger
logger = logging.getLogger(__name__)


def _malformed(values: Any, reason: str) -> MalformedRecordError:
    logger.debug(f"Rejected position {values!r}: {reason}")
    return MalformedRecordError(f"Malformed position: {values!r} ({reason})", values)


def encode(position: LngLatAlt) -> List[float]:
    """
    Encode a position as its array form.

    Args:
        position: Position to encode

    Returns:
        [longitude, latitude], with altitude appended only when present
    """
    values = [position.longitude, position.latitude]
    if position.has_altitude():
        values.append(position.altitude)
    return values


def decode(values: Union[Sequence, np.ndarray]) -> LngLatAlt:
    """
    Decode an array-form position.

    Longitude and latitude are passed through normalize(). The altitude is
    read verbatim, and only when exactly three values are given; a NaN
    altitude is read as absent.

    Args:
        values: Sequence or 1-D array of numbers

    Returns:
        Decoded position

    Raises:
        MalformedRecordError: If values is not a flat sequence of at least two numbers
        InvalidFormatError: If longitude or latitude does not survive normalization
    """
    if isinstance(values, np.ndarray):
        if values.ndim != 1:
            raise _malformed(values, f"expected a 1-D array, got {values.ndim} dimensions")
    elif isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
        raise _malformed(values, f"expected a sequence, got {type(values).__name__}")

    if len(values) < 2:
        raise _malformed(values, f"expected at least 2 values, got {len(values)}")

    items = []
    for item in values:
        if isinstance(item, (bool, np.bool_)) or not isinstance(item, numbers.Real):
            raise _malformed(values, f"{item!r} is not a number")
        try:
            items.append(float(item))
        except OverflowError as e:
            raise _malformed(values, "value out of floating point range") from e

    longitude = normalize(items[0])
    latitude = normalize(items[1])

    altitude = None
    if len(items) == 3:
        altitude = items[2]
        if math.isnan(altitude):
            altitude = None

    return LngLatAlt(longitude, latitude, altitude)


class LngLatAltEncoder(json.JSONEncoder):
    """JSON encoder that writes LngLatAlt instances in array form."""

    def default(self, o: Any) -> Any:
        if isinstance(o, LngLatAlt):
            return encode(o)
        return super().default(o)


def dumps_position(position: LngLatAlt, **kwargs) -> str:
    """Serialize a position to a JSON array string."""
    return json.dumps(position, cls=LngLatAltEncoder, **kwargs)


def loads_position(text: str) -> LngLatAlt:
    """
    Deserialize a position from a JSON array string.

    Args:
        text: JSON text such as "[10.0, 20.0]"

    Returns:
        Decoded position

    Raises:
        MalformedRecordError: If the text is not valid JSON or not an array
        InvalidFormatError: If longitude or latitude does not survive normalization
    """
    try:
        data = json.loads(text)
    except (TypeError, ValueError) as e:
        raise _malformed(text, f"invalid JSON: {e}") from e

    if not isinstance(data, list):
        raise _malformed(text, f"expected a JSON array, got {type(data).__name__}")

    return decode(data)
