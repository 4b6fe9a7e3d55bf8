"""
Position Module

This module defines the longitude/latitude/altitude triple carried by the
array codec.
"""

import math
import numbers
from typing import Any, Optional

import numpy as np

from .errors import MalformedRecordError


def _to_float(name: str, value: Any) -> float:
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise MalformedRecordError(f"{name} must be a number, got {value!r}", value)
    try:
        return float(value)
    except OverflowError as e:
        raise MalformedRecordError(f"{name} is out of floating point range", value) from e


class LngLatAlt:
    """
    A geographic position in decimal degrees with an optional altitude.

    Longitude and latitude are not range checked here. Altitude is either a
    finite number or None when absent.
    """

    __slots__ = ("longitude", "latitude", "altitude")

    def __init__(self, longitude: float, latitude: float, altitude: Optional[float] = None) -> None:
        """
        Initialize the position.

        Args:
            longitude: Longitude in decimal degrees
            latitude: Latitude in decimal degrees
            altitude: Altitude, or None when the position has none

        Raises:
            MalformedRecordError: If longitude or latitude is not a number, or
                altitude is given but is not a finite number
        """
        self.longitude = _to_float("Longitude", longitude)
        self.latitude = _to_float("Latitude", latitude)
        if altitude is not None:
            altitude = _to_float("Altitude", altitude)
            if not math.isfinite(altitude):
                raise MalformedRecordError(f"Altitude must be a finite number or None, got {altitude!r}", altitude)
        self.altitude = altitude

    def has_altitude(self) -> bool:
        return self.altitude is not None

    def to_numpy(self) -> np.ndarray:
        """Return the position as a 1-D array in wire order."""
        if self.has_altitude():
            return np.array([self.longitude, self.latitude, self.altitude])
        return np.array([self.longitude, self.latitude])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LngLatAlt):
            return NotImplemented
        return (self.longitude, self.latitude, self.altitude) == (other.longitude, other.latitude, other.altitude)

    def __hash__(self) -> int:
        return hash((self.longitude, self.latitude, self.altitude))

    def __repr__(self) -> str:
        return f"LngLatAlt(longitude={self.longitude}, latitude={self.latitude}, altitude={self.altitude})"
