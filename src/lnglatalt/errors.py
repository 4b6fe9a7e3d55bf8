"""
Errors Module

This module defines the closed set of error kinds raised by the coordinate
conversions and the exception types that carry them.
"""

from enum import Enum
from typing import Any


class ErrorKind(Enum):
    """Kinds of failure a coordinate conversion can report."""

    NULL_INPUT = "null_input"
    INVALID_FORMAT = "invalid_format"
    MALFORMED_RECORD = "malformed_record"


class CoordinateError(Exception):
    """
    Base class for all coordinate conversion errors.

    Attributes:
        kind: The ErrorKind of this failure
        value: The input that was rejected
    """

    kind: ErrorKind

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value


class NullInputError(CoordinateError, TypeError):
    """A required coordinate string was None."""

    kind = ErrorKind.NULL_INPUT


class InvalidFormatError(CoordinateError, ValueError):
    """A coordinate string was malformed or out of range."""

    kind = ErrorKind.INVALID_FORMAT


class MalformedRecordError(CoordinateError, ValueError):
    """An array-form position could not be read as a coordinate triple."""

    kind = ErrorKind.MALFORMED_RECORD
