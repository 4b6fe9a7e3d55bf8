"""
LngLatAlt Package

This package converts geographic positions between their array form and
signed degree:minute:second strings.

Classes:
    LngLatAlt: Longitude/latitude position with optional altitude
    LngLatAltEncoder: JSON encoder writing positions in array form
    ErrorKind: Kinds of conversion failure

Functions:
    convert: Parse a DMS string into decimal degrees
    format_dms: Render a raw value as a rounded D:M:S string
    normalize: Round-trip a raw value through the D:M:S form
    encode: Position to array form
    decode: Array form to position
    dumps_position: Position to JSON text
    loads_position: JSON text to position
"""

from .errors import (
    ErrorKind,
    CoordinateError,
    NullInputError,
    InvalidFormatError,
    MalformedRecordError,
)
from .dms import convert, format_dms
from .normalizer import normalize
from .position import LngLatAlt
from .codec import encode, decode, LngLatAltEncoder, dumps_position, loads_position

__all__ = [
    'ErrorKind',
    'CoordinateError',
    'NullInputError',
    'InvalidFormatError',
    'MalformedRecordError',
    'convert',
    'format_dms',
    'normalize',
    'LngLatAlt',
    'encode',
    'decode',
    'LngLatAltEncoder',
    'dumps_position',
    'loads_position'
]
