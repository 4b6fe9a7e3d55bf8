"""Round-trip normalization of raw coordinate values through the D:M:S form."""

import logging

from .dms import convert, format_dms

# Configure logger
logger = logging.getLogger(__name__)


def normalize(value: float) -> float:
    """
    Normalize a raw coordinate value by formatting it as D:M:S and parsing it back.

    The formatted string always carries minutes and seconds, so the result is
    validated by the strict D:M:S rules: a value whose rounded degrees or
    minutes are fractional, or whose rounded components fall out of range,
    is rejected.

    Args:
        value: Raw coordinate value

    Returns:
        Normalized decimal degrees

    Raises:
        InvalidFormatError: If the value is not finite or does not survive the round trip
    """
    formatted = format_dms(value)
    logger.debug(f"Normalizing {value!r} through {formatted!r}")
    return convert(formatted)
