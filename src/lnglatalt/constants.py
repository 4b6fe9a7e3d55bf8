"""Fixed constants for DMS formatting, parsing and normalization."""

from decimal import Decimal

# Raw values are treated as if already scaled by this factor before being
# split into degree, minute and second components.
NORMALIZATION_SCALE = 36000

# Each formatted component is rounded half-up to two decimal places
ROUNDING_QUANTUM = Decimal("0.01")

SEPARATOR = ":"
NEGATIVE_SIGN = "-"

# Range limits for the D:M:S path (inclusive)
MAX_DEGREES = 179
MAX_MINUTES = 59
MAX_SECONDS = 59

# Only "-180:0:0" may exceed MAX_DEGREES
NEGATIVE_180 = 180

SECONDS_PER_DEGREE = 3600.0
SECONDS_PER_MINUTE = 60.0
