"""Utility constants and helpers for kidtime.

Time unit constants represent durations in minutes. Months and years are
fixed approximations (30 and 365 days) so that outputs stay reproducible.
"""

import math

# Time unit constants (all values in minutes)
MINUTE = 1
HOUR = 60
DAY = 1440
WEEK = 10080
MONTH = 43200
YEAR = 525600


def round_half_up(value: float) -> float:
    """Round to the nearest integer, with halves going towards +infinity.

    NaN and infinities are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    return math.floor(value + 0.5)


def round_tenth(value: float) -> float:
    """Round to one decimal place, with halves going towards +infinity."""
    return round_half_up(value * 10) / 10


def format_number(value: float) -> str:
    """Render a number without a trailing ``.0`` when it is integral."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def plural(value: float, singular: str, plural: str | None = None) -> str:
    """Pick the singular noun for exactly 1, the plural otherwise."""
    if value == 1:
        return singular
    return plural if plural is not None else f"{singular}s"
