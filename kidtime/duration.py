"""Human-readable durations expressed in their natural unit."""

from dataclasses import dataclass
from typing import Literal, TypeAlias

from kidtime.util import (
    DAY,
    HOUR,
    MONTH,
    WEEK,
    YEAR,
    format_number,
    plural,
    round_half_up,
    round_tenth,
)

DurationUnit: TypeAlias = Literal[
    "second",
    "seconds",
    "minute",
    "minutes",
    "hour",
    "hours",
    "day",
    "days",
    "week",
    "weeks",
    "month",
    "months",
    "year",
    "years",
]


@dataclass(frozen=True, kw_only=True)
class FormattedDuration:
    value: float
    unit: DurationUnit
    raw: str

    def __str__(self) -> str:
        return self.raw


ZERO = FormattedDuration(value=0, unit="minutes", raw="0 minutes")

# (upper bound in minutes, minutes per unit, singular noun), checked in order.
# Anything at or beyond the last bound is expressed in years.
_UNITS: tuple[tuple[int, int, str], ...] = (
    (HOUR, 1, "minute"),
    (DAY, HOUR, "hour"),
    (WEEK, DAY, "day"),
    (MONTH, WEEK, "week"),
    (YEAR, MONTH, "month"),
)


def _build(value: float, singular: str) -> FormattedDuration:
    unit = plural(value, singular)
    return FormattedDuration(
        value=value,
        unit=unit,  # pyright: ignore[reportArgumentType]
        raw=f"{format_number(value)} {unit}",
    )


def format_duration(total_minutes: float) -> FormattedDuration:
    """Express a duration in the coarsest unit that keeps it below the next one.

    Sub-minute durations are whole seconds; every other unit is rounded to
    one decimal place. Month and year use the fixed 30 and 365 day lengths.

    Args:
        total_minutes: Duration in minutes (may be fractional)

    Returns:
        FormattedDuration with the rounded value, its unit and the display text

    Examples:
        >>> format_duration(150).raw
        '2.5 hours'
        >>> format_duration(0.5).raw
        '30 seconds'
    """
    if total_minutes < 1:
        return _build(round_half_up(total_minutes * 60), "second")

    for bound, scale, singular in _UNITS:
        if total_minutes < bound:
            return _build(round_tenth(total_minutes / scale), singular)

    return _build(round_tenth(total_minutes / YEAR), "year")
