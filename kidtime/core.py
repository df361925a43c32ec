from datetime import date, datetime, time, timedelta
from typing import Any, Literal

from kidtime.duration import ZERO, FormattedDuration, format_duration
from kidtime.util import YEAR

DEFAULT_ADULT_AGE = 30


def coerce_instant(
    value: Any, other: Any, role: Literal["birth", "now"]
) -> datetime:
    """Convert an instant argument to a datetime.

    Accepts:
    - datetime: Passed through as-is
    - date: Midnight of that day, in the timezone of the other instant if it
      is an aware datetime, naive otherwise

    Raises:
        TypeError: If the value is not a date or datetime
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        tz = other.tzinfo if isinstance(other, datetime) else None
        return datetime.combine(value, time.min, tzinfo=tz)
    raise TypeError(
        f"{role} instant must be a datetime or date.\n"
        f"Got {type(value).__name__!r}: {value!r}\n"
        f"Examples:\n"
        f"  age_in_minutes(datetime(2024, 3, 1, tzinfo=timezone.utc), now)\n"
        f"  age_in_minutes(date(2024, 3, 1), date.today())"
    )


def elapsed(birth: datetime | date, now: datetime | date) -> timedelta:
    """Return ``now - birth`` after coercing both instants to datetimes."""
    start = coerce_instant(birth, now, "birth")
    end = coerce_instant(now, birth, "now")
    return end - start


def age_in_minutes(birth: datetime | date, now: datetime | date) -> int:
    """Whole minutes between birth and now, truncated toward zero.

    A birth instant in the future yields a negative age, which the other
    calculations treat the same as an age of zero.
    """
    return int(elapsed(birth, now) / timedelta(minutes=1))


def percent_of_life(duration_minutes: float, age_minutes: float) -> float:
    """What percentage of a life of ``age_minutes`` the duration represents.

    Values above 100 are returned as-is. Non-positive ages yield 0.
    """
    if age_minutes <= 0:
        return 0.0
    return (duration_minutes / age_minutes) * 100


def adult_equivalent(
    duration_minutes: float,
    kid_age_minutes: float,
    adult_age_years: float = DEFAULT_ADULT_AGE,
) -> FormattedDuration:
    """Scale a duration to the same share of a reference adult's life.

    The adult's age is converted with a flat 365-day year, so the result is
    ``duration / kid_age * adult_age`` expressed in its natural unit.

    Args:
        duration_minutes: Duration experienced by the child, in minutes
        kid_age_minutes: The child's age in minutes
        adult_age_years: Age of the reference adult in years (default 30)

    Returns:
        The equivalent duration for the adult, or zero minutes when the
        child's age is not positive

    Examples:
        >>> adult_equivalent(120, 525600).raw  # 2h flight at age one
        '2.5 days'
    """
    if kid_age_minutes <= 0:
        return ZERO

    adult_age_minutes = adult_age_years * YEAR
    equivalent_minutes = (duration_minutes / kid_age_minutes) * adult_age_minutes
    return format_duration(equivalent_minutes)
