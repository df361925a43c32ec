"""Caregiver-friendly age descriptions.

Whole years and months come from calendar differencing
(``dateutil.relativedelta``), so month lengths and leap years are honored.
The "remaining days" of a baby under one year are approximated with a flat
30-day month, the same constant the duration formatter uses. Near month
boundaries this drifts from the calendar by a day or two.
"""

from datetime import date, datetime, timedelta

from dateutil.relativedelta import relativedelta

from kidtime.core import coerce_instant
from kidtime.util import plural

_DAYS_PER_MONTH = 30


def _count(value: int, noun: str) -> str:
    return f"{value} {plural(value, noun)}"


def calendar_difference(
    birth: datetime | date, now: datetime | date
) -> tuple[int, int, int]:
    """Return full (years, total months, total days) elapsed since birth."""
    start = coerce_instant(birth, now, "birth")
    end = coerce_instant(now, birth, "now")
    if start.tzinfo is not None and end.tzinfo is not None:
        # Compare wall-clock fields in a single zone
        end = end.astimezone(start.tzinfo)

    delta = relativedelta(end, start)
    total_days = int((end - start) / timedelta(days=1))
    return delta.years, delta.years * 12 + delta.months, total_days


def format_age(birth: datetime | date, now: datetime | date) -> str:
    """Describe an age like ``"3 months, 12 days old"`` or ``"2 years old"``.

    Examples:
        >>> format_age(date(2024, 1, 10), date(2024, 1, 15))
        '5 days old'
        >>> format_age(date(2022, 1, 10), date(2024, 4, 15))
        '2 years, 3 months old'
    """
    years, total_months, total_days = calendar_difference(birth, now)
    months = total_months - years * 12

    if total_months == 0:
        return f"{_count(total_days, 'day')} old"

    if years == 0:
        remaining_days = total_days - months * _DAYS_PER_MONTH
        if remaining_days > 0:
            return f"{_count(months, 'month')}, {_count(remaining_days, 'day')} old"
        return f"{_count(months, 'month')} old"

    parts = [_count(years, "year")]
    if months > 0:
        parts.append(_count(months, "month"))
    return ", ".join(parts) + " old"
