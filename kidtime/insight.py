"""Comparisons of everyday durations against a child's life so far.

Combines the engine functions into the records a screen needs: the share of
the child's life, its display text, the adult-equivalent duration and the
share message.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from dateutil.parser import isoparse

from kidtime.age import format_age
from kidtime.analogy import analogy_for
from kidtime.core import (
    DEFAULT_ADULT_AGE,
    adult_equivalent,
    age_in_minutes,
    percent_of_life,
)
from kidtime.duration import FormattedDuration
from kidtime.percent import bar_width, format_percent
from kidtime.presets import PRESETS, Preset, daily_preset
from kidtime.util import YEAR, format_number

logger = logging.getLogger(__name__)

SHARE_SIGNATURE = "— Time Through Their Eyes"


@dataclass(frozen=True, kw_only=True)
class Child:
    """A child record as stored by the app.

    Attributes:
        id: Stable identifier
        name: Display name
        birth_date: Birth instant
        color: Accent color (hex)
    """

    id: str
    name: str
    birth_date: datetime
    color: str = "#6C63FF"

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Child":
        """Build a child from its persisted record (``birthDate`` is ISO-8601).

        Raises:
            ValueError: If a required field is missing or the date is malformed
        """
        missing = [key for key in ("id", "name", "birthDate") if key not in record]
        if missing:
            raise ValueError(
                f"Child record is missing {', '.join(missing)}.\n"
                f"Got keys: {sorted(record)}\n"
                f"Expected keys: id, name, birthDate (ISO-8601), color (optional)"
            )
        kwargs: dict[str, Any] = {
            "id": record["id"],
            "name": record["name"],
            "birth_date": isoparse(record["birthDate"]),
        }
        if record.get("color"):
            kwargs["color"] = record["color"]
        return cls(**kwargs)

    def age_in_minutes(self, now: datetime | date) -> int:
        return age_in_minutes(self.birth_date, now)

    def age_label(self, now: datetime | date) -> str:
        return format_age(self.birth_date, now)


@dataclass(frozen=True, kw_only=True)
class LifeShare:
    """How a duration compares to a life of a given length.

    Attributes:
        duration_minutes: The duration being compared
        age_minutes: Age of the child in minutes
        percent: Share of the child's life, in percent (may exceed 100)
        equivalent: Duration taking the same share of the adult's life
        adult_age: Age in years of the reference adult
    """

    duration_minutes: float
    age_minutes: float
    percent: float
    equivalent: FormattedDuration
    adult_age: float

    @property
    def percent_text(self) -> str:
        return format_percent(self.percent)

    @property
    def bar_width(self) -> float:
        return bar_width(self.percent)

    @property
    def equivalent_minutes(self) -> float:
        """Unrounded adult-equivalent duration in minutes."""
        if self.age_minutes <= 0:
            return 0.0
        return self.duration_minutes / self.age_minutes * self.adult_age * YEAR

    @property
    def analogy(self) -> str | None:
        """Everyday analogy for the adult-equivalent duration."""
        return analogy_for(self.equivalent_minutes)


def life_share(
    duration_minutes: float,
    birth: datetime | date,
    now: datetime | date,
    adult_age: float = DEFAULT_ADULT_AGE,
) -> LifeShare:
    """Compare a duration to the life of a child born at ``birth``.

    Examples:
        >>> share = life_share(120, date(2024, 1, 1), date(2024, 12, 31))
        >>> share.equivalent.raw
        '2.5 days'
    """
    age = age_in_minutes(birth, now)
    return LifeShare(
        duration_minutes=duration_minutes,
        age_minutes=age,
        percent=percent_of_life(duration_minutes, age),
        equivalent=adult_equivalent(duration_minutes, age, adult_age),
        adult_age=adult_age,
    )


def compare(
    children: Iterable[Child],
    duration_minutes: float,
    now: datetime | date,
    adult_age: float = DEFAULT_ADULT_AGE,
) -> list[tuple[Child, LifeShare]]:
    """Compare one duration across several children, in the given order."""
    return [
        (child, life_share(duration_minutes, child.birth_date, now, adult_age))
        for child in children
    ]


def share_message(
    label: str,
    percent_text: str,
    name: str | None,
    adult_age: float,
    equivalent_raw: str,
    *,
    preset: bool = True,
) -> str:
    """Compose the text shared from a comparison.

    Args:
        label: Preset label ("2-Hour Plane Ride") or custom entry ("3 hours")
        percent_text: Formatted share of the child's life
        name: Child's name; "your child" when empty
        adult_age: Age of the reference adult in years
        equivalent_raw: Formatted adult-equivalent duration
        preset: Whether ``label`` names a preset, which reads as "A <label>"
    """
    who = name or "your child"
    subject = f"A {label.lower()}" if preset else label
    return (
        f"Did you know? {subject} is {percent_text} of {who}'s life! "
        f"To a {format_number(adult_age)}-year-old, that feels like {equivalent_raw}."
        f"\n\n{SHARE_SIGNATURE}"
    )


@dataclass(frozen=True, kw_only=True)
class DailyInsight:
    child: Child
    preset: Preset
    age_label: str
    share: LifeShare

    @property
    def sentence(self) -> str:
        return (
            f"A {self.preset.label.lower()} feels like "
            f"{self.share.equivalent.raw} to you"
        )


def daily_insight(
    child: Child,
    now: datetime | date,
    adult_age: float = DEFAULT_ADULT_AGE,
    presets: tuple[Preset, ...] = PRESETS,
) -> DailyInsight:
    """Build the insight of the day for a child."""
    today = now.date() if isinstance(now, datetime) else now
    preset = daily_preset(child.id, today, presets)
    share = life_share(preset.minutes, child.birth_date, now, adult_age)
    logger.debug(
        "Daily insight for %s: %s -> %s", child.name, preset.label, share.equivalent
    )
    return DailyInsight(
        child=child,
        preset=preset,
        age_label=child.age_label(now),
        share=share,
    )
