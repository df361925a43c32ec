"""Built-in everyday durations and custom duration input."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Literal, TypeAlias

from kidtime.util import DAY, HOUR, MINUTE, WEEK

logger = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class Preset:
    label: str
    minutes: int
    icon: str


PRESETS: tuple[Preset, ...] = (
    Preset(label="30-Min Timeout", minutes=30, icon="⏰"),
    Preset(label="1-Hour Doctor Visit", minutes=60, icon="🏥"),
    Preset(label="15-Min Car Ride to School", minutes=15, icon="🚗"),
    Preset(label="2-Hour Plane Ride", minutes=120, icon="✈️"),
    Preset(label="5-Hour Car Ride", minutes=300, icon="🚙"),
    Preset(label="Day of School", minutes=420, icon="🏫"),
    Preset(label="8-Hour Sleep", minutes=480, icon="😴"),
    Preset(label="Weekend", minutes=2880, icon="🎉"),
    Preset(label="Week-Long Vacation", minutes=10080, icon="🏖️"),
    Preset(label="Summer Break", minutes=129600, icon="☀️"),
)

InputUnit: TypeAlias = Literal["minutes", "hours", "days", "weeks"]

_UNIT_TO_MINUTES: dict[InputUnit, int] = {
    "minutes": MINUTE,
    "hours": HOUR,
    "days": DAY,
    "weeks": WEEK,
}


def to_minutes(value: float, unit: InputUnit) -> float:
    """Convert a custom duration entry to minutes.

    Raises:
        ValueError: If the unit is not one of minutes, hours, days or weeks
    """
    if unit not in _UNIT_TO_MINUTES:
        valid = ", ".join(_UNIT_TO_MINUTES)
        raise ValueError(f"Invalid duration unit: '{unit}'\nValid units: {valid}\n")
    return value * _UNIT_TO_MINUTES[unit]


def _string_hash(text: str) -> int:
    """32-bit signed ``h = h * 31 + c`` hash over UTF-16 code units."""
    encoded = text.encode("utf-16-le")
    h = 0
    for i in range(0, len(encoded), 2):
        unit = encoded[i] | (encoded[i + 1] << 8)
        h = (h * 31 + unit) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return h


def daily_preset(
    child_id: str, today: date, presets: tuple[Preset, ...] = PRESETS
) -> Preset:
    """Pick the preset of the day for a child.

    The choice is stable for a given child and calendar day and changes from
    one day to the next.

    Raises:
        ValueError: If no presets are given
    """
    if not presets:
        raise ValueError("daily_preset requires at least one preset")

    # Months are zero-based in the seed so picks match previously shown ones
    seed = f"{child_id}-{today.year}-{today.month - 1}-{today.day}"
    index = abs(_string_hash(seed)) % len(presets)
    logger.debug("Daily preset for %s on %s: %d", child_id, today, index)
    return presets[index]
