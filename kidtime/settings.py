"""User settings for comparisons.

The settings record is persisted by the caller (``{"adultAge": 30}``); this
module only validates and converts it.
"""

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from kidtime.core import DEFAULT_ADULT_AGE
from kidtime.util import format_number, round_half_up

logger = logging.getLogger(__name__)

# Leading decimal number, the part of the text a number parser would read
_LEADING_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

MIN_ADULT_AGE = 1
MAX_ADULT_AGE = 120


def _check_adult_age(age: float) -> None:
    if not MIN_ADULT_AGE <= age <= MAX_ADULT_AGE:
        raise ValueError(
            f"Adult age must be between {MIN_ADULT_AGE} and {MAX_ADULT_AGE} years.\n"
            f"Got: {age!r}\n"
            f"Hint: The default reference adult is {DEFAULT_ADULT_AGE} years old."
        )


@dataclass(frozen=True, kw_only=True)
class Settings:
    """Comparison settings.

    Attributes:
        adult_age: Age in years of the reference adult that durations are
            compared against
    """

    adult_age: float = DEFAULT_ADULT_AGE

    def __post_init__(self) -> None:
        _check_adult_age(self.adult_age)

    @classmethod
    def from_record(cls, record: Mapping[str, Any] | None) -> "Settings":
        """Build settings from a persisted record, falling back to defaults.

        Both ``adultAge`` (the stored key) and ``adult_age`` are accepted.
        Unknown keys are ignored.
        """
        if not record:
            return cls()
        age = record.get("adultAge", record.get("adult_age"))
        if age is None:
            return cls()
        if not isinstance(age, (int, float)):
            try:
                age = float(age)
            except (TypeError, ValueError):
                raise ValueError(
                    f"Stored adult age must be a number.\n"
                    f"Got {type(age).__name__!r}: {age!r}\n"
                    f"Hint: Save settings as {{'adultAge': {DEFAULT_ADULT_AGE}}}."
                ) from None
        return cls(adult_age=age)

    def to_record(self) -> dict[str, Any]:
        """Return the record shape used for persistence."""
        return {"adultAge": self.adult_age}

    @property
    def adult_age_label(self) -> str:
        """The adult age for display, e.g. ``"30"`` in "a 30-year-old"."""
        return format_number(self.adult_age)


DEFAULT_SETTINGS = Settings()


def parse_adult_age(text: str) -> int:
    """Parse a user-entered adult age into the whole number of years to save.

    Raises:
        ValueError: If the text is not a number or is outside 1-120
    """
    match = _LEADING_NUMBER.match(text)
    if match is None:
        raise ValueError(
            f"Adult age must be a number.\n"
            f"Got: {text!r}\n"
            f"Hint: Enter an age between {MIN_ADULT_AGE} and {MAX_ADULT_AGE}."
        )

    age = float(match.group(1))
    _check_adult_age(age)

    rounded = int(round_half_up(age))
    logger.debug("Parsed adult age %r as %d", text, rounded)
    return rounded
