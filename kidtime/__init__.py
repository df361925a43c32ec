from importlib.resources import files

from .age import format_age
from .analogy import analogy_for
from .core import adult_equivalent, age_in_minutes, percent_of_life
from .duration import FormattedDuration, format_duration
from .insight import (
    Child,
    LifeShare,
    compare,
    daily_insight,
    life_share,
    share_message,
)
from .percent import bar_width, format_percent
from .presets import PRESETS, Preset, daily_preset, to_minutes
from .settings import DEFAULT_SETTINGS, Settings, parse_adult_age
from .util import DAY, HOUR, MINUTE, MONTH, WEEK, YEAR

# Load documentation files for programmatic access by agents and code-aware tools
_docs_path = files(__package__) / "docs"
docs = {
    "readme": (_docs_path / "README.md").read_text(),
    "api": (_docs_path / "API.md").read_text(),
}

__all__ = [
    "age_in_minutes",
    "percent_of_life",
    "adult_equivalent",
    "format_duration",
    "FormattedDuration",
    "format_age",
    "format_percent",
    "bar_width",
    "analogy_for",
    "Settings",
    "DEFAULT_SETTINGS",
    "parse_adult_age",
    "Preset",
    "PRESETS",
    "daily_preset",
    "to_minutes",
    "Child",
    "LifeShare",
    "life_share",
    "compare",
    "share_message",
    "daily_insight",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
    "MONTH",
    "YEAR",
    "docs",
]
