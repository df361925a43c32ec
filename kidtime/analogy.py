"""Everyday analogies for how long a duration feels."""

from kidtime.util import DAY, HOUR, MONTH, WEEK, YEAR

# (upper bound in minutes, analogy), checked in order. Durations below the
# first bound are too short to compare to anything.
ANALOGIES: tuple[tuple[float, str | None], ...] = (
    (5, None),
    (30, "waiting for coffee"),
    (HOUR, "a lunch break"),
    (3 * HOUR, "watching a movie"),
    (DAY, "a full workday"),
    (2 * DAY, "a whole weekend day"),
    (WEEK, "a long weekend away"),
    (2 * WEEK, "a week-long vacation"),
    (MONTH, "waiting for a package from overseas"),
    (3 * MONTH, "a season of your favorite show"),
    (6 * MONTH, "a whole season of the year"),
    (YEAR, "waiting for the holidays"),
    (2 * YEAR, "a full school year"),
    (5 * YEAR, "earning a degree"),
)

LONGEST = "a whole chapter of your life"


def analogy_for(total_minutes: float) -> str | None:
    """Return an everyday analogy for a duration, or None if it is trivial.

    Examples:
        >>> analogy_for(20)
        'waiting for coffee'
        >>> analogy_for(2) is None
        True
    """
    for bound, label in ANALOGIES:
        if total_minutes < bound:
            return label
    return LONGEST
