"""Display formatting for life percentages."""

import math

from kidtime.util import format_number, round_half_up


def format_percent(percent: float) -> str:
    """Format a percentage with a precision that keeps small values legible.

    - 1 and above: one decimal place (``"15.7%"``)
    - 0.01 up to 1: up to three decimals, trailing zeros trimmed (``"0.05%"``)
    - 0.0001 up to 0.01: exactly four decimals (``"0.0012%"``)
    - below that: scientific notation (``"1.00e-5%"``)

    Input is expected to be a non-negative finite number. NaN and infinities
    are echoed as-is (``"nan%"``).
    """
    if not math.isfinite(percent):
        return f"{percent}%"
    if percent >= 1:
        return f"{format_number(round_half_up(percent * 10) / 10)}%"
    if percent >= 0.01:
        return f"{format_number(round_half_up(percent * 1000) / 1000)}%"
    if percent >= 0.0001:
        return f"{percent:.4f}%"
    mantissa, exponent = f"{percent:.2e}".split("e")
    return f"{mantissa}e{int(exponent):+d}%"


def bar_width(percent: float) -> float:
    """Width of a progress bar (0-100) showing ``percent``.

    Values are clamped to the bar, and any positive share gets at least half
    a percent so that it stays visible.
    """
    clamped = min(max(percent, 0), 100)
    if clamped > 0:
        return max(clamped, 0.5)
    return 0.0
