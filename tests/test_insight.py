"""Tests for child comparisons, share messages and daily insights."""

import logging
from datetime import date, datetime, timedelta, timezone

import pytest

from kidtime import (
    Child,
    compare,
    daily_insight,
    daily_preset,
    format_age,
    life_share,
    share_message,
)
from kidtime.duration import ZERO
from kidtime.util import YEAR

NOW = datetime(2025, 5, 1, 9, 30, 0, tzinfo=timezone.utc)
ONE_YEAR_AGO = datetime(2024, 5, 1, 9, 30, 0, tzinfo=timezone.utc)


def _child(**overrides) -> Child:
    fields = {
        "id": "test-id-1",
        "name": "Jett",
        "birth_date": ONE_YEAR_AGO,
        "color": "#6C63FF",
    }
    fields.update(overrides)
    return Child(**fields)


def test_child_from_record_parses_iso_birth_date():
    child = Child.from_record(
        {
            "id": "test-id-1",
            "name": "Jett",
            "birthDate": "2023-06-15T00:00:00.000Z",
            "color": "#FF6B6B",
            "createdAt": "2024-01-01T00:00:00.000Z",
        }
    )

    assert child.id == "test-id-1"
    assert child.name == "Jett"
    assert child.birth_date == datetime(2023, 6, 15, tzinfo=timezone.utc)
    assert child.color == "#FF6B6B"


def test_child_from_record_defaults_color():
    child = Child.from_record(
        {"id": "a", "name": "Luna", "birthDate": "2024-01-01T00:00:00Z"}
    )
    assert child.color == "#6C63FF"


def test_child_from_record_requires_fields():
    with pytest.raises(ValueError, match="missing birthDate"):
        Child.from_record({"id": "a", "name": "Luna"})


def test_child_from_record_rejects_malformed_date():
    with pytest.raises(ValueError):
        Child.from_record({"id": "a", "name": "Luna", "birthDate": "not-a-date"})


def test_child_age_helpers():
    child = _child()

    assert child.age_in_minutes(NOW) == YEAR
    assert child.age_label(NOW) == "1 year old"


def test_life_share_two_hour_flight_for_one_year_old():
    """A 2-hour flight is ~0.0228% of a year and feels like 2.5 days at 30."""
    share = life_share(120, ONE_YEAR_AGO, NOW)

    assert share.age_minutes == YEAR
    assert share.percent == pytest.approx(0.0228, abs=1e-4)
    assert share.percent_text == "0.023%"
    assert share.equivalent.value == 2.5
    assert share.equivalent.unit == "days"
    assert share.equivalent_minutes == pytest.approx(3600)
    assert share.analogy == "a long weekend away"
    assert share.bar_width == 0.5
    assert share.adult_age == 30


def test_life_share_for_future_birth_is_neutral():
    share = life_share(60, NOW + timedelta(days=1), NOW)

    assert share.percent == 0
    assert share.equivalent == ZERO
    assert share.analogy is None
    assert share.bar_width == 0


def test_life_share_uses_adult_age():
    share = life_share(120, ONE_YEAR_AGO, NOW, adult_age=60)
    assert share.equivalent.raw == "5 days"


def test_compare_keeps_child_order():
    baby = _child(id="baby", name="Luna", birth_date=ONE_YEAR_AGO)
    grown = _child(id="grown", name="Ada", birth_date=NOW - timedelta(days=30 * 365))

    results = compare([baby, grown], 120, NOW)

    assert [child.id for child, _ in results] == ["baby", "grown"]
    assert results[0][1].equivalent.raw == "2.5 days"
    assert results[1][1].equivalent.raw == "2 hours"


def test_compare_with_no_children():
    assert compare([], 120, NOW) == []


def test_share_message_for_preset():
    message = share_message("2-Hour Plane Ride", "0.023%", "Jett", 30, "2.5 days")

    assert message == (
        "Did you know? A 2-hour plane ride is 0.023% of Jett's life! "
        "To a 30-year-old, that feels like 2.5 days."
        "\n\n— Time Through Their Eyes"
    )


def test_share_message_for_custom_duration_without_name():
    message = share_message("3 hours", "0.5%", None, 42.0, "1.2 days", preset=False)

    assert message.startswith("Did you know? 3 hours is 0.5% of your child's life!")
    assert "To a 42-year-old, that feels like 1.2 days." in message


def test_daily_insight_uses_preset_of_the_day():
    child = _child()

    insight = daily_insight(child, NOW)

    assert insight.preset == daily_preset(child.id, date(2025, 5, 1))
    assert insight.age_label == format_age(child.birth_date, NOW)
    assert insight.share.duration_minutes == insight.preset.minutes
    assert insight.sentence == (
        f"A {insight.preset.label.lower()} feels like "
        f"{insight.share.equivalent.raw} to you"
    )


def test_daily_insight_accepts_a_date():
    child = _child()

    insight = daily_insight(child, date(2025, 5, 1))

    assert insight.preset == daily_preset(child.id, date(2025, 5, 1))
    # 11 calendar months and 364 days, counted against 30-day months
    assert insight.age_label == "11 months, 34 days old"


def test_daily_insight_logs_pick(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.DEBUG, logger="kidtime.insight"):
        daily_insight(_child(), NOW)

    assert "Daily insight for Jett" in caplog.text
