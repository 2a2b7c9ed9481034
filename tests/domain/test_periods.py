"""Tests for the ISO week period helpers."""

from datetime import date

import pytest

from statement_dashboard.domain.services.periods import (
    date_to_period_key,
    generate_periods_for_range,
    period_key_to_date,
    year_month,
    year_week,
)


@pytest.mark.parametrize(
    ("time_stamp", "expected"),
    [
        ("2024-01-01", "2024-W01"),
        ("2024-01-07", "2024-W01"),
        ("2024-01-08", "2024-W02"),
        ("2024-12-30", "2025-W01"),
        ("2021-01-03", "2020-W53"),
        ("2020-12-31", "2020-W53"),
        ("2024-01-15T08:30:00+02:00", "2024-W03"),
    ],
)
def test_year_week_uses_iso_week_numbering(time_stamp, expected) -> None:
    """Weeks start on Monday and belong to the ISO week-numbering year."""
    assert year_week(time_stamp) == expected


def test_year_week_accepts_dates() -> None:
    assert year_week(date(2024, 3, 4)) == "2024-W10"


def test_year_month_takes_first_two_components() -> None:
    assert year_month("2024-03-15") == "2024-03"
    assert year_month("2024-03-15T23:59:59Z") == "2024-03"


def test_generate_periods_covers_start_to_end_week() -> None:
    """The range closes on the week of the end time stamp."""
    assert generate_periods_for_range("2024-01-01", "2024-01-15") == [
        "2024-W01",
        "2024-W02",
        "2024-W03",
    ]


def test_generate_periods_steps_dates_not_week_keys() -> None:
    """Stepping from a mid-week start still reaches the end week."""
    assert generate_periods_for_range("2024-01-03", "2024-01-08") == [
        "2024-W01",
        "2024-W02",
    ]
    assert generate_periods_for_range("2024-01-01", "2024-01-10") == [
        "2024-W01",
        "2024-W02",
    ]


def test_generate_periods_single_day_yields_one_period() -> None:
    assert generate_periods_for_range("2024-05-01", "2024-05-01") == [
        "2024-W18",
    ]


def test_generate_periods_across_iso_year_boundary() -> None:
    assert generate_periods_for_range("2020-12-28", "2021-01-11") == [
        "2020-W53",
        "2021-W01",
        "2021-W02",
    ]


def test_period_key_round_trip() -> None:
    """Week keys map to the Monday of the week and back."""
    assert period_key_to_date("2025-W01") == date(2024, 12, 30)
    assert period_key_to_date("2024-W03") == date(2024, 1, 15)
    assert date_to_period_key(date(2024, 12, 30)) == "2025-W01"
    assert date_to_period_key(period_key_to_date("2020-W53")) == "2020-W53"
