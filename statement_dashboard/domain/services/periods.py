"""Calendar helpers for bucketing transactions into periods.

Weekly period keys follow ISO-8601 week numbering and are rendered as
``KKKK-Www``, where ``KKKK`` is the ISO week-numbering year. Near the turn of
the year it can differ from the calendar year: 2024-12-30 is ``2025-W01`` and
2021-01-03 is ``2020-W53``.
"""

from datetime import date, timedelta


WEEK = timedelta(days=7)


def parse_time_stamp(time_stamp: str) -> date:
    """Return the calendar date of an ISO-8601 date or date-time string.

    The date part is taken as written; no timezone conversion is applied.

    Args:
        time_stamp: ISO-8601 string such as ``2024-01-15`` or
            ``2024-01-15T08:30:00+02:00``.

    Returns:
        date: Calendar date of the time stamp.
    """
    return date.fromisoformat(time_stamp[:10])


def year_month(time_stamp: str) -> str:
    """Return the ``YYYY-MM`` part of an ISO-8601 time stamp."""
    year, month = time_stamp.split("-")[:2]
    return year + "-" + month


def year_week(value: str | date) -> str:
    """Return the ISO week identifier for a time stamp or date.

    Args:
        value: ISO-8601 string or ``date``.

    Returns:
        str: Week identifier, e.g. ``2024-W03``.
    """
    day = parse_time_stamp(value) if isinstance(value, str) else value
    iso_year, iso_week, _ = day.isocalendar()
    return f"{iso_year:04d}-W{iso_week:02d}"


def generate_periods_for_range(start: str, end: str) -> list[str]:
    """Return the ordered week identifiers covering ``start`` to ``end``.

    The loop steps a date forward seven days at a time from ``start`` while
    it stays strictly before ``end``. The week of ``end`` closes the range
    when the stepping did not reach it.

    Args:
        start: Earliest ISO-8601 time stamp of the range.
        end: Latest ISO-8601 time stamp of the range.

    Returns:
        list[str]: Week identifiers in chronological order.
    """
    current = parse_time_stamp(start)
    end_date = parse_time_stamp(end)
    periods: list[str] = []
    while current < end_date:
        periods.append(year_week(current))
        current += WEEK
    last_period = year_week(end_date)
    if not periods or periods[-1] != last_period:
        periods.append(last_period)
    return periods


def period_key_to_date(key: str) -> date:
    """Return the Monday of the ISO week named by ``key``."""
    iso_year, iso_week = key.split("-W")
    return date.fromisocalendar(int(iso_year), int(iso_week), 1)


def date_to_period_key(day: date) -> str:
    """Return the ISO week identifier containing ``day``."""
    return year_week(day)


__all__ = [
    "parse_time_stamp",
    "year_month",
    "year_week",
    "generate_periods_for_range",
    "period_key_to_date",
    "date_to_period_key",
]
