"""Start and end of the current day, week, month and year in local time."""

from __future__ import annotations

from datetime import datetime, timedelta


def _today_start() -> datetime:
    return datetime.now().replace(hour=0, minute=0, second=0, microsecond=0)


def current_day() -> tuple[datetime, datetime]:
    start = _today_start()
    return start, start + timedelta(days=1)


def current_week() -> tuple[datetime, datetime]:
    """The week runs Monday to Monday."""
    today = _today_start()
    start = today - timedelta(days=today.weekday())
    return start, start + timedelta(days=7)


def current_month() -> tuple[datetime, datetime]:
    start = _today_start().replace(day=1)
    if start.month == 12:
        end = start.replace(year=start.year + 1, month=1)
    else:
        end = start.replace(month=start.month + 1)
    return start, end


def current_year() -> tuple[datetime, datetime]:
    start = _today_start().replace(month=1, day=1)
    return start, start.replace(year=start.year + 1)