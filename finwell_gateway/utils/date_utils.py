"""Date manipulation utilities"""

import calendar
from datetime import date, datetime, timedelta, timezone


def add_months(from_date: date, months: int) -> date:
    """Shift by whole months, clamping the day to the target month's length"""
    month_index = from_date.month - 1 + months
    year = from_date.year + month_index // 12
    month = month_index % 12 + 1
    day = min(from_date.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def future_month_label(offset: int, today: date | None = None) -> str:
    """Label like "October 2026" for the month `offset` months from today"""
    today = today or date.today()
    target = add_months(today.replace(day=1), offset)
    return f"{calendar.month_name[target.month]} {target.year}"


def fixed_offset_timestamp(offset_hours: int = 2, now: datetime | None = None) -> str:
    """
    Current instant rendered as YYYY-MM-DDTHH:MM:SS+HH:00 in a fixed offset.

    The default offset is Johannesburg time (UTC+2), applied regardless of
    the server's own timezone.
    """
    now = now or datetime.now(timezone.utc)
    local = now.astimezone(timezone(timedelta(hours=offset_hours)))
    return local.replace(microsecond=0).isoformat()
