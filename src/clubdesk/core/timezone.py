"""Time helpers: UTC now, calendar windows and display conversion."""

from datetime import datetime
from typing import Optional

import pytz
from dateutil.relativedelta import relativedelta

from clubdesk.config.settings import get_settings

UTC = pytz.utc


def now_utc() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(UTC)


def to_utc(dt: datetime) -> datetime:
    """Convert a datetime to UTC."""
    if dt.tzinfo is None:
        # Naive datetimes are stored as UTC
        return UTC.localize(dt)
    return dt.astimezone(UTC)


def month_start(dt: datetime) -> datetime:
    """Midnight UTC of the first day of dt's month."""
    dt = to_utc(dt)
    return dt.replace(day=1, hour=0, minute=0, second=0, microsecond=0)


def year_start(dt: datetime) -> datetime:
    """Midnight UTC of January 1st of dt's year."""
    return month_start(dt).replace(month=1)


def shift_months(dt: datetime, months: int) -> datetime:
    """Shift dt by a number of calendar months (negative goes back)."""
    return dt + relativedelta(months=months)


def to_display_tz(dt: datetime, tz_name: Optional[str] = None) -> datetime:
    """Convert a datetime to the facility display timezone."""
    tz = pytz.timezone(tz_name or get_settings().display_timezone)
    return to_utc(dt).astimezone(tz)
