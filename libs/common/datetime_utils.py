"""Datetime utilities.

Timestamps are stored as timezone-aware UTC. Membership windows are calendar
dates in the business timezone (``Settings.TIMEZONE``).

Usage:
    from libs.common.datetime_utils import utc_now

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now
    )
"""

from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

from dateutil.relativedelta import relativedelta

from libs.common.config import get_settings


def utc_now() -> datetime:
    """Return timezone-aware UTC datetime.

    This replaces the deprecated datetime.utcnow() which returns naive datetimes.
    Always use this for timestamps in the database.
    """
    return datetime.now(timezone.utc)


def local_today() -> date:
    """Return today's date in the business timezone."""
    return datetime.now(ZoneInfo(get_settings().TIMEZONE)).date()


def to_local(value: datetime) -> datetime:
    """Convert a timestamp to the business timezone; naive values are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(ZoneInfo(get_settings().TIMEZONE))


def add_months(start: date, months: int) -> date:
    """
    Add calendar months, clamping the day to the end of the target month
    (Jan 31 + 1 month => Feb 28/29).
    """
    return start + relativedelta(months=months)


def days_between(start: date, end: date) -> int:
    """Whole days from ``start`` to ``end`` (negative when end is earlier)."""
    return (end - start).days
