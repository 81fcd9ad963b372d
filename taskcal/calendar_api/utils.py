"""Date helpers shared by the projector, forecaster and agenda."""

from datetime import date, datetime, timedelta
from typing import Optional

from dateutil import tz


def start_of_day(value: datetime) -> datetime:
    """Truncate to midnight, keeping the value's own tzinfo."""
    return value.replace(hour=0, minute=0, second=0, microsecond=0)


def to_local(value: datetime) -> datetime:
    """Attach the local zone (naive input) or convert into it (aware input).

    The result carries the local zone, not a fixed offset: add_days keeps
    the correct UTC offset on both sides of a daylight-saving change.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=tz.tzlocal())
    return value.astimezone(tz.tzlocal())


def add_days(value: datetime, days: int) -> datetime:
    """Add whole calendar days.

    Python adds timedeltas in wall-clock time, so the time of day survives
    month, year and daylight-saving boundaries.
    """
    return value + timedelta(days=days)


def day_of(value: datetime, reference: Optional[datetime] = None) -> date:
    """Calendar date of `value`, seen from `reference`'s timezone when both are aware."""
    if (
        reference is not None
        and reference.tzinfo is not None
        and value.tzinfo is not None
    ):
        value = value.astimezone(reference.tzinfo)
    return value.date()


def is_before_day(value: datetime, other: datetime) -> bool:
    """True when `value` falls on a strictly earlier calendar day than `other`."""
    return day_of(value) < day_of(other, value)
