from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta
from typing import Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..core.constants import ISO_DATE_FORMAT, WEEK_END_WEEKDAY, WEEK_LENGTH_DAYS
from ..core.exceptions import ValidationError

# "9:00 AM", "12:30 pm"; browsers may put a narrow no-break space before the period.
_CLOCK_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*([AaPp][Mm])\s*$")

_WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


def get_timezone(name: str) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        raise ValueError(f"Unknown timezone: {name!r}")


def parse_iso_date(value: Union[str, date], field_name: str = "date") -> date:
    """Parse YYYY-MM-DD string into date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValidationError(f"Invalid {field_name}: expected YYYY-MM-DD")
    try:
        return datetime.strptime(value.strip(), ISO_DATE_FORMAT).date()
    except ValueError:
        raise ValidationError(f"Invalid {field_name}: expected YYYY-MM-DD")


def format_iso_date(value: date) -> str:
    return value.strftime(ISO_DATE_FORMAT)


def now_in(tz: ZoneInfo, now: Optional[datetime] = None) -> datetime:
    """Current wall-clock time in the business timezone.

    Naive datetimes are taken to already be in ``tz``; aware ones are converted.
    Wrapped so tests can pass a fixed ``now``.
    """
    if now is None:
        return datetime.now(tz)
    if now.tzinfo is None:
        return now.replace(tzinfo=tz)
    return now.astimezone(tz)


def weekday_name(value: date) -> str:
    return _WEEKDAY_NAMES[value.weekday()]


def week_ending_for(value: date) -> date:
    """The Saturday closing the Sunday..Saturday week that contains ``value``."""
    return value + timedelta(days=(WEEK_END_WEEKDAY - value.weekday()) % WEEK_LENGTH_DAYS)


def week_bounds(week_ending: date) -> tuple[date, date]:
    return week_ending - timedelta(days=WEEK_LENGTH_DAYS - 1), week_ending


def parse_clock(value: Union[str, time, None]) -> Optional[time]:
    """Parse a 12-hour clock string ("9:00 AM") into a time of day."""
    if value is None or isinstance(value, time):
        return value
    m = _CLOCK_RE.match(value)
    if not m:
        raise ValidationError(f"Invalid clock time: {value!r} (expected h:mm AM/PM)")
    hour, minute, period = int(m.group(1)), int(m.group(2)), m.group(3).upper()
    if not 1 <= hour <= 12 or minute > 59:
        raise ValidationError(f"Invalid clock time: {value!r}")
    if period == "AM":
        hour = 0 if hour == 12 else hour
    else:
        hour = 12 if hour == 12 else hour + 12
    return time(hour=hour, minute=minute)


def format_clock(value: Optional[time]) -> Optional[str]:
    if value is None:
        return None
    hour12 = value.hour % 12 or 12
    period = "AM" if value.hour < 12 else "PM"
    return f"{hour12}:{value.minute:02d} {period}"
