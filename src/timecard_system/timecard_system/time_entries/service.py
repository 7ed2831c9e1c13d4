from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Union
from zoneinfo import ZoneInfo

from ..common.datetime_utils import now_in, parse_iso_date, week_bounds, week_ending_for
from ..common.validators import require_non_empty, require_non_negative_number
from ..core.constants import MAX_NAME_LENGTH
from .model import TimeEntry
from .repository import TimeEntryRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WeeklyReport:
    week_start: date
    week_ending: date
    entries: list[TimeEntry]


class TimeEntryService:
    """Legacy manual hours log, kept alongside punch records."""

    def __init__(self, entries: TimeEntryRepository, *, tz: ZoneInfo):
        self._entries = entries
        self._tz = tz

    def save_time_entry(
        self,
        employee_name: str,
        work_date: Union[str, date],
        hours: Any,
        lunch_taken: bool = False,
    ) -> int:
        employee_name = require_non_empty(employee_name, "Employee name", max_length=MAX_NAME_LENGTH)
        day = parse_iso_date(work_date)
        hours = require_non_negative_number(hours, "Hours")

        entry_id = self._entries.create(
            employee_name=employee_name,
            work_date=day,
            hours=hours,
            lunch_taken=bool(lunch_taken),
        )
        logger.info("Saved %.2f hours for %s on %s (entry %s)", hours, employee_name, day, entry_id)
        return entry_id

    def weekly_report(self, *, now: datetime | None = None) -> WeeklyReport:
        week_ending = week_ending_for(now_in(self._tz, now).date())
        start, end = week_bounds(week_ending)
        entries = list(self._entries.list_between(start_date=start, end_date=end))
        return WeeklyReport(week_start=start, week_ending=end, entries=entries)
