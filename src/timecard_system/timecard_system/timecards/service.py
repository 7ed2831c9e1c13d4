from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Optional, Sequence, Union
from zoneinfo import ZoneInfo

from ..common.datetime_utils import (
    format_clock,
    format_iso_date,
    now_in,
    parse_iso_date,
    week_bounds,
    week_ending_for,
    weekday_name,
)
from ..common.validators import require_non_empty
from ..core.constants import CSV_HEADERS, WEEK_LENGTH_DAYS
from ..core.enums import DayStatus
from ..punches.model import PunchRecord
from ..punches.repository import PunchRepository


@dataclass(frozen=True)
class TimecardDay:
    """One calendar slot of the week, with the day's record if there is one."""

    work_date: date
    record: Optional[PunchRecord] = None

    @property
    def hours(self) -> float:
        return record_hours(self.record) if self.record else 0.0

    def to_dict(self) -> dict:
        day_name = weekday_name(self.work_date)
        return {
            "date": format_iso_date(self.work_date),
            "dayOfWeek": day_name,
            "shortDay": day_name[:3],
            "record": self.record.to_dict() if self.record else None,
            "formattedHours": format_hours(self.hours),
        }


@dataclass(frozen=True)
class Timecard:
    employee_name: str
    week_ending: date
    records: list[PunchRecord]
    total_hours: float
    days: list[TimecardDay] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "timecard": [r.to_dict() for r in self.records],
            "totalHours": self.total_hours,
            "formattedTotalHours": format_hours(self.total_hours),
            "days": [d.to_dict() for d in self.days],
            "weekEnding": format_iso_date(self.week_ending),
            "employeeName": self.employee_name,
        }


def format_hours(decimal_hours: float) -> str:
    """Decimal hours as ``H:MM``; minutes round half up and carry into the hour."""

    if decimal_hours <= 0:
        return "0:00"
    hours = int(decimal_hours)
    minutes = int((decimal_hours - hours) * 60 + 0.5)
    if minutes == 60:
        hours, minutes = hours + 1, 0
    return f"{hours}:{minutes:02d}"


def week_days(week_ending: date, records: Sequence[PunchRecord]) -> list[TimecardDay]:
    """The 7 days ending on ``week_ending`` with records joined on by date."""

    by_date = {r.work_date: r for r in records}
    start, _ = week_bounds(week_ending)
    slots = []
    for offset in range(WEEK_LENGTH_DAYS):
        day = start + timedelta(days=offset)
        slots.append(TimecardDay(work_date=day, record=by_date.get(day)))
    return slots


def record_hours(record: PunchRecord) -> float:
    return 0.0 if record.is_off_day else float(record.total_hours)


def total_hours(records: Sequence[PunchRecord]) -> float:
    return sum(record_hours(r) for r in records)


class TimecardService:
    """Use case: weekly (Sunday..Saturday) timecards and their CSV export."""

    def __init__(self, punches: PunchRepository, *, tz: ZoneInfo):
        self._punches = punches
        self._tz = tz

    def default_week_ending(self, *, now: datetime | None = None) -> date:
        """Upcoming (or current) Saturday in the business timezone."""
        return week_ending_for(now_in(self._tz, now).date())

    def resolve_week_ending(self, week_ending: Union[str, date, None], *, now: datetime | None = None) -> date:
        if week_ending is None or (isinstance(week_ending, str) and not week_ending.strip()):
            return self.default_week_ending(now=now)
        return parse_iso_date(week_ending, "weekEnding")

    def weekly_timecard(self, employee_name: str, week_ending: Union[str, date]) -> list[PunchRecord]:
        """Raw records for the 7 days ending on ``week_ending``, oldest first.

        Days without a record are not filled in.
        """
        employee_name = require_non_empty(employee_name, "Employee name")
        start, end = week_bounds(parse_iso_date(week_ending, "weekEnding"))
        return list(self._punches.list_between(employee_name=employee_name, start_date=start, end_date=end))

    def build_timecard(
        self,
        employee_name: str,
        week_ending: Union[str, date, None] = None,
        *,
        now: datetime | None = None,
    ) -> Timecard:
        end = self.resolve_week_ending(week_ending, now=now)
        records = self.weekly_timecard(employee_name, end)
        return Timecard(
            employee_name=employee_name.strip(),
            week_ending=end,
            records=records,
            total_hours=total_hours(records),
            days=week_days(end, records),
        )

    def export_csv(self, employee_name: str, week_ending: Union[str, date]) -> str:
        records = self.weekly_timecard(employee_name, week_ending)

        lines = [",".join(CSV_HEADERS)]
        for r in records:
            # Dates, weekday names and clock strings never contain commas.
            row = [
                f'"{r.employee_name}"',
                format_iso_date(r.work_date),
                r.day_of_week,
                format_clock(r.punch_in_time) or "",
                format_clock(r.punch_out_time) or "",
                format_clock(r.lunch_start_time) or "",
                format_clock(r.lunch_end_time) or "",
                f"{record_hours(r):.2f}",
                (DayStatus.OFF if r.is_off_day else DayStatus.WORK).value,
            ]
            lines.append(",".join(row))

        lines.append("")
        lines.append(f'"Total Weekly Hours:",{total_hours(records):.2f}')
        return "\n".join(lines)

    @staticmethod
    def csv_filename(employee_name: str, week_ending: Union[str, date]) -> str:
        day = parse_iso_date(week_ending, "weekEnding")
        safe_name = re.sub(r"\s+", "_", employee_name.strip())
        return f"timecard_{safe_name}_{format_iso_date(day)}.csv"
