from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Optional

from ..common.datetime_utils import format_clock, format_iso_date


@dataclass(frozen=True)
class PunchRecord:
    """One attendance row per (employee_name, work_date)."""

    record_id: int
    employee_name: str
    work_date: date
    day_of_week: str
    punch_in_time: Optional[time] = None
    punch_out_time: Optional[time] = None
    lunch_start_time: Optional[time] = None
    lunch_end_time: Optional[time] = None
    total_hours: float = 0.0
    is_off_day: bool = False

    def to_dict(self) -> dict:
        return {
            "id": self.record_id,
            "employee_name": self.employee_name,
            "date": format_iso_date(self.work_date),
            "day_of_week": self.day_of_week,
            "punch_in_time": format_clock(self.punch_in_time),
            "punch_out_time": format_clock(self.punch_out_time),
            "lunch_start_time": format_clock(self.lunch_start_time),
            "lunch_end_time": format_clock(self.lunch_end_time),
            "total_hours": float(self.total_hours),
            "is_off_day": bool(self.is_off_day),
        }
