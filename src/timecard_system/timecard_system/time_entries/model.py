from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..common.datetime_utils import format_iso_date


@dataclass(frozen=True)
class TimeEntry:
    """Manually entered hours for a day; independent of punch records."""

    entry_id: int
    employee_name: str
    work_date: date
    hours: float
    lunch_taken: bool = False

    def to_dict(self) -> dict:
        return {
            "id": self.entry_id,
            "employee_name": self.employee_name,
            "date": format_iso_date(self.work_date),
            "hours": float(self.hours),
            "lunch_taken": bool(self.lunch_taken),
        }
