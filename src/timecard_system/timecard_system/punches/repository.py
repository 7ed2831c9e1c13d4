from __future__ import annotations

from datetime import date, time
from typing import Optional, Protocol, Sequence

from ..core.enums import PunchType
from .model import PunchRecord


class PunchRepository(Protocol):
    """Storage for PunchRecord rows, unique per (employee_name, work_date)."""

    def get_for_employee_and_date(self, employee_name: str, work_date: date) -> Optional[PunchRecord]:
        raise NotImplementedError

    def upsert_punch(
        self,
        *,
        employee_name: str,
        work_date: date,
        day_of_week: str,
        punch_type: PunchType,
        punch_time: time,
    ) -> int:
        """Insert the day's row, or set only the field for ``punch_type`` if it exists.

        Must be a single atomic statement keyed on (employee_name, work_date).
        Returns the row id in both cases.
        """

        raise NotImplementedError

    def set_total_hours(self, *, record_id: int, total_hours: float) -> bool:
        raise NotImplementedError

    def upsert_off_day(self, *, employee_name: str, work_date: date, day_of_week: str) -> int:
        """Insert or overwrite the day's row as an off day (times cleared, 0 hours)."""

        raise NotImplementedError

    def list_between(self, *, employee_name: str, start_date: date, end_date: date) -> Sequence[PunchRecord]:
        raise NotImplementedError

    def delete_for_employee(self, employee_name: str) -> int:
        raise NotImplementedError
