from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import TimeEntry


class TimeEntryRepository(Protocol):
    def create(self, *, employee_name: str, work_date: date, hours: float, lunch_taken: bool) -> int:
        raise NotImplementedError

    def list_between(self, *, start_date: date, end_date: date) -> Sequence[TimeEntry]:
        """All employees' entries in the range, ordered by employee name then date."""

        raise NotImplementedError

    def delete_for_employee(self, employee_name: str) -> int:
        raise NotImplementedError
