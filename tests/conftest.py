from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Optional
from zoneinfo import ZoneInfo

import pytest

from src.timecard_system.timecard_system.container import build_services
from src.timecard_system.timecard_system.core.exceptions import ConflictError
from src.timecard_system.timecard_system.employees.model import Employee
from src.timecard_system.timecard_system.punches.model import PunchRecord
from src.timecard_system.timecard_system.time_entries.model import TimeEntry

CHICAGO = ZoneInfo("America/Chicago")


class InMemoryEmployees:
    def __init__(self):
        self._by_id: dict[int, Employee] = {}
        self._id = 0

    def list_active(self):
        return sorted((e for e in self._by_id.values() if e.active), key=lambda e: e.name)

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._by_id.get(int(employee_id))

    def get_by_name(self, name: str) -> Optional[Employee]:
        for e in self._by_id.values():
            if e.name == name:
                return e
        return None

    def create(self, name: str) -> int:
        if self.get_by_name(name):
            raise ConflictError("Duplicate entry for key 'uq_employees_name'")
        self._id += 1
        self._by_id[self._id] = Employee(employee_id=self._id, name=name, active=True)
        return self._id

    def set_active(self, employee_id: int, *, active: bool) -> bool:
        e = self._by_id.get(int(employee_id))
        if not e:
            return False
        self._by_id[e.employee_id] = replace(e, active=active)
        return True


class InMemoryPunches:
    """Mirrors the unique (employee_name, work_date) key of punch_records."""

    def __init__(self):
        self._by_key: dict[tuple[str, date], PunchRecord] = {}
        self._id = 0

    def _new(self, employee_name: str, work_date: date, day_of_week: str) -> PunchRecord:
        self._id += 1
        return PunchRecord(record_id=self._id, employee_name=employee_name, work_date=work_date, day_of_week=day_of_week)

    def all(self) -> list[PunchRecord]:
        return list(self._by_key.values())

    def seed(self, record: PunchRecord) -> PunchRecord:
        self._id = max(self._id, record.record_id)
        self._by_key[(record.employee_name, record.work_date)] = record
        return record

    def get_for_employee_and_date(self, employee_name: str, work_date: date) -> Optional[PunchRecord]:
        return self._by_key.get((employee_name, work_date))

    def upsert_punch(self, *, employee_name, work_date, day_of_week, punch_type, punch_time) -> int:
        key = (employee_name, work_date)
        rec = self._by_key.get(key) or self._new(employee_name, work_date, day_of_week)
        self._by_key[key] = replace(rec, **{punch_type.field_name: punch_time})
        return rec.record_id

    def set_total_hours(self, *, record_id: int, total_hours: float) -> bool:
        for key, rec in self._by_key.items():
            if rec.record_id == record_id:
                self._by_key[key] = replace(rec, total_hours=total_hours)
                return True
        return False

    def upsert_off_day(self, *, employee_name, work_date, day_of_week) -> int:
        key = (employee_name, work_date)
        rec = self._by_key.get(key) or self._new(employee_name, work_date, day_of_week)
        self._by_key[key] = replace(
            rec,
            day_of_week=day_of_week,
            punch_in_time=None,
            punch_out_time=None,
            lunch_start_time=None,
            lunch_end_time=None,
            total_hours=0.0,
            is_off_day=True,
        )
        return rec.record_id

    def list_between(self, *, employee_name, start_date, end_date):
        items = [
            r for (name, d), r in self._by_key.items()
            if name == employee_name and start_date <= d <= end_date
        ]
        return sorted(items, key=lambda r: r.work_date)

    def delete_for_employee(self, employee_name: str) -> int:
        keys = [k for k in self._by_key if k[0] == employee_name]
        for k in keys:
            del self._by_key[k]
        return len(keys)


class InMemoryTimeEntries:
    def __init__(self):
        self.entries: list[TimeEntry] = []

    def create(self, *, employee_name, work_date, hours, lunch_taken) -> int:
        entry = TimeEntry(
            entry_id=len(self.entries) + 1,
            employee_name=employee_name,
            work_date=work_date,
            hours=hours,
            lunch_taken=lunch_taken,
        )
        self.entries.append(entry)
        return entry.entry_id

    def list_between(self, *, start_date, end_date):
        items = [e for e in self.entries if start_date <= e.work_date <= end_date]
        return sorted(items, key=lambda e: (e.employee_name, e.work_date))

    def delete_for_employee(self, employee_name: str) -> int:
        before = len(self.entries)
        self.entries = [e for e in self.entries if e.employee_name != employee_name]
        return before - len(self.entries)


@pytest.fixture
def tz():
    return CHICAGO


@pytest.fixture
def fixed_now():
    # Monday 2024-06-10, 08:30 in the business timezone.
    return datetime(2024, 6, 10, 8, 30, tzinfo=CHICAGO)


@pytest.fixture
def employees_repo():
    return InMemoryEmployees()


@pytest.fixture
def punches_repo():
    return InMemoryPunches()


@pytest.fixture
def time_entries_repo():
    return InMemoryTimeEntries()


@pytest.fixture
def tables():
    return ["employees", "punch_records", "time_entries"]


@pytest.fixture
def container(employees_repo, punches_repo, time_entries_repo, tz, tables):
    return build_services(
        employees_repo=employees_repo,
        punches_repo=punches_repo,
        time_entries_repo=time_entries_repo,
        tz=tz,
        list_tables=lambda: list(tables),
    )


@pytest.fixture
def client(container, monkeypatch):
    from src.timecard_system.timecard_system.main import create_app

    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container=container)
    return app.test_client()
