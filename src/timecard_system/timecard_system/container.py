from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Callable, Optional
from zoneinfo import ZoneInfo

from .common.datetime_utils import get_timezone
from .database.bootstrap import list_tables
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .hours.calculator.standard_calculator import StandardHoursCalculator
from .punches.mysql_punch_repository import MySQLPunchRepository
from .punches.repository import PunchRepository
from .punches.service import PunchService
from .time_entries.mysql_time_entry_repository import MySQLTimeEntryRepository
from .time_entries.repository import TimeEntryRepository
from .time_entries.service import TimeEntryService
from .timecards.service import TimecardService


@dataclass(frozen=True)
class Container:
    tz: ZoneInfo

    employees_repo: EmployeeRepository
    punches_repo: PunchRepository
    time_entries_repo: TimeEntryRepository

    employee_service: EmployeeService
    punch_service: PunchService
    timecard_service: TimecardService
    time_entry_service: TimeEntryService

    list_tables: Callable[[], list[str]]
    conn: Optional[DatabaseConnection] = None


def build_services(
    *,
    employees_repo: EmployeeRepository,
    punches_repo: PunchRepository,
    time_entries_repo: TimeEntryRepository,
    tz: ZoneInfo,
    list_tables: Callable[[], list[str]],
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Wire services over the given repositories; one timezone for every service."""

    return Container(
        tz=tz,
        employees_repo=employees_repo,
        punches_repo=punches_repo,
        time_entries_repo=time_entries_repo,
        employee_service=EmployeeService(employees_repo, punches_repo, time_entries_repo),
        punch_service=PunchService(punches_repo, tz=tz, calculator=StandardHoursCalculator()),
        timecard_service=TimecardService(punches_repo, tz=tz),
        time_entry_service=TimeEntryService(time_entries_repo, tz=tz),
        list_tables=list_tables,
        conn=conn,
    )


def build_container(*, db_config: dict, timezone: str) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))

    return build_services(
        employees_repo=MySQLEmployeeRepository(conn),
        punches_repo=MySQLPunchRepository(conn),
        time_entries_repo=MySQLTimeEntryRepository(conn),
        tz=get_timezone(timezone),
        list_tables=partial(list_tables, conn),
        conn=conn,
    )
