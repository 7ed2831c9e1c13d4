from __future__ import annotations

from datetime import date
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import TimeEntry
from .repository import TimeEntryRepository


class MySQLTimeEntryRepository(TimeEntryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, *, employee_name: str, work_date: date, hours: float, lunch_taken: bool) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO time_entries(employee_name, date, hours, lunch_taken)
                VALUES(%s,%s,%s,%s)
                """,
                (employee_name, work_date, float(hours), 1 if lunch_taken else 0),
            )
            return int(cur.lastrowid)

    def list_between(self, *, start_date: date, end_date: date) -> Sequence[TimeEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, employee_name, date, hours, lunch_taken
                FROM time_entries
                WHERE date BETWEEN %s AND %s
                ORDER BY employee_name ASC, date ASC
                """,
                (start_date, end_date),
            )
            return [
                TimeEntry(
                    entry_id=int(r["id"]),
                    employee_name=r["employee_name"],
                    work_date=r["date"],
                    hours=float(r.get("hours") or 0),
                    lunch_taken=bool(r.get("lunch_taken")),
                )
                for r in fetchall(cur)
            ]

    def delete_for_employee(self, employee_name: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM time_entries WHERE employee_name=%s", (employee_name,))
            return int(cur.rowcount)
