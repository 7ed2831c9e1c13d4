from __future__ import annotations

from datetime import date, time
from typing import Optional, Sequence

from ..core.enums import PunchType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_time
from .model import PunchRecord
from .repository import PunchRepository

_COLUMNS = """
    id, employee_name, date, day_of_week,
    punch_in_time, punch_out_time, lunch_start_time, lunch_end_time,
    total_hours, is_off_day
"""


def _to_record(r: dict) -> PunchRecord:
    return PunchRecord(
        record_id=int(r["id"]),
        employee_name=r["employee_name"],
        work_date=r["date"],
        day_of_week=r["day_of_week"],
        punch_in_time=normalize_mysql_time(r.get("punch_in_time")),
        punch_out_time=normalize_mysql_time(r.get("punch_out_time")),
        lunch_start_time=normalize_mysql_time(r.get("lunch_start_time")),
        lunch_end_time=normalize_mysql_time(r.get("lunch_end_time")),
        total_hours=float(r.get("total_hours") or 0),
        is_off_day=bool(r.get("is_off_day")),
    )


class MySQLPunchRepository(PunchRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_employee_and_date(self, employee_name: str, work_date: date) -> Optional[PunchRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM punch_records
                WHERE employee_name=%s AND date=%s
                """,
                (employee_name, work_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def upsert_punch(
        self,
        *,
        employee_name: str,
        work_date: date,
        day_of_week: str,
        punch_type: PunchType,
        punch_time: time,
    ) -> int:
        # Column name comes from the enum, never from user input.
        field = punch_type.field_name
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO punch_records(employee_name, date, day_of_week, {field}, total_hours, is_off_day)
                VALUES(%s,%s,%s,%s,0,0)
                ON DUPLICATE KEY UPDATE {field}=%s, id=LAST_INSERT_ID(id)
                """,
                (employee_name, work_date, day_of_week, punch_time, punch_time),
            )
            return int(cur.lastrowid)

    def set_total_hours(self, *, record_id: int, total_hours: float) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE punch_records SET total_hours=%s WHERE id=%s",
                (float(total_hours), int(record_id)),
            )
            return cur.rowcount > 0

    def upsert_off_day(self, *, employee_name: str, work_date: date, day_of_week: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO punch_records(employee_name, date, day_of_week, total_hours, is_off_day)
                VALUES(%s,%s,%s,0,1)
                ON DUPLICATE KEY UPDATE
                    day_of_week=%s,
                    punch_in_time=NULL, punch_out_time=NULL,
                    lunch_start_time=NULL, lunch_end_time=NULL,
                    total_hours=0, is_off_day=1,
                    id=LAST_INSERT_ID(id)
                """,
                (employee_name, work_date, day_of_week, day_of_week),
            )
            return int(cur.lastrowid)

    def list_between(self, *, employee_name: str, start_date: date, end_date: date) -> Sequence[PunchRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM punch_records
                WHERE employee_name=%s AND date BETWEEN %s AND %s
                ORDER BY date ASC
                """,
                (employee_name, start_date, end_date),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def delete_for_employee(self, employee_name: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM punch_records WHERE employee_name=%s", (employee_name,))
            return int(cur.rowcount)
