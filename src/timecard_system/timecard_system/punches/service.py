from __future__ import annotations

import logging
from datetime import date, datetime, time
from typing import Optional, Union
from zoneinfo import ZoneInfo

from ..common.datetime_utils import now_in, parse_iso_date, weekday_name
from ..common.validators import require_non_empty
from ..core.enums import PunchStatus, PunchType
from ..core.exceptions import ValidationError
from ..hours.calculator.base import HoursCalculator
from ..hours.calculator.standard_calculator import StandardHoursCalculator
from .model import PunchRecord
from .repository import PunchRepository

logger = logging.getLogger(__name__)


def resolve_status(record: Optional[PunchRecord]) -> PunchStatus:
    """Decision table, first match wins: OUT beats LUNCH once a punch-out exists."""

    if record is None or record.punch_in_time is None:
        return PunchStatus.OUT
    if record.punch_out_time is not None:
        return PunchStatus.OUT
    if record.lunch_start_time is not None and record.lunch_end_time is None:
        return PunchStatus.LUNCH
    return PunchStatus.IN


class PunchService:
    """Use case: record punches, report today's status, mark off days.

    "Today" is always the calendar date in the configured business timezone,
    never the host's local date.
    """

    def __init__(
        self,
        punches: PunchRepository,
        *,
        tz: ZoneInfo,
        calculator: HoursCalculator | None = None,
    ):
        self._punches = punches
        self._tz = tz
        self._calculator = calculator or StandardHoursCalculator()

    def today(self, *, now: datetime | None = None) -> date:
        return now_in(self._tz, now).date()

    @staticmethod
    def _parse_type(punch_type: Union[str, PunchType]) -> PunchType:
        if isinstance(punch_type, PunchType):
            return punch_type
        try:
            return PunchType.parse(punch_type)
        except ValueError:
            raise ValidationError(f"Invalid punch type: {punch_type!r}")

    def record_punch(
        self,
        employee_name: str,
        punch_type: Union[str, PunchType],
        *,
        now: datetime | None = None,
    ) -> int:
        """Apply one punch event to today's record and return the record id.

        The caller is responsible for checking the employee is active.
        """
        employee_name = require_non_empty(employee_name, "Employee name")
        ptype = self._parse_type(punch_type)

        local_now = now_in(self._tz, now)
        today = local_now.date()
        punch_time = time(hour=local_now.hour, minute=local_now.minute)

        record_id = self._punches.upsert_punch(
            employee_name=employee_name,
            work_date=today,
            day_of_week=weekday_name(today),
            punch_type=ptype,
            punch_time=punch_time,
        )
        logger.info("Punch %s for %s on %s at %s (record %s)", ptype.value, employee_name, today, punch_time, record_id)

        # No-op until both IN and OUT are set.
        self.recompute_total_hours(employee_name, today)

        return record_id

    def recompute_total_hours(self, employee_name: str, work_date: date) -> Optional[float]:
        record = self._punches.get_for_employee_and_date(employee_name, work_date)
        if record is None:
            return None
        if not record.is_off_day and (record.punch_in_time is None or record.punch_out_time is None):
            return None

        total = self._calculator.worked_hours(record)
        self._punches.set_total_hours(record_id=record.record_id, total_hours=total)
        return total

    def current_status(self, employee_name: str, *, now: datetime | None = None) -> PunchStatus:
        employee_name = require_non_empty(employee_name, "Employee name")
        record = self._punches.get_for_employee_and_date(employee_name, self.today(now=now))
        return resolve_status(record)

    def mark_off_day(self, employee_name: str, work_date: Union[str, date]) -> int:
        """Force the date to an off day, discarding any punches recorded on it."""

        employee_name = require_non_empty(employee_name, "Employee name")
        day = parse_iso_date(work_date)

        record_id = self._punches.upsert_off_day(
            employee_name=employee_name,
            work_date=day,
            day_of_week=weekday_name(day),
        )
        logger.info("Marked %s as off day for %s (record %s)", day, employee_name, record_id)
        return record_id
