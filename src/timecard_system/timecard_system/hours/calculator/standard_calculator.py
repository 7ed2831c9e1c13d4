from __future__ import annotations

from datetime import time
from typing import Optional, Union

from ...common.datetime_utils import parse_clock
from ...punches.model import PunchRecord
from .base import HoursCalculator

ClockValue = Union[str, time]


def _minutes_of_day(value: ClockValue) -> float:
    t = parse_clock(value)
    return t.hour * 60 + t.minute + t.second / 60


def minutes_between(
    start: ClockValue,
    end: ClockValue,
    lunch_start: Optional[ClockValue] = None,
    lunch_end: Optional[ClockValue] = None,
) -> float:
    minutes = _minutes_of_day(end) - _minutes_of_day(start)
    if lunch_start and lunch_end:
        minutes -= _minutes_of_day(lunch_end) - _minutes_of_day(lunch_start)
    return max(0.0, minutes)


def calculate_hours(
    start: ClockValue,
    end: ClockValue,
    lunch_start: Optional[ClockValue] = None,
    lunch_end: Optional[ClockValue] = None,
) -> float:
    """Hours between ``start`` and ``end`` minus the lunch interval, not below 0.

    All values are times of day on the same date, so a shift ending after
    midnight comes out as 0. No rounding; display formats it.
    """
    return minutes_between(start, end, lunch_start, lunch_end) / 60


class StandardHoursCalculator(HoursCalculator):
    """Standard rule: (out - in) - (lunch end - lunch start); off days are 0."""

    def worked_minutes(self, record: PunchRecord) -> float:
        if record.is_off_day or record.punch_in_time is None or record.punch_out_time is None:
            return 0.0
        return minutes_between(
            record.punch_in_time,
            record.punch_out_time,
            record.lunch_start_time,
            record.lunch_end_time,
        )
