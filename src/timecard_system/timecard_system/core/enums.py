from __future__ import annotations

from enum import Enum


class PunchType(str, Enum):
    """Punch events an employee can send from the clock screen."""

    IN = "IN"
    OUT = "OUT"
    LUNCH_START = "LUNCH_START"
    LUNCH_END = "LUNCH_END"

    @classmethod
    def parse(cls, value: str) -> "PunchType":
        v = str(value or "").strip().upper()
        # Older clients send LUNCH for the start of the break.
        if v == "LUNCH":
            return cls.LUNCH_START
        return cls(v)

    @property
    def field_name(self) -> str:
        return {
            PunchType.IN: "punch_in_time",
            PunchType.OUT: "punch_out_time",
            PunchType.LUNCH_START: "lunch_start_time",
            PunchType.LUNCH_END: "lunch_end_time",
        }[self]


class PunchStatus(str, Enum):
    """Where an employee currently stands for today."""

    OUT = "OUT"
    IN = "IN"
    LUNCH = "LUNCH"


class DayStatus(str, Enum):
    """Status column of the exported timecard."""

    OFF = "OFF"
    WORK = "WORK"
