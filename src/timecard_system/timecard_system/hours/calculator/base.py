from __future__ import annotations

from abc import ABC, abstractmethod

from ...punches.model import PunchRecord


class HoursCalculator(ABC):
    """Calculator interface (Strategy Pattern for worked time)."""

    @abstractmethod
    def worked_minutes(self, record: PunchRecord) -> float:
        raise NotImplementedError

    def worked_hours(self, record: PunchRecord) -> float:
        return self.worked_minutes(record) / 60
