from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee, keyed by a unique case-sensitive name."""

    employee_id: int
    name: str
    active: bool = True

    def to_dict(self) -> dict:
        return {"id": self.employee_id, "name": self.name, "active": self.active}
