from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Services depend on this protocol, not on a concrete database.
    """

    def list_active(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_name(self, name: str) -> Optional[Employee]:
        raise NotImplementedError

    def create(self, name: str) -> int:
        raise NotImplementedError

    def set_active(self, employee_id: int, *, active: bool) -> bool:
        raise NotImplementedError
