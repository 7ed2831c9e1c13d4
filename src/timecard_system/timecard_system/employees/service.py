from __future__ import annotations

import logging
from typing import Sequence

from ..common.validators import require_non_empty
from ..core.constants import MAX_NAME_LENGTH
from ..core.exceptions import ConflictError, NotFoundError
from ..punches.repository import PunchRepository
from ..time_entries.repository import TimeEntryRepository
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: manage the employee registry.

    Deactivating or reactivating a name wipes its punch records and time
    entries, so a re-added name always starts from a clean slate.
    """

    def __init__(self, employees: EmployeeRepository, punches: PunchRepository, time_entries: TimeEntryRepository):
        self._employees = employees
        self._punches = punches
        self._time_entries = time_entries

    def list_active(self) -> Sequence[Employee]:
        return self._employees.list_active()

    def is_active(self, name: str) -> bool:
        employee = self._employees.get_by_name(name)
        return bool(employee and employee.active)

    def require_active(self, name: str) -> Employee:
        employee = self._employees.get_by_name(name)
        if not employee or not employee.active:
            raise NotFoundError("Employee not found or inactive")
        return employee

    def add_employee(self, name: str) -> int:
        name = require_non_empty(name, "Employee name", max_length=MAX_NAME_LENGTH)

        existing = self._employees.get_by_name(name)
        if existing:
            if existing.active:
                raise ConflictError(f'Employee "{name}" already exists')

            self._employees.set_active(existing.employee_id, active=True)
            self._purge_history(name)
            logger.info("Reactivated employee %r (id %s)", name, existing.employee_id)
            return existing.employee_id

        try:
            employee_id = self._employees.create(name)
        except ConflictError:
            # Lost a race with a concurrent insert of the same name.
            raise ConflictError(f'Employee "{name}" already exists')
        logger.info("Added employee %r (id %s)", name, employee_id)
        return employee_id

    def delete_employee(self, employee_id: int) -> int:
        """Deactivate the employee and purge their history; returns rows deactivated."""

        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            logger.info("Delete requested for unknown employee id %s", employee_id)
            return 0

        updated = self._employees.set_active(employee.employee_id, active=False)
        self._purge_history(employee.name)
        logger.info("Deactivated employee %r (id %s)", employee.name, employee.employee_id)
        return 1 if updated else 0

    def _purge_history(self, name: str) -> None:
        punches = self._punches.delete_for_employee(name)
        entries = self._time_entries.delete_for_employee(name)
        logger.info("Purged history for %r: %s punch records, %s time entries", name, punches, entries)
