from __future__ import annotations

import logging
from typing import Optional

from ..common.validators import require_email, require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


def _optional(value: Optional[str]) -> Optional[str]:
    if value is not None and not isinstance(value, str):
        raise ValidationError("Position and avatar URL must be text")
    return (value or "").strip() or None


class EmployeeService:
    """Use case: manage the employee roster (admin)."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_employees(self):
        return self._employees.list_all()

    def get_employee(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def create_employee(
        self,
        *,
        name: str,
        email: str,
        position: Optional[str] = None,
        avatar_url: Optional[str] = None,
    ) -> int:
        name = require_non_empty(name, "Name")
        email = require_email(email)

        if self._employees.get_by_email(email):
            raise ValidationError("An employee with this email already exists")

        employee_id = self._employees.create(
            name=name,
            email=email,
            position=_optional(position),
            avatar_url=_optional(avatar_url),
        )
        logger.info("Employee %s created (%s)", employee_id, email)
        return employee_id

    def update_employee(
        self,
        *,
        employee_id: int,
        name: str,
        email: str,
        position: Optional[str] = None,
        avatar_url: Optional[str] = None,
    ) -> None:
        current = self.get_employee(employee_id)
        name = require_non_empty(name, "Name")
        email = require_email(email)

        other = self._employees.get_by_email(email)
        if other and other.employee_id != current.employee_id:
            raise ValidationError("An employee with this email already exists")

        ok = self._employees.update(
            employee_id=current.employee_id,
            name=name,
            email=email,
            position=_optional(position),
            avatar_url=_optional(avatar_url),
        )
        if not ok:
            raise NotFoundError("Employee not found")

    def delete_employee(self, employee_id: int) -> None:
        if not self._employees.delete_by_id(int(employee_id)):
            raise NotFoundError("Employee not found")
        logger.info("Employee %s deleted", employee_id)
