from __future__ import annotations

from typing import Any, Optional, Sequence

from ..common.logger import get_logger
from ..common.validators import matches_search, optional_iso_date, require_non_empty
from ..core.enums import EmployeeStatus
from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee
from .repository import EmployeeRepository

logger = get_logger(__name__)


def _parse_status(value: Any) -> EmployeeStatus:
    if value is None or value == "":
        return EmployeeStatus.PERMANENT
    try:
        return EmployeeStatus(value)
    except ValueError:
        raise ValidationError("Status must be one of: permanent, intern")


class EmployeeService:
    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_employees(self, *, search: Optional[str] = None) -> Sequence[Employee]:
        return [
            e for e in self._employees.list_all() if matches_search(search, e.name, e.phone, e.status.value)
        ]

    def create_employee(self, *, name: Any, phone: Any, status: Any = None, hire_date: Any = None) -> str:
        employee_id = self._employees.create(
            name=require_non_empty(name, "Name"),
            phone=require_non_empty(phone, "Phone"),
            status=_parse_status(status),
            hire_date=optional_iso_date(hire_date, "Hire date"),
        )
        logger.info("Employee created id=%s", employee_id)
        return employee_id

    def update_employee(self, employee_id: str, *, name: Any, phone: Any, status: Any = None, hire_date: Any = None) -> None:
        updated = self._employees.update(
            employee_id,
            name=require_non_empty(name, "Name"),
            phone=require_non_empty(phone, "Phone"),
            status=_parse_status(status),
            hire_date=optional_iso_date(hire_date, "Hire date"),
        )
        if not updated:
            raise NotFoundError("Employee not found")
        logger.info("Employee updated id=%s", employee_id)

    def delete_employee(self, employee_id: str) -> None:
        if not self._employees.delete(employee_id):
            raise NotFoundError("Employee not found")
        logger.info("Employee deleted id=%s", employee_id)

    def summary(self) -> dict:
        employees = self._employees.list_all()
        return {
            "total": len(employees),
            "permanent": sum(1 for e in employees if e.status is EmployeeStatus.PERMANENT),
            "intern": sum(1 for e in employees if e.status is EmployeeStatus.INTERN),
        }
