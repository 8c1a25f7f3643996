from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import EmployeeStatus
from .model import Employee


class EmployeeRepository(Protocol):
    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def create(self, *, name: str, phone: str, status: EmployeeStatus, hire_date: Optional[date]) -> str:
        raise NotImplementedError

    def update(
        self,
        employee_id: str,
        *,
        name: str,
        phone: str,
        status: EmployeeStatus,
        hire_date: Optional[date],
    ) -> bool:
        raise NotImplementedError

    def delete(self, employee_id: str) -> bool:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError
