from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import EmployeeStatus


@dataclass(frozen=True)
class Employee:
    id: str
    name: str
    phone: str
    status: EmployeeStatus
    hire_date: Optional[str] = None
    created_at: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "phone": self.phone,
            "status": self.status.value,
            "hire_date": self.hire_date,
            "created_at": self.created_at,
        }
