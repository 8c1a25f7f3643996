from __future__ import annotations

import uuid
from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import to_iso
from ..core.enums import EmployeeStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, name, phone, status, hire_date, created_at
                FROM employees
                ORDER BY created_at DESC
                """
            )
            return [
                Employee(
                    id=r["id"],
                    name=r["name"],
                    phone=r["phone"],
                    status=EmployeeStatus(r["status"]),
                    hire_date=to_iso(r.get("hire_date")),
                    created_at=to_iso(r.get("created_at")),
                )
                for r in fetchall(cur)
            ]

    def create(self, *, name: str, phone: str, status: EmployeeStatus, hire_date: Optional[date]) -> str:
        employee_id = str(uuid.uuid4())
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO employees(id, name, phone, status, hire_date) VALUES(%s,%s,%s,%s,%s)",
                (employee_id, name, phone, status.value, hire_date),
            )
        return employee_id

    def update(
        self,
        employee_id: str,
        *,
        name: str,
        phone: str,
        status: EmployeeStatus,
        hire_date: Optional[date],
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE employees SET name=%s, phone=%s, status=%s, hire_date=%s WHERE id=%s",
                (name, phone, status.value, hire_date, employee_id),
            )
            return cur.rowcount > 0

    def delete(self, employee_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE id=%s", (employee_id,))
            return cur.rowcount > 0

    def count(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS n FROM employees")
            row = fetchone(cur)
            return int(row["n"]) if row else 0
