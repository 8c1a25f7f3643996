from __future__ import annotations

from typing import Sequence

from ..common.datetime_utils import to_iso
from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, db_cursor, fetchall, fetchone
from .model import OrderRow, ReportRow, ServiceRow
from .repository import StatisticsRepository


class MySQLStatisticsRepository(StatisticsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _count(self, sql: str, params: tuple = ()) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            row = fetchone(cur)
            return int(row["total"]) if row else 0

    def order_rows(self) -> Sequence[OrderRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT created_at, service_id FROM orders")
            return [OrderRow(to_iso(r["created_at"]), r["service_id"]) for r in fetchall(cur)]

    def service_rows(self) -> Sequence[ServiceRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, name FROM services ORDER BY created_at")
            return [ServiceRow(r["id"], r["name"]) for r in fetchall(cur)]

    def report_rows(self) -> Sequence[ReportRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT date, type, amount FROM financial_reports")
            return [ReportRow(to_iso(r["date"]), r["type"], as_float(r["amount"])) for r in fetchall(cur)]

    def count_orders(self) -> int:
        return self._count("SELECT COUNT(*) AS total FROM orders")

    def count_customers(self) -> int:
        return self._count("SELECT COUNT(*) AS total FROM users WHERE role=%s", (Role.CUSTOMER.value,))

    def count_employees(self) -> int:
        return self._count("SELECT COUNT(*) AS total FROM employees")
