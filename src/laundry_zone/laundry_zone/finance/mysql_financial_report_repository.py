from __future__ import annotations

import uuid
from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import to_iso
from ..core.enums import ReportType
from ..core.exceptions import StoreError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, db_cursor, fetchall, fetchone
from .model import FinancialReport
from .repository import FinancialReportRepository

_COLUMNS = "id, type, amount, description, date, created_at, updated_at"


def _to_report(row: dict) -> FinancialReport:
    return FinancialReport(
        id=row["id"],
        type=ReportType(row["type"]),
        amount=as_float(row["amount"]),
        description=row["description"],
        date=to_iso(row.get("date")),
        created_at=to_iso(row.get("created_at")),
        updated_at=to_iso(row.get("updated_at")),
    )


class MySQLFinancialReportRepository(FinancialReportRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[FinancialReport]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM financial_reports ORDER BY created_at DESC")
            return [_to_report(r) for r in fetchall(cur)]

    def get_by_id(self, report_id: str) -> Optional[FinancialReport]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM financial_reports WHERE id=%s", (report_id,))
            row = fetchone(cur)
            return _to_report(row) if row else None

    def create(
        self,
        *,
        type: ReportType,
        amount: float,
        description: str,
        date: date,
        created_at: datetime,
    ) -> FinancialReport:
        report_id = str(uuid.uuid4())
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO financial_reports(id, type, amount, description, date, created_at)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (report_id, type.value, amount, description, date, created_at),
            )
        created = self.get_by_id(report_id)
        if not created:
            raise StoreError("Financial report missing after insert")
        return created

    def update(
        self,
        report_id: str,
        *,
        type: ReportType,
        amount: float,
        description: str,
        date: date,
        updated_at: datetime,
    ) -> Optional[FinancialReport]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE financial_reports
                SET type=%s, amount=%s, description=%s, date=%s, updated_at=%s
                WHERE id=%s
                """,
                (type.value, amount, description, date, updated_at, report_id),
            )
            if cur.rowcount == 0:
                return None
        return self.get_by_id(report_id)

    def delete(self, report_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM financial_reports WHERE id=%s", (report_id,))
            return cur.rowcount > 0
