from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import ReportType
from .model import FinancialReport


class FinancialReportRepository(Protocol):
    def list_all(self) -> Sequence[FinancialReport]:
        raise NotImplementedError

    def get_by_id(self, report_id: str) -> Optional[FinancialReport]:
        raise NotImplementedError

    def create(
        self,
        *,
        type: ReportType,
        amount: float,
        description: str,
        date: date,
        created_at: datetime,
    ) -> FinancialReport:
        raise NotImplementedError

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
        """Replace the editable fields; None when no row has this id."""

        raise NotImplementedError

    def delete(self, report_id: str) -> bool:
        raise NotImplementedError
