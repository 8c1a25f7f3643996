from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.logger import get_logger
from ..common.validators import require_iso_date, require_non_empty, require_positive_number
from ..core.enums import ReportType
from ..core.exceptions import NotFoundError, ValidationError
from .model import FinanceSummary, FinancialReport
from .repository import FinancialReportRepository

logger = get_logger(__name__)


def parse_report_type(value: Any) -> ReportType:
    try:
        return ReportType(value)
    except ValueError:
        raise ValidationError('Invalid type. Must be either "income" or "expense"')


class FinancialReportService:
    """Use case: record income and expenses.

    Note: open to every authenticated user, not only admins.
    """

    def __init__(self, reports: FinancialReportRepository, *, clock: Callable[[], datetime] = now_local):
        self._reports = reports
        self._clock = clock

    @staticmethod
    def _validate(type: Any, amount: Any, description: Any, date: Any):
        if not type or not amount or not description or not date:
            raise ValidationError("Missing required fields: type, amount, description, date")
        return (
            parse_report_type(type),
            require_positive_number(amount, "Amount"),
            require_non_empty(description, "Description"),
            require_iso_date(date, "Date"),
        )

    def list_reports(self, *, type: Optional[str] = None) -> Sequence[FinancialReport]:
        wanted = parse_report_type(type) if type else None
        return [r for r in self._reports.list_all() if wanted is None or r.type is wanted]

    def get_report(self, report_id: str) -> FinancialReport:
        report = self._reports.get_by_id(report_id)
        if not report:
            raise NotFoundError("Financial report not found")
        return report

    def create_report(self, *, type: Any, amount: Any, description: Any, date: Any) -> FinancialReport:
        report_type, value, text, day = self._validate(type, amount, description, date)
        report = self._reports.create(
            type=report_type, amount=value, description=text, date=day, created_at=self._clock()
        )
        logger.info("Financial report created id=%s type=%s amount=%s", report.id, report_type.value, value)
        return report

    def update_report(self, report_id: str, *, type: Any, amount: Any, description: Any, date: Any) -> FinancialReport:
        report_type, value, text, day = self._validate(type, amount, description, date)
        report = self._reports.update(
            report_id, type=report_type, amount=value, description=text, date=day, updated_at=self._clock()
        )
        if not report:
            raise NotFoundError("Financial report not found")
        logger.info("Financial report updated id=%s", report_id)
        return report

    def delete_report(self, report_id: str) -> None:
        if not self._reports.delete(report_id):
            raise NotFoundError("Financial report not found")
        logger.info("Financial report deleted id=%s", report_id)

    def summary(self) -> FinanceSummary:
        reports = self._reports.list_all()
        income = sum(r.amount for r in reports if r.type is ReportType.INCOME)
        expense = sum(r.amount for r in reports if r.type is ReportType.EXPENSE)
        return FinanceSummary(count=len(reports), total_income=income, total_expense=expense, balance=income - expense)
