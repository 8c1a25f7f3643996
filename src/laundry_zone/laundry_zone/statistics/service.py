from __future__ import annotations

from collections import Counter
from datetime import datetime
from typing import Any, Callable, Optional

from ..common.datetime_utils import now_local, recent_month_keys
from ..common.logger import get_logger
from ..core.constants import STATISTICS_MONTHS
from ..core.enums import ReportType
from .model import MonthlyOrders, MonthlyRevenue, ServicePopularity, Statistics, Totals
from .repository import StatisticsRepository

logger = get_logger(__name__)


def _in_month(value: Any, month: str) -> bool:
    # Prefix match on the stored ISO text; anything else falls out of every bucket.
    return isinstance(value, str) and value.startswith(month)


class StatisticsService:
    """Build the dashboard payload.

    Charts cover the last STATISTICS_MONTHS calendar months (oldest first);
    net profit covers the whole report history. Everything is recomputed
    from full reads on each call.
    """

    def __init__(self, stats: StatisticsRepository, *, clock: Callable[[], datetime] = now_local):
        self._stats = stats
        self._clock = clock

    def build(self, *, now: Optional[datetime] = None) -> Statistics:
        months = recent_month_keys(now or self._clock(), STATISTICS_MONTHS)
        orders = self._stats.order_rows()
        services = self._stats.service_rows()
        reports = self._stats.report_rows()

        monthly_orders = [
            MonthlyOrders(month=m, count=sum(1 for o in orders if _in_month(o.created_at, m))) for m in months
        ]

        per_service = Counter(o.service_id for o in orders)
        popularity = [ServicePopularity(name=s.name or "", count=per_service.get(s.id, 0)) for s in services]

        income_type, expense_type = ReportType.INCOME.value, ReportType.EXPENSE.value
        monthly_revenue = [
            MonthlyRevenue(
                month=m,
                income=sum(r.amount for r in reports if r.type == income_type and _in_month(r.date, m)),
                expense=sum(r.amount for r in reports if r.type == expense_type and _in_month(r.date, m)),
            )
            for m in months
        ]

        total_income = sum(r.amount for r in reports if r.type == income_type)
        total_expense = sum(r.amount for r in reports if r.type == expense_type)
        totals = Totals(
            total_orders=self._stats.count_orders(),
            total_customers=self._stats.count_customers(),
            total_employees=self._stats.count_employees(),
            net_profit=total_income - total_expense,
        )
        logger.debug("Statistics built for months %s..%s", months[0], months[-1])
        return Statistics(
            monthly_orders=monthly_orders,
            service_popularity=popularity,
            monthly_revenue=monthly_revenue,
            totals=totals,
        )
