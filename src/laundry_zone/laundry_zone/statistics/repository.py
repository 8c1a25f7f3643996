from __future__ import annotations

from typing import Protocol, Sequence

from .model import OrderRow, ReportRow, ServiceRow


class StatisticsRepository(Protocol):
    def order_rows(self) -> Sequence[OrderRow]:
        raise NotImplementedError

    def service_rows(self) -> Sequence[ServiceRow]:
        raise NotImplementedError

    def report_rows(self) -> Sequence[ReportRow]:
        raise NotImplementedError

    def count_orders(self) -> int:
        raise NotImplementedError

    def count_customers(self) -> int:
        raise NotImplementedError

    def count_employees(self) -> int:
        raise NotImplementedError
