from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, List, NamedTuple, Optional


class OrderRow(NamedTuple):
    created_at: Any
    service_id: Optional[str]


class ServiceRow(NamedTuple):
    id: str
    name: Optional[str]


class ReportRow(NamedTuple):
    date: Any
    type: Optional[str]
    amount: float


@dataclass(frozen=True)
class MonthlyOrders:
    month: str
    count: int


@dataclass(frozen=True)
class ServicePopularity:
    name: str
    count: int


@dataclass(frozen=True)
class MonthlyRevenue:
    month: str
    income: float
    expense: float


@dataclass(frozen=True)
class Totals:
    total_orders: int
    total_customers: int
    total_employees: int
    net_profit: float


@dataclass(frozen=True)
class Statistics:
    monthly_orders: List[MonthlyOrders] = field(default_factory=list)
    service_popularity: List[ServicePopularity] = field(default_factory=list)
    monthly_revenue: List[MonthlyRevenue] = field(default_factory=list)
    totals: Optional[Totals] = None

    def to_dict(self) -> dict:
        return {
            "monthlyOrders": [asdict(m) for m in self.monthly_orders],
            "servicePopularity": [asdict(s) for s in self.service_popularity],
            "monthlyRevenue": [asdict(m) for m in self.monthly_revenue],
            "totals": asdict(self.totals) if self.totals else None,
        }
