from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import ReportType


@dataclass(frozen=True)
class FinancialReport:
    """Domain entity: one bookkeeping entry.

    `amount` is always positive; the sign lives in `type`. `date` is the
    business date (YYYY-MM-DD), distinct from `created_at`.
    """

    id: str
    type: ReportType
    amount: float
    description: str
    date: Optional[str]
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "type": self.type.value,
            "amount": self.amount,
            "description": self.description,
            "date": self.date,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }


@dataclass(frozen=True)
class FinanceSummary:
    count: int
    total_income: float
    total_expense: float
    balance: float
