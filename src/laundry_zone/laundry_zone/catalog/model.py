from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional


@dataclass(frozen=True)
class Service:
    """Domain entity: a laundry service priced per kilogram."""

    id: str
    name: str
    price_per_kg: float
    estimated_hours: int
    description: Optional[str] = None
    created_at: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class CatalogSummary:
    count: int
    average_price_per_kg: float
    average_estimated_hours: float
