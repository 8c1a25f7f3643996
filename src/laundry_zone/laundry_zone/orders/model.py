from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional

from ..core.enums import OrderStatus


@dataclass(frozen=True)
class OrderView:
    """Read-model for order tables: the order joined with customer and service names.

    Names are empty strings when the referenced customer or service was deleted.
    """

    id: str
    customer_id: str
    service_id: str
    customer_name: str
    customer_phone: str
    service_name: str
    weight: float
    total_price: float
    status: OrderStatus
    estimated_completion: Optional[str]
    created_at: Optional[str]

    def to_dict(self) -> dict:
        data = asdict(self)
        data["status"] = self.status.value
        return data


@dataclass(frozen=True)
class PlacedOrder:
    order_id: str
    customer: str
    service: str
    total_price: float
    estimated_completion: str

    def to_response(self) -> dict:
        return {
            "success": True,
            "order_id": self.order_id,
            "customer": self.customer,
            "service": self.service,
            "total_price": self.total_price,
            "estimated_completion": self.estimated_completion,
        }
