from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from ..core.enums import OrderStatus
from .model import OrderView


class OrderRepository(Protocol):
    def list_views(self) -> Sequence[OrderView]:
        """All orders, newest first, joined with customer and service names."""

        raise NotImplementedError

    def list_views_for_customer(self, customer_id: str) -> Sequence[OrderView]:
        raise NotImplementedError

    def create(
        self,
        *,
        customer_id: str,
        service_id: str,
        weight: float,
        total_price: float,
        status: OrderStatus,
        estimated_completion: datetime,
        created_at: datetime,
    ) -> str:
        """Insert an order and return its id."""

        raise NotImplementedError

    def update_status(self, order_id: str, status: OrderStatus) -> bool:
        raise NotImplementedError

    def delete(self, order_id: str) -> bool:
        raise NotImplementedError
