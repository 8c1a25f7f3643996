from __future__ import annotations

import re
import sys
import uuid
from datetime import datetime, timedelta
from typing import Any, Callable, Optional, Sequence

from werkzeug.security import generate_password_hash

from ..catalog.repository import ServiceRepository
from ..common.datetime_utils import now_local
from ..common.logger import get_logger
from ..common.validators import matches_search, normalize_phone, optional_text, require_positive_number
from ..core.constants import ORDER_INTAKE_CUSTOMER_PASSWORD, SERVICE_ID_PATTERN
from ..core.enums import OrderStatus
from ..core.exceptions import NotFoundError, OrderPlacementError, StoreError, ValidationError
from ..users.repository import UserRepository
from .model import OrderView, PlacedOrder
from .repository import OrderRepository

logger = get_logger(__name__)

_SERVICE_ID_RE = re.compile(SERVICE_ID_PATTERN)


def intake_username(name: str, now: datetime) -> str:
    """Username for customers created at the counter: name slug, epoch millis and a random suffix.

    The suffix keeps two same-named customers placed in the same millisecond apart.
    """
    slug = re.sub(r"\s+", "_", name.lower())
    return f"{slug}_{int(now.timestamp() * 1000)}_{uuid.uuid4().hex[:6]}"


def parse_order_status(value: Any) -> OrderStatus:
    try:
        return OrderStatus(value)
    except ValueError:
        raise ValidationError("Status must be one of: processing, completed, paid")


class OrderService:
    """Use cases: order intake at the counter and order tracking."""

    def __init__(
        self,
        orders: OrderRepository,
        users: UserRepository,
        services: ServiceRepository,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._orders = orders
        self._users = users
        self._services = services
        self._clock = clock

    def list_orders(self, *, search: Optional[str] = None, status: Optional[str] = None) -> Sequence[OrderView]:
        wanted = parse_order_status(status) if status else None
        return [
            o
            for o in self._orders.list_views()
            if (wanted is None or o.status is wanted)
            and matches_search(search, o.customer_name, o.customer_phone, o.service_name, o.id)
        ]

    def list_orders_for_customer(self, customer_id: str) -> Sequence[OrderView]:
        return self._orders.list_views_for_customer(customer_id)

    def place_order(
        self,
        *,
        customer_name: Any,
        customer_phone: Any,
        service_id: Any,
        weight: Any,
        customer_address: Any = None,
    ) -> PlacedOrder:
        """Find-or-create the customer by phone, price the order and persist it.

        The customer write and the order write are independent; if the order
        insert fails, a freshly created customer row stays behind.
        """
        if not customer_name or not customer_phone or not service_id or not weight:
            raise ValidationError("Please fill in all fields: name, phone, service, weight")

        weight_kg = require_positive_number(weight, "Weight")
        # The weight column is a DOUBLE, which has no subnormal range.
        if weight_kg < sys.float_info.min:
            raise ValidationError("Weight is too small")

        service_id = str(service_id)
        if not _SERVICE_ID_RE.match(service_id):
            raise ValidationError("Invalid service id format")

        name = str(customer_name).strip()
        phone = normalize_phone(str(customer_phone))
        if not phone:
            raise ValidationError("Phone must contain digits")

        now = self._clock()

        customer = self._users.get_customer_by_phone(phone)
        if not customer:
            try:
                customer = self._users.create_customer_if_absent(
                    username=intake_username(name, now),
                    password_hash=generate_password_hash(ORDER_INTAKE_CUSTOMER_PASSWORD),
                    name=name,
                    phone=phone,
                    address=optional_text(customer_address),
                )
            except StoreError as e:
                raise OrderPlacementError(str(e)) from e
            logger.info("Customer auto-created at intake id=%s phone=%s", customer.id, phone)

        service = self._services.get_by_id(service_id)
        if not service:
            raise NotFoundError("Service not found")

        # Rounded to the DECIMAL(14, 2) column so the response matches the stored row.
        total_price = round(service.price_per_kg * weight_kg, 2)
        estimated_completion = now + timedelta(hours=service.estimated_hours)

        try:
            order_id = self._orders.create(
                customer_id=customer.id,
                service_id=service.id,
                weight=weight_kg,
                total_price=total_price,
                status=OrderStatus.PROCESSING,
                estimated_completion=estimated_completion,
                created_at=now,
            )
        except StoreError as e:
            raise OrderPlacementError(str(e)) from e

        logger.info(
            "Order placed id=%s customer=%s service=%s weight=%s total=%s",
            order_id, customer.id, service.id, weight_kg, total_price,
        )
        return PlacedOrder(
            order_id=order_id,
            customer=customer.name or name,
            service=service.name,
            total_price=total_price,
            estimated_completion=estimated_completion.isoformat(),
        )

    def update_status(self, order_id: str, status: Any) -> None:
        # Any status may follow any other; there is no enforced workflow.
        new_status = parse_order_status(status)
        if not self._orders.update_status(order_id, new_status):
            raise NotFoundError("Order not found")
        logger.info("Order status updated id=%s status=%s", order_id, new_status.value)

    def delete_order(self, order_id: str) -> None:
        if not self._orders.delete(order_id):
            raise NotFoundError("Order not found")
        logger.info("Order deleted id=%s", order_id)

    def summary(self) -> dict:
        orders = self._orders.list_views()
        counts = {status.value: 0 for status in OrderStatus}
        for o in orders:
            counts[o.status.value] += 1
        return {**counts, "total_revenue": sum(o.total_price for o in orders)}
