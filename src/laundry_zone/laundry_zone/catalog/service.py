from __future__ import annotations

from typing import Any, Optional, Sequence

from ..common.logger import get_logger
from ..common.validators import (
    matches_search,
    optional_text,
    require_non_empty,
    require_non_negative_number,
    require_positive_int,
)
from ..core.exceptions import NotFoundError
from .model import CatalogSummary, Service
from .repository import ServiceRepository

logger = get_logger(__name__)


class CatalogService:
    """Use case: maintain the price list (reads are public, writes are admin-only)."""

    def __init__(self, services: ServiceRepository):
        self._services = services

    @staticmethod
    def _validate(name: Any, price_per_kg: Any, estimated_hours: Any) -> tuple[str, float, int]:
        return (
            require_non_empty(name, "Name"),
            require_non_negative_number(price_per_kg, "Price per kg"),
            require_positive_int(estimated_hours, "Estimated hours"),
        )

    def list_services(self, *, search: Optional[str] = None) -> Sequence[Service]:
        return [s for s in self._services.list_all() if matches_search(search, s.name, s.description)]

    def get_service(self, service_id: str) -> Service:
        service = self._services.get_by_id(service_id)
        if not service:
            raise NotFoundError("Service not found")
        return service

    def create_service(self, *, name: Any, price_per_kg: Any, estimated_hours: Any, description: Any = None) -> str:
        name, price, hours = self._validate(name, price_per_kg, estimated_hours)
        service_id = self._services.create(
            name=name, price_per_kg=price, estimated_hours=hours, description=optional_text(description)
        )
        logger.info("Service created id=%s name=%s price_per_kg=%s", service_id, name, price)
        return service_id

    def update_service(
        self, service_id: str, *, name: Any, price_per_kg: Any, estimated_hours: Any, description: Any = None
    ) -> None:
        # Existing orders keep the total_price computed when they were placed.
        name, price, hours = self._validate(name, price_per_kg, estimated_hours)
        updated = self._services.update(
            service_id, name=name, price_per_kg=price, estimated_hours=hours, description=optional_text(description)
        )
        if not updated:
            raise NotFoundError("Service not found")
        logger.info("Service updated id=%s price_per_kg=%s", service_id, price)

    def delete_service(self, service_id: str) -> None:
        if not self._services.delete(service_id):
            raise NotFoundError("Service not found")
        logger.info("Service deleted id=%s", service_id)

    def summary(self) -> CatalogSummary:
        services = self._services.list_all()
        count = len(services)
        if not count:
            return CatalogSummary(count=0, average_price_per_kg=0.0, average_estimated_hours=0.0)
        return CatalogSummary(
            count=count,
            average_price_per_kg=sum(s.price_per_kg for s in services) / count,
            average_estimated_hours=sum(s.estimated_hours for s in services) / count,
        )
