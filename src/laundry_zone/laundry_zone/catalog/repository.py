from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Service


class ServiceRepository(Protocol):
    def list_all(self) -> Sequence[Service]:
        """Services ordered by creation time, newest first."""

        raise NotImplementedError

    def get_by_id(self, service_id: str) -> Optional[Service]:
        raise NotImplementedError

    def create(self, *, name: str, price_per_kg: float, estimated_hours: int, description: Optional[str]) -> str:
        """Insert a service and return its id."""

        raise NotImplementedError

    def update(
        self,
        service_id: str,
        *,
        name: str,
        price_per_kg: float,
        estimated_hours: int,
        description: Optional[str],
    ) -> bool:
        raise NotImplementedError

    def delete(self, service_id: str) -> bool:
        raise NotImplementedError
