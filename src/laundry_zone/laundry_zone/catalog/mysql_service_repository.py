from __future__ import annotations

import uuid
from typing import Optional, Sequence

from ..common.datetime_utils import to_iso
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, db_cursor, fetchall, fetchone
from .model import Service
from .repository import ServiceRepository

_COLUMNS = "id, name, price_per_kg, estimated_hours, description, created_at"


def _to_service(row: dict) -> Service:
    return Service(
        id=row["id"],
        name=row["name"],
        price_per_kg=as_float(row["price_per_kg"]),
        estimated_hours=int(row["estimated_hours"]),
        description=row.get("description"),
        created_at=to_iso(row.get("created_at")),
    )


class MySQLServiceRepository(ServiceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Service]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM services ORDER BY created_at DESC")
            return [_to_service(r) for r in fetchall(cur)]

    def get_by_id(self, service_id: str) -> Optional[Service]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM services WHERE id=%s", (service_id,))
            row = fetchone(cur)
            return _to_service(row) if row else None

    def create(self, *, name: str, price_per_kg: float, estimated_hours: int, description: Optional[str]) -> str:
        service_id = str(uuid.uuid4())
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO services(id, name, price_per_kg, estimated_hours, description)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (service_id, name, price_per_kg, estimated_hours, description),
            )
        return service_id

    def update(
        self,
        service_id: str,
        *,
        name: str,
        price_per_kg: float,
        estimated_hours: int,
        description: Optional[str],
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE services
                SET name=%s, price_per_kg=%s, estimated_hours=%s, description=%s
                WHERE id=%s
                """,
                (name, price_per_kg, estimated_hours, description, service_id),
            )
            return cur.rowcount > 0

    def delete(self, service_id: str) -> bool:
        # Orders keep their service_id; no cascade and no re-pricing.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM services WHERE id=%s", (service_id,))
            return cur.rowcount > 0
