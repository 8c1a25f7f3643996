from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import to_iso
from ..core.enums import OrderStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, db_cursor, fetchall
from .model import OrderView
from .repository import OrderRepository

_VIEW_SQL = """
    SELECT o.id, o.customer_id, o.service_id, o.weight, o.total_price, o.status,
           o.estimated_completion, o.created_at,
           u.name AS customer_name, u.phone AS customer_phone,
           s.name AS service_name
    FROM orders o
    LEFT JOIN users u ON u.id = o.customer_id
    LEFT JOIN services s ON s.id = o.service_id
"""


def _to_view(row: dict) -> OrderView:
    return OrderView(
        id=row["id"],
        customer_id=row["customer_id"],
        service_id=row["service_id"],
        customer_name=row.get("customer_name") or "",
        customer_phone=row.get("customer_phone") or "",
        service_name=row.get("service_name") or "",
        weight=as_float(row["weight"]),
        total_price=as_float(row["total_price"]),
        status=OrderStatus(row["status"]),
        estimated_completion=to_iso(row.get("estimated_completion")),
        created_at=to_iso(row.get("created_at")),
    )


class MySQLOrderRepository(OrderRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _list(self, customer_id: Optional[str] = None) -> Sequence[OrderView]:
        sql = _VIEW_SQL
        params: tuple = ()
        if customer_id is not None:
            sql += " WHERE o.customer_id=%s"
            params = (customer_id,)
        sql += " ORDER BY o.created_at DESC"
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return [_to_view(r) for r in fetchall(cur)]

    def list_views(self) -> Sequence[OrderView]:
        return self._list()

    def list_views_for_customer(self, customer_id: str) -> Sequence[OrderView]:
        return self._list(customer_id)

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
        order_id = str(uuid.uuid4())
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO orders(id, customer_id, service_id, weight, total_price, status,
                                   estimated_completion, created_at)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (order_id, customer_id, service_id, weight, total_price, status.value, estimated_completion, created_at),
            )
        return order_id

    def update_status(self, order_id: str, status: OrderStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE orders SET status=%s WHERE id=%s", (status.value, order_id))
            return cur.rowcount > 0

    def delete(self, order_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM orders WHERE id=%s", (order_id,))
            return cur.rowcount > 0
