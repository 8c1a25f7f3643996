from __future__ import annotations

import uuid
from typing import Optional, Sequence

from ..common.datetime_utils import to_iso
from ..core.enums import Role
from ..core.exceptions import StoreError, ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import User
from .repository import UserRepository

_COLUMNS = "id, username, password, role, name, phone, address, created_at"


def _to_user(row: dict) -> User:
    return User(
        id=row["id"],
        username=row["username"],
        password_hash=row["password"],
        role=Role(row["role"]),
        name=row.get("name"),
        phone=row.get("phone"),
        address=row.get("address"),
        created_at=to_iso(row.get("created_at")),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _get_one(self, where: str, params: tuple) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE {where}", params)
            row = fetchone(cur)
            return _to_user(row) if row else None

    def get_by_id(self, user_id: str) -> Optional[User]:
        return self._get_one("id=%s", (user_id,))

    def get_by_username(self, username: str) -> Optional[User]:
        return self._get_one("username=%s", (username,))

    def get_customer_by_phone(self, phone: str) -> Optional[User]:
        return self._get_one("phone=%s AND role=%s", (phone, Role.CUSTOMER.value))

    def list_customers(self) -> Sequence[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM users WHERE role=%s ORDER BY created_at DESC",
                (Role.CUSTOMER.value,),
            )
            return [_to_user(r) for r in fetchall(cur)]

    def create_customer(
        self,
        *,
        username: str,
        password_hash: str,
        name: str,
        phone: str,
        address: Optional[str],
    ) -> User:
        user_id = str(uuid.uuid4())
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO users(id, username, password, role, name, phone, address)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (user_id, username, password_hash, Role.CUSTOMER.value, name, phone, address),
            )
        created = self.get_by_id(user_id)
        if not created:
            raise StoreError("Customer row missing after insert")
        return created

    def create_customer_if_absent(
        self,
        *,
        username: str,
        password_hash: str,
        name: str,
        phone: str,
        address: Optional[str],
    ) -> User:
        try:
            return self.create_customer(
                username=username, password_hash=password_hash, name=name, phone=phone, address=address
            )
        except ValidationError:
            # Lost a race on uq_users_phone_role: the other writer's row wins.
            # Any other duplicate (username) is a real conflict.
            existing = self.get_customer_by_phone(phone)
            if existing:
                return existing
            raise

    def update_customer(self, user_id: str, *, name: str, phone: str, address: Optional[str]) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE users SET name=%s, phone=%s, address=%s WHERE id=%s AND role=%s",
                (name, phone, address, user_id, Role.CUSTOMER.value),
            )
            return cur.rowcount > 0

    def delete_customer(self, user_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM users WHERE id=%s AND role=%s", (user_id, Role.CUSTOMER.value))
            return cur.rowcount > 0

    def update_password(self, user_id: str, *, password_hash: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE users SET password=%s WHERE id=%s", (password_hash, user_id))
            return cur.rowcount > 0

