from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import User


class UserRepository(Protocol):
    """Repository interface for accounts.

    Note (DIP): services depend on this interface, not on a concrete DB.
    """

    def get_by_id(self, user_id: str) -> Optional[User]:
        raise NotImplementedError

    def get_by_username(self, username: str) -> Optional[User]:
        raise NotImplementedError

    def get_customer_by_phone(self, phone: str) -> Optional[User]:
        raise NotImplementedError

    def list_customers(self) -> Sequence[User]:
        """Customers ordered by creation time, newest first."""

        raise NotImplementedError

    def create_customer(
        self,
        *,
        username: str,
        password_hash: str,
        name: str,
        phone: str,
        address: Optional[str],
    ) -> User:
        raise NotImplementedError

    def create_customer_if_absent(
        self,
        *,
        username: str,
        password_hash: str,
        name: str,
        phone: str,
        address: Optional[str],
    ) -> User:
        """Insert a customer unless one with this phone exists; return the stored row."""

        raise NotImplementedError

    def update_customer(self, user_id: str, *, name: str, phone: str, address: Optional[str]) -> bool:
        raise NotImplementedError

    def delete_customer(self, user_id: str) -> bool:
        raise NotImplementedError

    def update_password(self, user_id: str, *, password_hash: str) -> bool:
        raise NotImplementedError
