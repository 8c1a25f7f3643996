from __future__ import annotations

import re
from typing import Any, Optional, Sequence

from werkzeug.security import generate_password_hash

from ..common.logger import get_logger
from ..common.validators import matches_search, optional_text, require_non_empty
from ..core.constants import DEFAULT_CUSTOMER_PASSWORD
from ..core.exceptions import NotFoundError
from .model import User
from .repository import UserRepository

logger = get_logger(__name__)


def derive_customer_username(name: str, phone: str) -> str:
    """Lower-cased name without whitespace plus the last six phone characters."""
    return re.sub(r"\s+", "", name.lower()) + phone[-6:]


class CustomerService:
    """Use case: manage customer accounts (admin back office)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def list_customers(self, *, search: Optional[str] = None) -> Sequence[User]:
        customers = self._users.list_customers()
        return [c for c in customers if matches_search(search, c.name, c.phone, c.username)]

    def create_customer(self, *, name: Any, phone: Any, address: Any = None) -> User:
        name = require_non_empty(name, "Name")
        phone = require_non_empty(phone, "Phone")

        user = self._users.create_customer(
            username=derive_customer_username(name, phone),
            password_hash=generate_password_hash(DEFAULT_CUSTOMER_PASSWORD),
            name=name,
            phone=phone,
            address=optional_text(address),
        )
        logger.info("Customer created id=%s username=%s", user.id, user.username)
        return user

    def update_customer(self, customer_id: str, *, name: Any, phone: Any, address: Any = None) -> None:
        # Full replace: a missing address is stored as null.
        name = require_non_empty(name, "Name")
        phone = require_non_empty(phone, "Phone")

        if not self._users.update_customer(customer_id, name=name, phone=phone, address=optional_text(address)):
            raise NotFoundError("Customer not found")
        logger.info("Customer updated id=%s", customer_id)

    def delete_customer(self, customer_id: str) -> None:
        if not self._users.delete_customer(customer_id):
            raise NotFoundError("Customer not found")
        logger.info("Customer deleted id=%s", customer_id)
