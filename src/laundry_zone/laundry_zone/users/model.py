from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: an account row (admin or customer).

    Note: Plain data object, no DB access code here.
    """

    id: str
    username: str
    password_hash: str
    role: Role
    name: Optional[str]
    phone: Optional[str]
    address: Optional[str] = None
    created_at: Optional[str] = None

    def to_public_dict(self) -> dict:
        return {
            "id": self.id,
            "username": self.username,
            "role": self.role.value,
            "name": self.name,
            "phone": self.phone,
            "address": self.address,
            "created_at": self.created_at,
        }
