from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class Principal:
    """Identity carried by a verified bearer token."""

    id: str
    username: str
    role: Role


@dataclass(frozen=True)
class LoginResult:
    token: str
    user: dict
