from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from ..core.constants import JWT_ALGORITHM, TOKEN_TTL_HOURS
from ..core.enums import Role
from ..core.exceptions import InvalidTokenError
from .model import Principal


class TokenIssuer:
    """Signs and verifies HS256 bearer tokens with a server-held secret."""

    def __init__(self, secret: str, *, ttl_hours: int = TOKEN_TTL_HOURS):
        if not secret:
            raise ValueError("JWT secret must not be empty")
        self._secret = secret
        self._ttl = timedelta(hours=int(ttl_hours))

    def issue(self, principal: Principal, *, now: Optional[datetime] = None) -> str:
        now = now or datetime.now(timezone.utc)
        payload = {
            "id": principal.id,
            "username": principal.username,
            "role": principal.role.value,
            "iat": int(now.timestamp()),
            "exp": int((now + self._ttl).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=JWT_ALGORITHM)

    def verify(self, token: str) -> Principal:
        try:
            payload = jwt.decode(token, self._secret, algorithms=[JWT_ALGORITHM])
        except jwt.ExpiredSignatureError as exc:
            raise InvalidTokenError("Token expired") from exc
        except jwt.InvalidTokenError as exc:
            raise InvalidTokenError("Invalid token") from exc

        user_id = payload.get("id")
        username = payload.get("username")
        if not user_id or not username:
            raise InvalidTokenError("Invalid token")
        try:
            role = Role(payload.get("role"))
        except ValueError as exc:
            raise InvalidTokenError("Invalid token") from exc

        return Principal(id=str(user_id), username=str(username), role=role)


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    parts = authorization.strip().split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    return parts[1].strip() or None
