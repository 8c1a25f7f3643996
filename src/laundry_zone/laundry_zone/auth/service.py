from __future__ import annotations

from typing import Any

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.logger import get_logger
from ..common.validators import require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.exceptions import AuthenticationError, NotFoundError, ValidationError
from ..users.repository import UserRepository
from .model import LoginResult, Principal
from .tokens import TokenIssuer

logger = get_logger(__name__)


def _password_matches(password_hash: str, password: str) -> bool:
    try:
        return check_password_hash(password_hash.strip(), password.strip())
    except ValueError:
        # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
        return False


class AuthService:
    """Use cases: login and password change."""

    def __init__(self, users: UserRepository, tokens: TokenIssuer):
        self._users = users
        self._tokens = tokens

    def login(self, username: Any, password: Any) -> LoginResult:
        username = require_non_empty(username, "Username")
        if password is None or not str(password):
            raise ValidationError("Password is required")

        user = self._users.get_by_username(username)
        if not user or not _password_matches(user.password_hash, str(password)):
            logger.warning("Login failed for username=%s", username)
            raise AuthenticationError("Invalid credentials")

        principal = Principal(id=user.id, username=user.username, role=user.role)
        token = self._tokens.issue(principal)
        logger.info("Login successful for username=%s role=%s", user.username, user.role.value)
        return LoginResult(
            token=token,
            user={"id": user.id, "username": user.username, "role": user.role.value, "name": user.name},
        )

    def verify_token(self, token: str) -> Principal:
        return self._tokens.verify(token)

    def change_password(
        self,
        principal: Principal,
        *,
        current_password: Any,
        new_password: Any,
        confirm_password: Any,
    ) -> None:
        current_password = require_non_empty(current_password, "Current password")
        new_password = require_min_length(str(new_password or ""), "New password", MIN_PASSWORD_LENGTH)
        if new_password != confirm_password:
            raise ValidationError("New password and confirmation do not match")

        user = self._users.get_by_id(principal.id)
        if not user:
            raise NotFoundError("User not found")
        if not _password_matches(user.password_hash, current_password):
            logger.warning("Password change rejected for username=%s", principal.username)
            raise AuthenticationError("Current password is incorrect")

        self._users.update_password(user.id, password_hash=generate_password_hash(new_password))
        logger.info("Password changed for username=%s", principal.username)
