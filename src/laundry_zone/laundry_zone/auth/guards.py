from __future__ import annotations

from functools import wraps
from typing import Callable, NamedTuple

from flask import g, request

from ..common.logger import get_logger
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, UnauthenticatedError
from .model import Principal
from .service import AuthService
from .tokens import extract_bearer_token

logger = get_logger(__name__)


class Guards(NamedTuple):
    login_required: Callable
    admin_required: Callable


def current_principal() -> Principal:
    """The principal attached by `login_required` for the current request."""
    return g.principal


def build_guards(auth_service: AuthService) -> Guards:
    def _authenticate() -> Principal:
        token = extract_bearer_token(request.headers.get("Authorization"))
        if not token:
            logger.info("Auth: no bearer token on %s %s", request.method, request.path)
            raise UnauthenticatedError("Access token required")
        principal = auth_service.verify_token(token)
        g.principal = principal
        return principal

    def login_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            _authenticate()
            return view(*args, **kwargs)

        return wrapper

    def admin_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            principal = _authenticate()
            if principal.role is not Role.ADMIN:
                logger.warning("Auth: admin access denied for username=%s", principal.username)
                raise AuthorizationError("Admin access required")
            return view(*args, **kwargs)

        return wrapper

    return Guards(login_required=login_required, admin_required=admin_required)
