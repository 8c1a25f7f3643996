"""Translate domain exceptions into JSON error bodies `{error, details?}`."""
from __future__ import annotations

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from ..common.logger import get_logger
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    InvalidTokenError,
    NotFoundError,
    OrderPlacementError,
    StoreError,
    UnauthenticatedError,
    ValidationError,
)

logger = get_logger(__name__)


def _error(status: int, message: str, details: str | None = None):
    body = {"error": message}
    if details:
        body["details"] = details
    return jsonify(body), status


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def handle_validation(e: ValidationError):
        return _error(400, str(e))

    @app.errorhandler(UnauthenticatedError)
    def handle_unauthenticated(e: UnauthenticatedError):
        return _error(401, str(e) or "Access token required")

    @app.errorhandler(InvalidTokenError)
    def handle_invalid_token(e: InvalidTokenError):
        return _error(403, "Invalid token")

    @app.errorhandler(AuthenticationError)
    def handle_authentication(e: AuthenticationError):
        return _error(401, str(e) or "Invalid credentials")

    @app.errorhandler(AuthorizationError)
    def handle_authorization(e: AuthorizationError):
        return _error(403, str(e) or "Admin access required")

    @app.errorhandler(NotFoundError)
    def handle_not_found(e: NotFoundError):
        return _error(404, str(e) or "Not found")

    @app.errorhandler(OrderPlacementError)
    def handle_order_placement(e: OrderPlacementError):
        logger.error("Order placement failed: %s", e)
        return _error(500, "System error", str(e))

    @app.errorhandler(StoreError)
    def handle_store(e: StoreError):
        logger.error("Store failure: %s", e)
        return _error(500, "Database error", str(e))

    @app.errorhandler(HTTPException)
    def handle_http(e: HTTPException):
        return _error(e.code or 500, e.name)

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception("Unhandled error")
        return _error(500, "Internal server error")
