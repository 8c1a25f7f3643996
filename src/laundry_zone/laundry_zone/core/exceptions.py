class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class UnauthenticatedError(DomainError):
    """Raised when a protected call carries no bearer token."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class InvalidTokenError(AuthenticationError):
    """Raised when a bearer token fails signature or expiry checks."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class NotFoundError(DomainError):
    """Raised when a referenced record does not exist."""


class StoreError(DomainError):
    """Raised when the underlying data store rejects an operation."""


class OrderPlacementError(StoreError):
    """Raised when a write fails part-way through order placement."""
