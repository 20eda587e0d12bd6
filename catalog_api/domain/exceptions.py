"""
Error taxonomy for the product catalog.

Use cases raise these; controllers translate them to HTTP status codes.
Every error carries a client-safe ``message``.
"""

# Standard library imports
from typing import Any, Dict, List, Optional


class CatalogError(Exception):
    """Base exception for all catalog errors."""

    default_message = "An error occurred."

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


# -----------------------------------------------------------------------------
# Input
# -----------------------------------------------------------------------------


class ValidationError(CatalogError):
    """Raised when input does not satisfy field constraints."""

    default_message = "Validation failed"

    def __init__(
        self,
        message: Optional[str] = None,
        errors: Optional[List[Dict[str, Any]]] = None,
    ) -> None:
        super().__init__(message)
        self.errors = errors or []


class InvalidIdError(CatalogError):
    """Raised when an identifier is not a syntactically valid ObjectId."""

    default_message = "Invalid product ID"


# -----------------------------------------------------------------------------
# Identity
# -----------------------------------------------------------------------------


class DuplicateEmailError(CatalogError):
    default_message = "User with this email already exists"


class InvalidCredentialsError(CatalogError):
    """Unknown email and wrong password both map to this error."""

    default_message = "Invalid email or password"


class AuthenticationError(CatalogError):
    """Base for every failure to resolve a caller from a bearer token."""

    default_message = "Token verification failed."


class MissingTokenError(AuthenticationError):
    default_message = "Access denied. No token provided."


class InvalidTokenError(AuthenticationError):
    default_message = "Invalid token."


class ExpiredTokenError(AuthenticationError):
    default_message = "Token expired."


class UserNotFoundError(AuthenticationError):
    default_message = "Token is valid but user not found."


# -----------------------------------------------------------------------------
# Resources
# -----------------------------------------------------------------------------


class NotFoundError(CatalogError):
    default_message = "Product not found"


class ForbiddenError(CatalogError):
    """The caller is authenticated but does not own the resource."""

    default_message = "You are not allowed to modify this product"


class ServerError(CatalogError):
    default_message = "Internal server error"
