"""
Custom exception hierarchy for the User Service domain.

Raised by the User entity, repositories and use cases. Every exception
inherits from UserServiceError and carries a user-facing message that is
safe to return from the API.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class UserServiceError(Exception):
    """Base exception for all User Service errors."""

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or message
        self.details = details or {}


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------


class ValidationError(UserServiceError, ValueError):
    """Raised when a User field breaks a business rule."""
    pass


# -----------------------------------------------------------------------------
# Business rules
# -----------------------------------------------------------------------------


class ConflictError(UserServiceError):
    """Raised when a record with the same unique key already exists."""
    pass


class NotFoundError(UserServiceError):
    """Raised when the target record of an operation does not exist."""
    pass


# -----------------------------------------------------------------------------
# Storage
# -----------------------------------------------------------------------------


class StorageError(UserServiceError):
    """Raised when the storage backend fails or rejects an operation."""

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        **kwargs,
    ):
        kwargs.setdefault("user_message", "Storage is unavailable. Please try again.")
        super().__init__(message, **kwargs)
        self.operation = operation


# -----------------------------------------------------------------------------
# Safe user-facing message
# -----------------------------------------------------------------------------

def get_user_message(exc: BaseException) -> str:
    """
    Return a safe, user-facing message for any exception.
    Use this at API boundaries so internal details are never exposed.
    """
    if isinstance(exc, UserServiceError) and getattr(exc, "user_message", None):
        return exc.user_message
    return "Something went wrong. Please try again."
