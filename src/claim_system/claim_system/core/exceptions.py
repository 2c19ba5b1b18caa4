from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    def __init__(self, message: str, *, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class AuthenticationError(DomainError):
    """Raised when the acting user cannot be resolved."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class NotFoundError(DomainError):
    """Raised when a claim or document does not exist."""


class InvalidStateError(DomainError):
    """Raised when a claim is not in a state that allows the transition."""


class ConflictError(DomainError):
    """Raised when a claim changed underneath a read-modify-write."""
