from __future__ import annotations

from typing import Sequence


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class MissingFieldsError(ValidationError):
    """Raised when a required request field is absent or blank."""

    def __init__(self, fields: Sequence[str], message: str = "Missing fields"):
        super().__init__(message)
        self.fields = tuple(fields)


class DuplicateUsernameError(ValidationError):
    """Raised when registering a username that is already taken."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class InvalidCredentialsError(AuthenticationError):
    """Unknown username or wrong password (deliberately indistinguishable)."""


class NotFoundError(DomainError):
    """Raised when a requested record does not exist."""


class StoreUnavailableError(DomainError):
    """Raised when the backing database fails."""
