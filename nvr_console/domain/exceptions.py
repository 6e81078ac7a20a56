"""
Exception hierarchy for the camera console.

Registry operations raise these before (InvalidInput, InvalidPolicy) or
after (NotFound) consulting the persistence collaborator; repositories
wrap database failures in UnavailableError. The API layer maps each class
to an HTTP status in api/v1/errors.py.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class ConsoleError(Exception):
    """Base exception for all console errors."""

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


class InvalidInputError(ConsoleError):
    """Raised when required fields are missing or malformed."""

    def __init__(self, message: str, fields: Optional[Dict[str, str]] = None):
        super().__init__(message, details={"fields": fields} if fields else None)
        self.fields = fields or {}


class InvalidPolicyError(InvalidInputError):
    """Raised when a recording interval or retention window is out of range."""
    pass


# -----------------------------------------------------------------------------
# Lookup
# -----------------------------------------------------------------------------


class NotFoundError(ConsoleError):
    """Raised when an operation targets an id or name absent from a registry."""
    pass


# -----------------------------------------------------------------------------
# Persistence
# -----------------------------------------------------------------------------


class UnavailableError(ConsoleError):
    """
    Raised when the persistence collaborator cannot be reached.

    The message carries internal detail for logs only; user_message is the
    generic text returned to clients.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message, user_message="Service unavailable")
        self.cause = cause
