"""Domain error taxonomy.

Every business-rule violation raised by a Service Layer is a subclass of
``DomainError``.  Callers compare errors by class (``isinstance`` /
``except``), never by identity.  The API layer maps each kind to an HTTP
status; nothing here knows about HTTP.
"""

from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base class for all domain errors."""

    default_message = "domain error"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(DomainError):
    """Caller-supplied data fails shape or range rules."""

    default_message = "invalid input"

    def __init__(self, message: Optional[str] = None, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class ConflictError(DomainError):
    """A uniqueness rule on a business key would be violated."""

    default_message = "conflict"


class NotFoundError(DomainError):
    """The referenced entity does not exist or has been soft-deleted."""

    default_message = "not found"
