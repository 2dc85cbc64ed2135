"""Customer domain exceptions.

Raised by the Service Layer (and the repository, for constraint
violations) when business rules are violated.  The API layer (Views)
catches these and translates them into appropriate HTTP responses.
"""

from __future__ import annotations

from modules.core.exceptions import ConflictError, NotFoundError


class CustomerNumberAlreadyExists(ConflictError):
    """Another non-deleted customer already holds this customer number."""

    default_message = "customer number already exists"


class CustomerNotFound(NotFoundError):
    """The requested customer does not exist or has been soft-deleted."""

    default_message = "customer not found"
