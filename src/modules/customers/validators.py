"""Request validation for customer create/update payloads.

Pure functions: no I/O, no side effects.  The first failing rule is
reported as a ``ValidationError`` naming the offending field.
"""

from __future__ import annotations

from modules.core.exceptions import ValidationError
from modules.customers.dtos import CustomerRequestDTO


def validate_customer_request(request: CustomerRequestDTO) -> None:
    """Check a create or update request; raise ``ValidationError`` on failure."""
    if request.customer_number is None:
        raise ValidationError(
            "invalid input: customer number is required", field="customer_number"
        )
    if request.customer_number <= 0:
        raise ValidationError(
            "invalid input: customer number must be greater than 0",
            field="customer_number",
        )
    if not request.first_name:
        raise ValidationError("invalid input: first name is required", field="first_name")
    if not request.last_name:
        raise ValidationError("invalid input: last name is required", field="last_name")
