"""Customer DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (Views) and the Service
layer.  DTOs are immutable (``frozen=True``).

Parsing is strict about *types* only: a string ``customer_number`` or a
numeric name means the body is malformed.  Business rules (presence,
range, non-empty) are checked afterwards by
``modules.customers.validators.validate_customer_request`` so the API can
tell a malformed body (422) from an invalid one (400).

``customer_number`` is ``Optional`` on purpose: absent and ``0`` are
different failures.
"""

from __future__ import annotations

from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

# Upper bound of the integer column holding customer numbers.
MAX_CUSTOMER_NUMBER = 2_147_483_647

CustomerNumber = Annotated[StrictInt, Field(le=MAX_CUSTOMER_NUMBER)]


class CustomerRequestDTO(BaseModel):
    """Fields shared by create and update requests."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    customer_number: Optional[CustomerNumber] = None
    first_name: Optional[StrictStr] = ""
    last_name: Optional[StrictStr] = ""


class CreateCustomerDTO(CustomerRequestDTO):
    """Immutable DTO for customer creation requests."""


class UpdateCustomerDTO(CustomerRequestDTO):
    """Immutable DTO for customer update requests.

    Updates replace every mutable field, so the shape is the same as for
    creation.
    """
