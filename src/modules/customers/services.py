"""Customer service layer (Use Cases).

Orchestrates business rules for the Customer aggregate, delegating
persistence to the injected ``ICustomerRepository``.

Rules enforced here:
- ``customer_number`` is unique among non-deleted customers.
- Reads, updates and deletes only see non-deleted customers.
- ``created_at`` / ``updated_at`` are stamped here, at second precision.
- Every write is followed by a fresh read, so the caller gets exactly
  what storage now holds.

Repository errors other than the domain exceptions are never caught.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog
from django.db import transaction

from modules.core.models import truncated_now
from modules.customers.exceptions import CustomerNotFound, CustomerNumberAlreadyExists
from modules.customers.models import Customer

if TYPE_CHECKING:
    from modules.customers.dtos import CreateCustomerDTO, UpdateCustomerDTO
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerService:
    """Application service for Customer use-cases.

    Stateless apart from the ``ICustomerRepository`` it receives via
    constructor injection (DIP).
    """

    def __init__(self, repository: ICustomerRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_customer(self, dto: CreateCustomerDTO) -> Customer:
        """Create a new customer after enforcing customer-number uniqueness.

        Raises:
            CustomerNumberAlreadyExists: if a non-deleted customer already
                holds ``dto.customer_number``.
        """
        log = logger.bind(customer_number=dto.customer_number)

        if self._repo.exists_by_customer_number(dto.customer_number):
            log.warning("customer.duplicate_customer_number")
            raise CustomerNumberAlreadyExists()

        customer = Customer(
            customer_number=dto.customer_number,
            first_name=dto.first_name,
            last_name=dto.last_name,
            created_at=truncated_now(),
        )
        customer_id = self._repo.save(customer)

        created = self._get_or_raise(customer_id)
        log.info("customer.created", customer_id=customer_id)
        return created

    @transaction.atomic
    def update_customer(self, id: int, dto: UpdateCustomerDTO) -> Customer:
        """Replace the customer number and names of customer ``id``.

        Keeping the number the customer already holds is always allowed;
        taking a number held by another customer is not.

        Raises:
            CustomerNotFound: if the customer does not exist.
            CustomerNumberAlreadyExists: if another customer holds the number.
        """
        log = logger.bind(customer_id=id, customer_number=dto.customer_number)

        if not self._repo.exists_by_id(id):
            log.warning("customer.not_found")
            raise CustomerNotFound()

        keeps_own_number = self._repo.exists_by_id_and_customer_number(
            id, dto.customer_number
        )
        if not keeps_own_number and self._repo.exists_by_customer_number(
            dto.customer_number
        ):
            log.warning("customer.duplicate_customer_number")
            raise CustomerNumberAlreadyExists()

        customer = Customer(
            id=id,
            customer_number=dto.customer_number,
            first_name=dto.first_name,
            last_name=dto.last_name,
            updated_at=truncated_now(),
        )
        self._repo.update(customer)

        updated = self._get_or_raise(id)
        log.info("customer.updated")
        return updated

    @transaction.atomic
    def delete_customer(self, id: int) -> None:
        """Soft-delete a customer.

        Raises:
            CustomerNotFound: if the customer does not exist, or vanished
                between the existence check and the write.
        """
        if not self._repo.exists_by_id(id):
            logger.warning("customer.not_found", customer_id=id)
            raise CustomerNotFound()

        if self._repo.delete(id) < 1:
            logger.warning("customer.delete_noop", customer_id=id)
            raise CustomerNotFound()

        logger.info("customer.soft_deleted", customer_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_customers(self) -> List[Customer]:
        """Return every non-deleted customer in insertion order."""
        return self._repo.list()

    def get_customer(self, id: int) -> Customer:
        """Retrieve a single customer by ID.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        if not self._repo.exists_by_id(id):
            logger.warning("customer.not_found", customer_id=id)
            raise CustomerNotFound()
        customer = self._get_or_raise(id)
        logger.info("customer.retrieved", customer_id=id)
        return customer

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_or_raise(self, id: int) -> Customer:
        customer = self._repo.get_by_id(id)
        if customer is None:
            raise CustomerNotFound()
        return customer
