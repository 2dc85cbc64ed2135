"""Django ORM implementation of the Customer repository.

Satisfies ``ICustomerRepository`` using Django's QuerySet API.  Every query
starts from ``Customer.objects.alive()`` so soft-deleted rows never leak
into a read or an existence probe.

Error handling follows the Null Object pattern for plain look-ups:
``get_by_id`` returns ``None`` and the Service Layer decides what a missing
entity means.  The partial unique constraint on ``customer_number`` is
translated into ``CustomerNumberAlreadyExists``; every other database error
propagates unchanged.
"""

from __future__ import annotations

from typing import List, Optional

import structlog
from django.db import IntegrityError, transaction

from modules.core.models import SoftDeleteQuerySet
from modules.customers.exceptions import CustomerNotFound, CustomerNumberAlreadyExists
from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)

UNIQUE_CUSTOMER_NUMBER = "customers_alive_customer_number_uniq"


def _is_customer_number_collision(exc: IntegrityError) -> bool:
    # SQLite names the columns, PostgreSQL names the constraint.
    text = str(exc)
    return UNIQUE_CUSTOMER_NUMBER in text or "customers.customer_number" in text


class CustomerDjangoRepository(ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    def _alive(self) -> SoftDeleteQuerySet:
        return Customer.objects.alive()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def list(self) -> List[Customer]:
        return list(self._alive().order_by("id"))

    def get_by_id(self, id: int) -> Optional[Customer]:
        """Retrieve a customer by primary key, or ``None``."""
        return self._alive().filter(id=id).first()

    def get_by_customer_number(self, customer_number: int) -> Customer:
        try:
            return self._alive().get(customer_number=customer_number)
        except Customer.DoesNotExist as exc:
            raise CustomerNotFound() from exc

    def exists_by_id(self, id: int) -> bool:
        return self._alive().filter(id=id).exists()

    def exists_by_customer_number(self, customer_number: int) -> bool:
        return self._alive().filter(customer_number=customer_number).exists()

    def exists_by_id_and_customer_number(self, id: int, customer_number: int) -> bool:
        return self._alive().filter(id=id, customer_number=customer_number).exists()

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def save(self, entity: Customer) -> int:
        """Insert a new customer and return the assigned id."""
        try:
            with transaction.atomic():
                entity.save(force_insert=True)
        except IntegrityError as exc:
            if _is_customer_number_collision(exc):
                raise CustomerNumberAlreadyExists() from exc
            raise
        logger.info("customer.saved", customer_id=entity.id)
        return entity.id

    def update(self, entity: Customer) -> int:
        """Replace the mutable fields of customer ``entity.id``.

        Returns the number of rows affected (``0`` if the row was deleted
        in the meantime).
        """
        try:
            with transaction.atomic():
                count = (
                    self._alive()
                    .filter(id=entity.id)
                    .update(
                        customer_number=entity.customer_number,
                        first_name=entity.first_name,
                        last_name=entity.last_name,
                        updated_at=entity.updated_at,
                    )
                )
        except IntegrityError as exc:
            if _is_customer_number_collision(exc):
                raise CustomerNumberAlreadyExists() from exc
            raise
        logger.info("customer.row_updated", customer_id=entity.id, rows=count)
        return count

    def delete(self, id: int) -> int:
        """Soft-delete a customer; return the number of rows affected."""
        count = self._alive().filter(id=id).soft_delete()
        logger.info("customer.row_soft_deleted", customer_id=id, rows=count)
        return count
