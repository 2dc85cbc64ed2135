"""Customer repository interface.

Extends ``IRepository[Customer]`` with the look-ups the Service Layer
needs to enforce customer-number uniqueness and existence rules.  Every
method only sees customers that have not been soft-deleted.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.customers.models import Customer


class ICustomerRepository(IRepository["Customer"]):
    """Repository contract for the Customer aggregate."""

    @abstractmethod
    def list(self) -> List[Customer]:
        """List non-deleted customers in insertion order."""

    @abstractmethod
    def get_by_customer_number(self, customer_number: int) -> Customer:
        """Retrieve a customer by business key.

        Raises:
            CustomerNotFound: if no non-deleted customer holds the number.
        """

    @abstractmethod
    def exists_by_id(self, id: int) -> bool:
        """``True`` if a non-deleted customer has this primary key."""

    @abstractmethod
    def exists_by_customer_number(self, customer_number: int) -> bool:
        """``True`` if a non-deleted customer holds this customer number."""

    @abstractmethod
    def exists_by_id_and_customer_number(self, id: int, customer_number: int) -> bool:
        """``True`` if customer ``id`` itself holds ``customer_number``."""
