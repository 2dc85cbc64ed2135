"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Customer``).  Every method only sees records that
    have not been soft-deleted.
    """

    @abstractmethod
    def get_by_id(self, id: int) -> Optional[T]:
        """Retrieve an entity by its primary key."""

    @abstractmethod
    def list(self) -> List[T]:
        """List all entities."""

    @abstractmethod
    def save(self, entity: T) -> int:
        """Insert a new entity and return the assigned primary key."""

    @abstractmethod
    def update(self, entity: T) -> int:
        """Replace the mutable fields of an entity; return rows affected."""

    @abstractmethod
    def delete(self, id: int) -> int:
        """Soft-delete an entity by ID; return rows affected."""
