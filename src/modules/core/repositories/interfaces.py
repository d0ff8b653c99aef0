"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the entity managed by the repository
    (e.g. ``Customer``).  Absence is reported with ``None`` / ``False``,
    never with an exception.
    """

    @abstractmethod
    def get_by_id(self, id: int) -> Optional[T]:
        """Retrieve an entity by its primary key."""

    @abstractmethod
    def exists(self, id: int) -> bool:
        """Return ``True`` when an entity with this primary key is stored."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Persist (create or update) an entity.

        Raises:
            ConstraintViolation: if the store rejects the write.
        """

    @abstractmethod
    def delete(self, id: int) -> bool:
        """Hard-delete an entity by ID; ``False`` when nothing was removed."""
