"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T, ID]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")
ID = TypeVar("ID")


class IRepository(ABC, Generic[T, ID]):
    """Base generic repository contract.

    ``T`` is the domain entity managed by the repository and ``ID`` the
    type of its identifier.  Every call is atomic with respect to the
    single record it touches; no wider transaction is implied.
    """

    @abstractmethod
    def save(self, entity: T) -> T:
        """Insert or upsert an entity, assigning an id when absent."""

    @abstractmethod
    def find_by_id(self, id: ID) -> Optional[T]:
        """Retrieve an entity by id, or ``None`` when absent."""

    @abstractmethod
    def find_all(self) -> List[T]:
        """Return every stored entity in adapter-defined order."""

    @abstractmethod
    def delete_by_id(self, id: ID) -> None:
        """Remove the entity with the given id."""
