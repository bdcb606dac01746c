"""Abstract keyed repository.

Defined in the domain layer so the domain never depends on
infrastructure. One generic interface serves products, customers and
orders alike; implementations take the key extraction as a parameter
instead of being subclassed per entity.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class Repository(ABC, Generic[T]):

    @abstractmethod
    def add(self, item: T) -> None:
        """Store a new entity. Raises DuplicateIdError if its id is taken."""

    @abstractmethod
    def update(self, item: T) -> None:
        """Replace a stored entity. Raises EntityNotFoundError if absent."""

    @abstractmethod
    def delete(self, entity_id: str) -> None:
        """Remove a stored entity. Raises EntityNotFoundError if absent."""

    @abstractmethod
    def get_by_id(self, entity_id: str) -> T | None:
        """Return an entity by its ID, or None if not found."""

    @abstractmethod
    def find_all(self) -> list[T]:
        """Return a snapshot of every stored entity."""

    @abstractmethod
    def __len__(self) -> int: ...

    def __contains__(self, entity_id: object) -> bool:
        return isinstance(entity_id, str) and self.get_by_id(entity_id) is not None
