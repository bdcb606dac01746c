"""Dict-backed implementation of Repository.

Nothing survives the process. ``find_all()`` returns entities in
insertion order; ``update()`` keeps an entity in its original position.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from shopdemo.domain.exceptions import DuplicateIdError, EntityNotFoundError
from shopdemo.domain.repository.repository import Repository, T

logger = logging.getLogger(__name__)


class InMemoryRepository(Repository[T]):

    def __init__(self, key: Callable[[T], str], items: Iterable[T] | None = None) -> None:
        self._key = key
        self._store: dict[str, T] = {}
        for item in items or []:
            self.add(item)

    # --- Repository interface -------------------------------------------------

    def add(self, item: T) -> None:
        entity_id = self._key(item)
        if entity_id in self._store:
            raise DuplicateIdError(entity_id)
        self._store[entity_id] = item
        logger.debug("Added %s", entity_id)

    def update(self, item: T) -> None:
        entity_id = self._key(item)
        if entity_id not in self._store:
            raise EntityNotFoundError(entity_id)
        self._store[entity_id] = item
        logger.debug("Updated %s", entity_id)

    def delete(self, entity_id: str) -> None:
        if entity_id not in self._store:
            raise EntityNotFoundError(entity_id)
        del self._store[entity_id]
        logger.debug("Deleted %s", entity_id)

    def get_by_id(self, entity_id: str) -> T | None:
        return self._store.get(entity_id)

    def find_all(self) -> list[T]:
        return list(self._store.values())

    def __len__(self) -> int:
        return len(self._store)
