"""Test doubles and sample data shared across test modules."""

from __future__ import annotations

from shopdemo.domain.model.product import Book, Laptop, Phone, Product
from shopdemo.domain.repository.repository import Repository, T


def sample_products() -> list[Product]:
    return [
        Book("B1", "Java Programming", 100, "James Gosling"),
        Phone("P1", "iPhone 13", 2000, "Apple"),
        Laptop("L1", "Macbook Pro", 3000, "Apple"),
    ]


class BrokenRepository(Repository[T]):
    """Repository whose storage is unavailable; every call raises RuntimeError."""

    def __init__(self, message: str = "storage unavailable") -> None:
        self._message = message

    def add(self, item: T) -> None:
        raise RuntimeError(self._message)

    def update(self, item: T) -> None:
        raise RuntimeError(self._message)

    def delete(self, entity_id: str) -> None:
        raise RuntimeError(self._message)

    def get_by_id(self, entity_id: str) -> T | None:
        raise RuntimeError(self._message)

    def find_all(self) -> list[T]:
        raise RuntimeError(self._message)

    def __len__(self) -> int:
        return 0
