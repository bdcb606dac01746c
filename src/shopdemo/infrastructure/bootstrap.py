"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from operator import attrgetter

from shopdemo.domain.model.customer import Customer
from shopdemo.domain.model.order import Order
from shopdemo.domain.model.product import Product
from shopdemo.infrastructure.persistence.in_memory_repository import (
    InMemoryRepository,
)

# All three entity kinds are keyed by their ``id`` attribute.
_by_id = attrgetter("id")


def product_repository() -> InMemoryRepository[Product]:
    return InMemoryRepository(_by_id)


def customer_repository() -> InMemoryRepository[Customer]:
    return InMemoryRepository(_by_id)


def order_repository() -> InMemoryRepository[Order]:
    return InMemoryRepository(_by_id)
