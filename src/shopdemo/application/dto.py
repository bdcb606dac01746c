"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from shopdemo.domain.model.product import ProductKind


@dataclass(frozen=True)
class ProductSpec:
    """Input: everything needed to build a product of any kind.

    ``maker`` is the author of a book or the brand of a phone/laptop.
    """

    kind: ProductKind
    id: str
    name: str
    price: str | int | float | Decimal
    maker: str


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as displayed to the user."""

    id: str
    kind: str
    name: str
    details: str
    price: str  # formatted, e.g. "$15.00"


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: str
    customer_name: str
    product_names: list[str]
    total: str
