"""Product aggregate and its variants.

Products live independently of orders. Each variant is deliverable and
refundable; only the laptop refuses every refund.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import ClassVar

from shopdemo.domain.exceptions import NonRefundableError, ValidationError
from shopdemo.domain.model.capabilities import Deliverable, Refundable
from shopdemo.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product(Deliverable, Refundable):
    """A product in the catalog.

    Immutable once built. ``price`` may be passed as a plain number and
    is normalised to ``Money``; a negative price raises InvalidPriceError
    so an invalid product never exists.
    """

    kind_label: ClassVar[str] = "Sản phẩm"

    id: str
    name: str
    price: Money

    def __post_init__(self) -> None:
        if not isinstance(self.price, Money):
            object.__setattr__(self, "price", Money.of(self.price))

    @property
    def details(self) -> str:
        """Variant-specific attribute, as shown in listings."""
        return ""

    def __str__(self) -> str:
        return f"{self.kind_label} {self.id}: {self.name} ({self.details}) - {self.price}"


@dataclass(frozen=True)
class Book(Product):

    kind_label: ClassVar[str] = "Sách"

    author: str

    @property
    def details(self) -> str:
        return f"tác giả {self.author}"

    def deliver(self) -> str:
        return f"Giao sách: {self.name} của tác giả {self.author}"

    def refund(self) -> str:
        return f"Hoàn tiền sách: {self.name}"


@dataclass(frozen=True)
class Phone(Product):

    kind_label: ClassVar[str] = "Điện thoại"

    brand: str

    @property
    def details(self) -> str:
        return f"hãng {self.brand}"

    def deliver(self) -> str:
        return f"Giao điện thoại: {self.name}, hãng: {self.brand}"

    def refund(self) -> str:
        return f"Hoàn tiền điện thoại: {self.name}"


@dataclass(frozen=True)
class Laptop(Product):
    """Laptops can be delivered but never refunded."""

    kind_label: ClassVar[str] = "Laptop"

    brand: str

    @property
    def details(self) -> str:
        return f"hãng {self.brand}"

    def deliver(self) -> str:
        return f"Giao laptop: {self.name}, hãng: {self.brand}"

    def refund(self) -> str:
        raise NonRefundableError(self.name, category=self.kind_label)


class ProductKind(Enum):
    BOOK = "BOOK"
    PHONE = "PHONE"
    LAPTOP = "LAPTOP"


_VARIANTS: dict[ProductKind, type[Product]] = {
    ProductKind.BOOK: Book,
    ProductKind.PHONE: Phone,
    ProductKind.LAPTOP: Laptop,
}


def make_product(
    kind: ProductKind,
    id: str,
    name: str,
    price: Money | str | float | int | Decimal,
    maker: str,
) -> Product:
    """Build any product variant.

    *maker* is the author for books and the brand for phones and laptops.
    """
    try:
        variant = _VARIANTS[kind]
    except KeyError:
        raise ValidationError(f"Unknown product kind: {kind!r}") from None
    return variant(id, name, price, maker)
