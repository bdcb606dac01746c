"""Order aggregate.

An order references its customer and its products; it owns neither.
Products are held by reference, so the same product may appear more
than once and no price snapshot is taken.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from shopdemo.domain.model.customer import Customer
from shopdemo.domain.model.product import Product
from shopdemo.domain.model.value_objects import Money


@dataclass
class Order:
    """Aggregate root for purchase orders.

    Created empty, then filled with ``add_product()``. There is no
    way to remove a product once added.
    """

    id: str
    customer: Customer
    items: list[Product] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.items = list(self.items)

    def add_product(self, product: Product) -> None:
        """Append *product* to the end of the item list."""
        self.items.append(product)

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        """Sum of item prices, recomputed on every access."""
        result = Money.zero()
        for item in self.items:
            result = result + item.price
        return result
