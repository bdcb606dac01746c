"""Application service: Place Order use case.

Orchestrates the flow between repositories and the Order aggregate.
This is the only place that coordinates multiple aggregates (customer
and product lookup + order creation).
"""

from __future__ import annotations

import logging

from shopdemo.application.dto import OrderDTO
from shopdemo.application.result import Result
from shopdemo.domain.exceptions import DomainException, EntityNotFoundError
from shopdemo.domain.model.customer import Customer
from shopdemo.domain.model.order import Order
from shopdemo.domain.model.product import Product
from shopdemo.domain.repository.repository import Repository

logger = logging.getLogger(__name__)


class PlaceOrderHandler:

    def __init__(
        self,
        order_repo: Repository[Order],
        customer_repo: Repository[Customer],
        product_repo: Repository[Product],
    ) -> None:
        self._order_repo = order_repo
        self._customer_repo = customer_repo
        self._product_repo = product_repo

    def handle(
        self,
        order_id: str,
        customer_id: str,
        product_ids: list[str],
    ) -> Result[OrderDTO]:
        """Create an order for a stored customer and store it.

        Steps:
        1. Resolve the customer and every product id (fail if any is unknown).
        2. Start an empty order and append the products in the given order.
        3. Add it to the order repository (fail on a duplicate id).

        Nothing is stored unless every step succeeds.
        """
        try:
            customer = self._customer_repo.get_by_id(customer_id)
            if customer is None:
                raise EntityNotFoundError(customer_id)

            order = Order(id=order_id, customer=customer)
            for product_id in product_ids:
                product = self._product_repo.get_by_id(product_id)
                if product is None:
                    raise EntityNotFoundError(product_id)
                order.add_product(product)

            self._order_repo.add(order)
        except DomainException as exc:
            logger.info("Order %s rejected: %s", order_id, exc)
            return Result.fail(exc)

        logger.info("Order %s placed, total %s", order.id, order.total)
        return Result.success(self._to_dto(order))

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,
            customer_name=order.customer.name,
            product_names=[item.name for item in order.items],
            total=str(order.total),
        )
