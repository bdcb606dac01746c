"""Application service: Pay Order use case."""

from __future__ import annotations

import logging

from shopdemo.application.result import Result
from shopdemo.domain.exceptions import EntityNotFoundError
from shopdemo.domain.model.order import Order
from shopdemo.domain.repository.repository import Repository
from shopdemo.domain.service.payment import PaymentMethod

logger = logging.getLogger(__name__)


class PayOrderHandler:

    def __init__(self, order_repo: Repository[Order]) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str, method: PaymentMethod) -> Result[str]:
        """Pay a stored order with *method* and return its confirmation."""
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            logger.info("Payment for order %s refused: unknown order", order_id)
            return Result.fail(EntityNotFoundError(order_id))

        confirmation = method.pay(order)
        logger.info("Order %s settled", order_id)
        return Result.success(confirmation)
