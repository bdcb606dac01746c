"""Application service: Deliver Product use case."""

from __future__ import annotations

import logging

from shopdemo.application.result import Result
from shopdemo.domain.exceptions import EntityNotFoundError
from shopdemo.domain.model.product import Product
from shopdemo.domain.repository.repository import Repository

logger = logging.getLogger(__name__)


class DeliverProductHandler:

    def __init__(self, product_repo: Repository[Product]) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> Result[str]:
        """Return the delivery notice of a stored product."""
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            logger.info("Delivery of %s refused: unknown product", product_id)
            return Result.fail(EntityNotFoundError(product_id))

        logger.info("Product %s delivered", product_id)
        return Result.success(product.deliver())
