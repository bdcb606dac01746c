"""Application service: Remove Product use case."""

from __future__ import annotations

import logging

from shopdemo.application.result import Result
from shopdemo.domain.exceptions import DomainException
from shopdemo.domain.model.product import Product
from shopdemo.domain.repository.repository import Repository

logger = logging.getLogger(__name__)


class RemoveProductHandler:

    def __init__(self, product_repo: Repository[Product]) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> Result[None]:
        try:
            self._product_repo.delete(product_id)
        except DomainException as exc:
            logger.info("Product %s not removed: %s", product_id, exc)
            return Result.fail(exc)

        logger.info("Product %s removed", product_id)
        return Result.success(None)
