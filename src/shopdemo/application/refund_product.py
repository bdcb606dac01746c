"""Application service: Refund Product use case.

Works on any product without knowing its variant; a variant that
refuses refunds surfaces as a NON_REFUNDABLE failure.
"""

from __future__ import annotations

import logging

from shopdemo.application.result import Result
from shopdemo.domain.exceptions import DomainException, EntityNotFoundError
from shopdemo.domain.model.product import Product
from shopdemo.domain.repository.repository import Repository

logger = logging.getLogger(__name__)


class RefundProductHandler:

    def __init__(self, product_repo: Repository[Product]) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> Result[str]:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            return Result.fail(EntityNotFoundError(product_id))

        try:
            notice = product.refund()
        except DomainException as exc:
            logger.info("Refund of %s refused: %s", product_id, exc)
            return Result.fail(exc)
        return Result.success(notice)
