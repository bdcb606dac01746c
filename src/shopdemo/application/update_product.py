"""Application service: Update Product use case."""

from __future__ import annotations

import logging

from shopdemo.application.dto import ProductSpec
from shopdemo.application.result import Result
from shopdemo.domain.exceptions import DomainException
from shopdemo.domain.model.product import Product, make_product
from shopdemo.domain.repository.repository import Repository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: Repository[Product]) -> None:
        self._product_repo = product_repo

    def handle(self, spec: ProductSpec) -> Result[Product]:
        """Replace the stored product that has ``spec.id``.

        Products are immutable, so an update swaps in a new instance.
        Orders placed earlier keep referencing the old one.
        """
        try:
            product = make_product(spec.kind, spec.id, spec.name, spec.price, spec.maker)
            self._product_repo.update(product)
        except DomainException as exc:
            logger.info("Product %s not updated: %s", spec.id, exc)
            return Result.fail(exc)

        logger.info("Product %s updated", product.id)
        return Result.success(product)
