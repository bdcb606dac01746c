"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from shopdemo.application.dto import ProductSpec
from shopdemo.application.result import Result
from shopdemo.domain.exceptions import DomainException
from shopdemo.domain.model.product import Product, make_product
from shopdemo.domain.repository.repository import Repository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: Repository[Product]) -> None:
        self._product_repo = product_repo

    def handle(self, spec: ProductSpec) -> Result[Product]:
        """Build a product from *spec* and add it to the catalog.

        Fails with INVALID_PRICE before anything is stored, or with
        DUPLICATE_ID if the catalog already holds ``spec.id``.
        """
        try:
            product = make_product(spec.kind, spec.id, spec.name, spec.price, spec.maker)
            self._product_repo.add(product)
        except DomainException as exc:
            logger.info("Product %s rejected: %s", spec.id, exc)
            return Result.fail(exc)

        logger.info("Product %s added", product.id)
        return Result.success(product)
