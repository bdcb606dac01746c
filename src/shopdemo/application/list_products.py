"""Application service: List Products use case (query)."""

from __future__ import annotations

from shopdemo.application.dto import ProductDTO
from shopdemo.domain.model.product import Product
from shopdemo.domain.repository.repository import Repository


class ListProductsHandler:

    def __init__(self, product_repo: Repository[Product]) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[ProductDTO]:
        return [self._to_dto(p) for p in self._product_repo.find_all()]

    @staticmethod
    def _to_dto(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            kind=product.kind_label,
            name=product.name,
            details=product.details,
            price=str(product.price),
        )
