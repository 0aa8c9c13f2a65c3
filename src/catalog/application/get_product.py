"""Application service: Get Product use case (query)."""

from __future__ import annotations

from catalog.domain.exceptions import ProductNotFoundError
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository


class GetProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> Product:
        with self._product_repo.transaction():
            product = self._product_repo.find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product
