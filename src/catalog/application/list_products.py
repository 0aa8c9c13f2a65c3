"""Application service: List Products use case (query).

Returns the whole catalog in one go.  There is no upper bound, so this is
only meant for small catalogs and administrative dumps; use
SearchProductsHandler for anything user-facing.
"""

from __future__ import annotations

from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[Product]:
        with self._product_repo.transaction():
            return self._product_repo.find_all()
