"""Application service: Search Products use case (query)."""

from __future__ import annotations

from catalog.application.dto import SearchProductsQuery
from catalog.domain.model.product import Product
from catalog.domain.repository.paging import PageRequest, PageResult
from catalog.domain.repository.product_repository import ProductRepository


class SearchProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, query: SearchProductsQuery) -> PageResult[Product]:
        # Fails fast on out-of-range paging before touching the repository.
        page_request = PageRequest.of(query.page, query.size, query.sort)
        with self._product_repo.transaction():
            return self._product_repo.search(query.term, query.status, page_request)
