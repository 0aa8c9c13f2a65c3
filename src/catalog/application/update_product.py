"""Application service: Update Product use case."""

from __future__ import annotations

import logging

from catalog.application.dto import UpdateProductCommand
from catalog.domain.exceptions import ProductNotFoundError
from catalog.domain.model.product import Product, ProductStatus
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, command: UpdateProductCommand) -> Product:
        """Replace name, price, stock and status of an existing product.

        All four mutations are applied to the in-memory aggregate before the
        single save, so a rejected status change leaves the stored product
        untouched.
        """
        with self._product_repo.transaction():
            product = self._product_repo.find_by_id(command.id)
            if product is None:
                raise ProductNotFoundError(command.id)

            product.rename(command.name)
            product.update_price(command.price)
            product.adjust_stock(command.stock)
            product.change_status(ProductStatus.from_string(command.status))

            saved = self._product_repo.save(product)

        logger.info("Updated product #%s", saved.id)
        return saved
