"""Application service: Create Product use case."""

from __future__ import annotations

import logging

from catalog.application.dto import CreateProductCommand
from catalog.domain.model.product import Product, ProductStatus
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class CreateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, command: CreateProductCommand) -> Product:
        """Add a new product to the catalog and return it with its new id."""
        product = Product.create(
            name=command.name,
            price=command.price,
            stock=command.stock,
            status=ProductStatus.from_string(command.status),
        )
        with self._product_repo.transaction():
            saved = self._product_repo.save(product)

        logger.info("Created product #%s '%s'", saved.id, saved.name)
        return saved
