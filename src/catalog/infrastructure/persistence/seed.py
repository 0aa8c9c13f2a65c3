"""Sample catalog for development and demos."""

from __future__ import annotations

import logging

from catalog.domain.model.product import Product, ProductStatus
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

SAMPLE_PRODUCTS: list[tuple[str, str, int, ProductStatus]] = [
    ("Laptop Dell XPS 15", "1299.99", 15, ProductStatus.ACTIVE),
    ("iPhone 15 Pro", "999.00", 25, ProductStatus.ACTIVE),
    ("Sony WH-1000XM5", "349.99", 40, ProductStatus.ACTIVE),
    ("iPad Pro 12.9", "1099.00", 10, ProductStatus.ACTIVE),
    ("Samsung Galaxy S24", "799.99", 0, ProductStatus.DISCONTINUED),
]


def seed_catalog(product_repo: ProductRepository) -> int:
    """Insert the sample products into an empty catalog.

    Returns the number of products created; 0 when the catalog already
    has data.
    """
    with product_repo.transaction():
        if product_repo.find_all():
            logger.info("Products already exist, skipping product seed")
            return 0

        for name, price, stock, status in SAMPLE_PRODUCTS:
            product_repo.save(Product.create(name, price, stock, status))

    logger.info("Seeded %d sample products", len(SAMPLE_PRODUCTS))
    return len(SAMPLE_PRODUCTS)
