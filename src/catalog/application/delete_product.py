"""Application service: Delete Product use case."""

from __future__ import annotations

import logging

from catalog.application.dto import DeleteProductCommand
from catalog.domain.exceptions import ProductNotFoundError
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, command: DeleteProductCommand) -> None:
        with self._product_repo.transaction():
            if not self._product_repo.exists_by_id(command.id):
                raise ProductNotFoundError(command.id)
            self._product_repo.delete_by_id(command.id)

        logger.info("Deleted product #%s", command.id)
