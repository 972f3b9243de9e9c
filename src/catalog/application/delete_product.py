"""Application service: Delete Product use case."""

from __future__ import annotations

import structlog

from catalog.domain.outcomes import NotFound, Outcome, Removed
from catalog.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str | None) -> Outcome:
        """Hard-delete a product. Deleting twice yields NotFound the second time."""
        if not product_id or self._product_repo.get_by_id(product_id) is None:
            return NotFound()

        self._product_repo.delete(product_id)
        logger.info("product.deleted", product_id=product_id)
        return Removed(product_id)
