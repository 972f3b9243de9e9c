"""Application service: Get Product use case (query)."""

from __future__ import annotations

from catalog.domain.outcomes import Found, NotFound, Outcome
from catalog.domain.repository.product_repository import ProductRepository


class GetProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str | None) -> Outcome:
        if not product_id:
            return NotFound()
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            return NotFound()
        return Found(product)
