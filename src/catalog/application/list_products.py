"""Application service: List Products use case (query).

Full table scan, no filtering and no pagination. Storage failures are
not translated.
"""

from __future__ import annotations

from catalog.domain.outcomes import Listed
from catalog.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> Listed:
        return Listed(self._product_repo.list_all())
