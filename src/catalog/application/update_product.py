"""Application service: Update Product use case.

An update is a full replacement: fields of the old record that are
missing from the new body are dropped.
"""

from __future__ import annotations

import structlog

from catalog.application.request_body import parse_body
from catalog.domain.model.product import Product
from catalog.domain.outcomes import Invalid, Malformed, NotFound, Outcome, Stored
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.schema import PRODUCT_SCHEMA

logger = structlog.get_logger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str | None, raw_body: str | None) -> Outcome:
        """Replace the product stored under ``product_id``.

        Existence is checked before the body is even parsed. Validation
        stops at the first field error.
        """
        # TODO: decide with API consumers whether update should report all
        # field errors like create does; kept first-error-only for now.
        if not product_id or self._product_repo.get_by_id(product_id) is None:
            return NotFound()

        body = parse_body(raw_body)
        if isinstance(body, Malformed):
            logger.warning("product.update.malformed_body", product_id=product_id)
            return body

        errors = PRODUCT_SCHEMA.validate(body, abort_early=True)
        if errors:
            logger.warning("product.update.invalid", product_id=product_id, errors=errors)
            return Invalid(errors)

        product = Product.replace(product_id, body)
        self._product_repo.save(product)
        logger.info("product.updated", product_id=product_id)
        return Stored(product)
