"""Application service: Create Product use case."""

from __future__ import annotations

import structlog

from catalog.application.request_body import parse_body
from catalog.domain.model.product import Product
from catalog.domain.outcomes import Invalid, Malformed, Outcome, Stored
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.schema import PRODUCT_SCHEMA

logger = structlog.get_logger(__name__)


class CreateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, raw_body: str | None) -> Outcome:
        """Add a new product to the catalog.

        Every field error is reported, not only the first one. The new
        record is written unconditionally: a UUID4 collision is not
        checked for.
        """
        body = parse_body(raw_body)
        if isinstance(body, Malformed):
            logger.warning("product.create.malformed_body")
            return body

        errors = PRODUCT_SCHEMA.validate(body, abort_early=False)
        if errors:
            logger.warning("product.create.invalid", errors=errors)
            return Invalid(errors)

        product = Product.create(body)
        self._product_repo.save(product)
        logger.info("product.created", product_id=product.product_id)
        return Stored(product)
