"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import boto3

from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.config import Settings, get_settings
from catalog.infrastructure.log_config import configure_logging
from catalog.infrastructure.persistence.dynamodb_product_repository import (
    DynamoDbProductRepository,
)
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def configure(settings: Settings | None = None) -> None:
    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.log_json)


def dynamodb_table(settings: Settings):
    dynamodb = boto3.resource(
        "dynamodb",
        region_name=settings.aws_region,
        endpoint_url=settings.dynamodb_endpoint_url,
    )
    return dynamodb.Table(settings.products_table)


def product_repository(settings: Settings | None = None) -> ProductRepository:
    settings = settings or get_settings()
    if settings.storage_backend == "json":
        return JsonProductRepository(settings.data_dir / "products.json")
    return DynamoDbProductRepository(dynamodb_table(settings))
