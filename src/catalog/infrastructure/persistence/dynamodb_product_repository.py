"""DynamoDB-backed implementation of ProductRepository.

Each call is one blocking round-trip; retries and timeouts are left to
the boto3 client configuration.
"""

from __future__ import annotations

from typing import Any

from catalog.domain.model.product import PRIMARY_KEY, Product
from catalog.domain.repository.product_repository import ProductRepository


class DynamoDbProductRepository(ProductRepository):
    """Products stored in a DynamoDB table keyed by ``productID``.

    ``table`` is a ``boto3.resource("dynamodb").Table(...)`` (or anything
    with the same ``get_item``/``put_item``/``delete_item``/``scan``
    methods).
    """

    def __init__(self, table: Any) -> None:
        self._table = table

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        output = self._table.get_item(Key={PRIMARY_KEY: product_id})
        item = output.get("Item")
        if item is None:
            return None
        return Product.from_record(item)

    def list_all(self) -> list[Product]:
        # Single scan page only; tables past 1 MB would need LastEvaluatedKey.
        output = self._table.scan()
        return [Product.from_record(item) for item in output.get("Items", [])]

    def save(self, product: Product) -> None:
        self._table.put_item(Item=product.to_record())

    def delete(self, product_id: str) -> None:
        self._table.delete_item(Key={PRIMARY_KEY: product_id})
