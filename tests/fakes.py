"""In-memory fakes for testing.

``FakeProductRepository`` implements the same abstract interface as the
real repositories but keeps everything in a dict. ``FakeDynamoTable``
mimics the slice of the boto3 Table resource the DynamoDB repository
uses. No network, no file I/O.
"""

from __future__ import annotations

import copy
from typing import Any

from catalog.domain.model.product import PRIMARY_KEY, Product
from catalog.domain.repository.product_repository import ProductRepository


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.product_id] = p

    def get_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        self._store[product.product_id] = product

    def delete(self, product_id: str) -> None:
        self._store.pop(product_id, None)


class BrokenProductRepository(FakeProductRepository):
    """Every storage call fails, like an unreachable table."""

    def get_by_id(self, product_id: str) -> Product | None:
        raise ConnectionError("table unreachable")

    def list_all(self) -> list[Product]:
        raise ConnectionError("table unreachable")

    def save(self, product: Product) -> None:
        raise ConnectionError("table unreachable")


class FakeDynamoTable:

    def __init__(self, items: list[dict[str, Any]] | None = None) -> None:
        self.items: dict[str, dict[str, Any]] = {}
        self.calls: list[tuple[str, Any]] = []
        for item in items or []:
            self.items[item[PRIMARY_KEY]] = item

    def get_item(self, Key: dict[str, Any]) -> dict[str, Any]:
        self.calls.append(("get_item", Key))
        item = self.items.get(Key[PRIMARY_KEY])
        return {} if item is None else {"Item": copy.deepcopy(item)}

    def put_item(self, Item: dict[str, Any]) -> dict[str, Any]:
        self.calls.append(("put_item", Item))
        self.items[Item[PRIMARY_KEY]] = copy.deepcopy(Item)
        return {}

    def delete_item(self, Key: dict[str, Any]) -> dict[str, Any]:
        self.calls.append(("delete_item", Key))
        self.items.pop(Key[PRIMARY_KEY], None)
        return {}

    def scan(self) -> dict[str, Any]:
        self.calls.append(("scan", None))
        items = [copy.deepcopy(i) for i in self.items.values()]
        return {"Items": items, "Count": len(items)}
