"""Tests for the DynamoDB repository against a fake Table resource."""

from decimal import Decimal

from catalog.domain.model.product import Product
from catalog.infrastructure.persistence.dynamodb_product_repository import (
    DynamoDbProductRepository,
)
from tests.fakes import FakeDynamoTable


class TestDynamoDbProductRepository:

    def test_get_missing_item(self):
        table = FakeDynamoTable()
        repo = DynamoDbProductRepository(table)

        assert repo.get_by_id("nope") is None
        assert table.calls == [("get_item", {"productID": "nope"})]

    def test_save_puts_full_record(self):
        table = FakeDynamoTable()
        repo = DynamoDbProductRepository(table)
        product = Product.replace("p-1", {"name": "Widget", "price": Decimal("9.99")})

        repo.save(product)

        assert table.items["p-1"] == {
            "name": "Widget",
            "price": Decimal("9.99"),
            "productID": "p-1",
        }
        assert repo.get_by_id("p-1") == product

    def test_save_overwrites(self):
        table = FakeDynamoTable([{"productID": "p-1", "name": "Old", "price": 1, "x": 1}])
        repo = DynamoDbProductRepository(table)

        repo.save(Product.replace("p-1", {"name": "New", "price": 2}))

        assert table.items["p-1"] == {"name": "New", "price": 2, "productID": "p-1"}

    def test_delete(self):
        table = FakeDynamoTable([{"productID": "p-1", "name": "Widget", "price": 1}])
        repo = DynamoDbProductRepository(table)

        repo.delete("p-1")

        assert table.items == {}
        assert table.calls[-1] == ("delete_item", {"productID": "p-1"})

    def test_list_all_uses_one_scan(self):
        table = FakeDynamoTable(
            [{"productID": str(i), "name": f"P{i}", "price": i} for i in range(3)]
        )
        products = DynamoDbProductRepository(table).list_all()

        assert sorted(p.product_id for p in products) == ["0", "1", "2"]
        assert table.calls == [("scan", None)]

    def test_list_all_empty_response(self):
        class EmptyScanTable(FakeDynamoTable):
            def scan(self):
                return {}

        assert DynamoDbProductRepository(EmptyScanTable()).list_all() == []
