"""Abstract repository for the Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (DynamoDB, JSON file,
in-memory) live in the infrastructure layer and in the tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the table, unfiltered and unpaginated."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a product, overwriting any record with the same ID."""

    @abstractmethod
    def delete(self, product_id: str) -> None:
        """Remove the product stored under ``product_id``."""
