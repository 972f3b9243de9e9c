"""JSON-file-backed implementation of ProductRepository.

Used for local development and the CLI when no DynamoDB table is at
hand. Records are kept verbatim; decimals are stored as JSON numbers
and read back as Decimal.
"""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path
from typing import Any

from catalog.domain.model.product import PRIMARY_KEY, Product
from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.encoding import to_json


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        record = self._load().get(product_id)
        if record is None:
            return None
        return Product.from_record(record)

    def list_all(self) -> list[Product]:
        return [Product.from_record(record) for record in self._load().values()]

    def save(self, product: Product) -> None:
        records = self._load()
        records[product.product_id] = product.to_record()
        self._persist(records)

    def delete(self, product_id: str) -> None:
        records = self._load()
        records.pop(product_id, None)
        self._persist(records)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, dict[str, Any]]:
        raw = json.loads(
            self._file_path.read_text(encoding="utf-8"), parse_float=Decimal
        )
        return {item[PRIMARY_KEY]: item for item in raw}

    def _persist(self, records: dict[str, dict[str, Any]]) -> None:
        self._file_path.write_text(
            to_json(list(records.values()), indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
