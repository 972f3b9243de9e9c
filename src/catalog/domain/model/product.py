"""Product aggregate.

A product is a free-form record: the caller decides which fields it
carries, the catalog only guarantees the primary key and (at write
time) that ``name`` and ``price`` are well-formed.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any

PRIMARY_KEY = "productID"


@dataclass(frozen=True)
class Product:
    """A product record keyed by ``productID``.

    ``fields`` holds whatever the caller sent. The server-side
    ``product_id`` always wins over a ``productID`` found in ``fields``.
    """

    product_id: str
    fields: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.product_id, str) or not self.product_id:
            raise ValueError(
                f"Product record needs a non-empty {PRIMARY_KEY}, got {self.product_id!r}"
            )

    @classmethod
    def create(cls, fields: dict[str, Any]) -> Product:
        """Build a brand new product with a server-generated ID."""
        return cls(product_id=str(uuid.uuid4()), fields=dict(fields))

    @classmethod
    def replace(cls, product_id: str, fields: dict[str, Any]) -> Product:
        """Build the full replacement of an existing product."""
        return cls(product_id=product_id, fields=dict(fields))

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> Product:
        return cls(product_id=record.get(PRIMARY_KEY), fields=dict(record))

    def to_record(self) -> dict[str, Any]:
        return {**self.fields, PRIMARY_KEY: self.product_id}
