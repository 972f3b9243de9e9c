"""Outcome values returned by the application handlers.

Expected results, successful or not, are plain values rather than
exceptions. Anything unexpected (a storage failure, a broken record)
is still raised and left to propagate.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from catalog.domain.model.product import Product


@dataclass(frozen=True)
class Stored:
    """A product was written (create or update)."""

    product: Product


@dataclass(frozen=True)
class Found:
    product: Product


@dataclass(frozen=True)
class Listed:
    products: list[Product] = field(default_factory=list)


@dataclass(frozen=True)
class Removed:
    product_id: str


@dataclass(frozen=True)
class Invalid:
    """The body failed schema validation."""

    errors: list[str]


@dataclass(frozen=True)
class NotFound:
    """No product is stored under the requested ID."""


@dataclass(frozen=True)
class Malformed:
    """The body could not be parsed as JSON."""

    message: str


Outcome = Union[Stored, Found, Listed, Removed, Invalid, NotFound, Malformed]
