"""Parsing of raw request bodies into JSON values."""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Any

from catalog.domain.outcomes import Malformed


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def parse_body(raw: str | None) -> Any | Malformed:
    """Parse ``raw`` as JSON, keeping non-integral numbers as Decimal.

    DynamoDB refuses binary floats, so prices must stay Decimal from the
    moment they enter the system. A missing body is treated as empty text.
    """
    try:
        return json.loads(
            raw or "",
            parse_float=Decimal,
            parse_constant=_reject_constant,
        )
    except ValueError as exc:
        return Malformed(f'invalid request body format : "{exc}"')
