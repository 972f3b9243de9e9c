"""JSON encoding for response bodies and file storage."""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Any


def _default(value: Any) -> Any:
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(value: Any, **kwargs: Any) -> str:
    """``json.dumps`` that understands the Decimals DynamoDB hands back."""
    return json.dumps(value, default=_default, **kwargs)
