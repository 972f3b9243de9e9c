"""Declarative validation schema for product write requests.

Only ``name`` and ``price`` are checked. Unknown fields are allowed and
stored as-is.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable

BODY_NOT_OBJECT = "body must be a JSON object"


def _is_string(value: Any) -> bool:
    return isinstance(value, str)


def _is_number(value: Any) -> bool:
    # bool is an int subclass; JSON true/false is not a price
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, Decimal):
        # finite but beyond double range would encode as Infinity
        return value.is_finite() and math.isfinite(float(value))
    return isinstance(value, float) and math.isfinite(value)


@dataclass(frozen=True)
class FieldRule:
    """A required field of a given JSON type."""

    name: str
    type_name: str
    check: Callable[[Any], bool]

    def error_for(self, body: dict[str, Any]) -> str | None:
        value = body.get(self.name)
        if value is None or value == "":
            return f"{self.name} is a required field"
        if not self.check(value):
            return f"{self.name} must be a `{self.type_name}` type"
        return None


class Schema:

    def __init__(self, rules: list[FieldRule]) -> None:
        self._rules = list(rules)

    def validate(self, body: Any, abort_early: bool = True) -> list[str]:
        """Return the field errors for ``body``; an empty list means valid.

        With ``abort_early`` the first failing rule stops the check,
        otherwise every rule is evaluated and all messages are returned.
        """
        if not isinstance(body, dict):
            return [BODY_NOT_OBJECT]

        errors: list[str] = []
        for rule in self._rules:
            error = rule.error_for(body)
            if error is None:
                continue
            errors.append(error)
            if abort_early:
                break
        return errors


PRODUCT_SCHEMA = Schema(
    [
        FieldRule("name", "string", _is_string),
        FieldRule("price", "number", _is_number),
    ]
)
