"""Translation of handler outcomes into gateway responses.

Only outcomes the handlers know how to produce are mapped. Exceptions
never reach this module: they propagate to the Lambda runtime.
"""

from __future__ import annotations

from typing import Any

from catalog.domain.outcomes import (
    Found,
    Invalid,
    Listed,
    Malformed,
    NotFound,
    Outcome,
    Removed,
    Stored,
)
from catalog.infrastructure.encoding import to_json

HEADERS = {"content-type": "application/json"}

Response = dict[str, Any]


def json_response(status_code: int, payload: Any) -> Response:
    return {
        "statusCode": status_code,
        "headers": dict(HEADERS),
        "body": to_json(payload),
    }


def no_content() -> Response:
    return {"statusCode": 204, "body": ""}


def to_response(outcome: Outcome) -> Response:
    """Map an outcome to a response; an unknown outcome type is a bug."""
    if isinstance(outcome, (Stored, Found)):
        return json_response(200, outcome.product.to_record())
    if isinstance(outcome, Listed):
        return json_response(200, [p.to_record() for p in outcome.products])
    if isinstance(outcome, Removed):
        return no_content()
    if isinstance(outcome, Invalid):
        return json_response(400, {"errors": list(outcome.errors)})
    if isinstance(outcome, NotFound):
        return json_response(404, {"error": "not found"})
    if isinstance(outcome, Malformed):
        return json_response(400, {"error": outcome.message})
    raise TypeError(f"No response mapping for outcome {outcome!r}")
