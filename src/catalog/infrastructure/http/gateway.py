"""API Gateway adapter and Lambda entry points.

``ProductApi`` turns gateway proxy events into use-case calls and the
resulting outcomes into proxy responses. The module-level functions are
the Lambda handlers; they share one ``ProductApi`` per process, built on
first use from the configured repository.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Callable

import structlog

from catalog.application.create_product import CreateProductHandler
from catalog.application.delete_product import DeleteProductHandler
from catalog.application.get_product import GetProductHandler
from catalog.application.list_products import ListProductsHandler
from catalog.application.update_product import UpdateProductHandler
from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.http.error_mapper import Response, to_response

logger = structlog.get_logger(__name__)

Event = dict[str, Any]


def _path_id(event: Event) -> str | None:
    return (event.get("pathParameters") or {}).get("id")


class ProductApi:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._create = CreateProductHandler(product_repo)
        self._get = GetProductHandler(product_repo)
        self._update = UpdateProductHandler(product_repo)
        self._delete = DeleteProductHandler(product_repo)
        self._list = ListProductsHandler(product_repo)

    def create(self, event: Event) -> Response:
        return to_response(self._create.handle(event.get("body")))

    def get(self, event: Event) -> Response:
        return to_response(self._get.handle(_path_id(event)))

    def update(self, event: Event) -> Response:
        return to_response(self._update.handle(_path_id(event), event.get("body")))

    def delete(self, event: Event) -> Response:
        return to_response(self._delete.handle(_path_id(event)))

    def list(self, event: Event) -> Response:
        return to_response(self._list.handle())


@lru_cache
def default_api() -> ProductApi:
    # Imported here so that importing this module never touches AWS.
    from catalog.infrastructure.bootstrap import configure, product_repository

    configure()
    return ProductApi(product_repository())


def _invoke(
    operation: str,
    call: Callable[[ProductApi, Event], Response],
    event: Event,
    context: Any,
) -> Response:
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        operation=operation,
        request_id=getattr(context, "aws_request_id", None),
    )
    response = call(default_api(), event)
    logger.info("request.completed", status_code=response["statusCode"])
    return response


# --- Lambda entry points ------------------------------------------------------


def create_product(event: Event, context: Any = None) -> Response:
    return _invoke("create_product", ProductApi.create, event, context)


def get_product(event: Event, context: Any = None) -> Response:
    return _invoke("get_product", ProductApi.get, event, context)


def update_product(event: Event, context: Any = None) -> Response:
    return _invoke("update_product", ProductApi.update, event, context)


def delete_product(event: Event, context: Any = None) -> Response:
    return _invoke("delete_product", ProductApi.delete, event, context)


def list_products(event: Event, context: Any = None) -> Response:
    return _invoke("list_products", ProductApi.list, event, context)
