"""CLI commands for the Product aggregate.

Each command builds the same proxy event API Gateway would send and
runs it through ``ProductApi`` against the configured storage.
"""

from __future__ import annotations

from typing import Any, Callable

import click
from botocore.exceptions import BotoCoreError, ClientError

from catalog.infrastructure.bootstrap import product_repository
from catalog.infrastructure.http.error_mapper import Response
from catalog.infrastructure.http.gateway import ProductApi


def _run(call: Callable[[ProductApi, dict[str, Any]], Response], event: dict[str, Any]) -> None:
    api = ProductApi(product_repo=product_repository())

    try:
        response = call(api, event)
    except (BotoCoreError, ClientError, OSError, ValueError) as exc:
        raise click.ClickException(f"{type(exc).__name__}: {exc}")

    click.echo(f"HTTP {response['statusCode']}")
    if response["body"]:
        click.echo(response["body"])
    if response["statusCode"] >= 400:
        click.get_current_context().exit(1)


def _event(product_id: str | None = None, body: str | None = None) -> dict[str, Any]:
    return {
        "body": body,
        "pathParameters": {"id": product_id} if product_id is not None else None,
    }


@click.command("create")
@click.option("--body", required=True, help="Product as JSON, e.g. '{\"name\": \"Widget\", \"price\": 9.99}'.")
def product_create(body: str) -> None:
    """Create a product."""
    _run(ProductApi.create, _event(body=body))


@click.command("get")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_get(product_id: str) -> None:
    """Show a single product."""
    _run(ProductApi.get, _event(product_id=product_id))


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--body", required=True, help="Full replacement record as JSON.")
def product_update(product_id: str, body: str) -> None:
    """Replace a product."""
    _run(ProductApi.update, _event(product_id=product_id, body=body))


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_delete(product_id: str) -> None:
    """Delete a product."""
    _run(ProductApi.delete, _event(product_id=product_id))


@click.command("list")
def product_list() -> None:
    """List every product in the table."""
    _run(ProductApi.list, _event())
