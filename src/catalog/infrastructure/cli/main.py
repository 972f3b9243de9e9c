import click

from catalog.infrastructure.bootstrap import configure
from catalog.infrastructure.cli.product_commands import (
    product_create,
    product_delete,
    product_get,
    product_list,
    product_update,
)


@click.group()
def cli() -> None:
    """Product catalog: local driver for the gateway handlers"""
    configure()


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
product.add_command(product_create)
product.add_command(product_get)
product.add_command(product_update)
product.add_command(product_delete)
product.add_command(product_list)
