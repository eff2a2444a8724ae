import logging

import click

from catalog.infrastructure.cli.product_commands import (
    product_add,
    product_remove,
    product_show,
    product_update,
)
from catalog.infrastructure.config import get_settings


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log store calls at DEBUG level.")
def cli(verbose: bool) -> None:
    """Catalog — product repository"""
    level = logging.DEBUG if verbose else get_settings().log_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_remove)
product.add_command(product_show)
product.add_command(product_update)
