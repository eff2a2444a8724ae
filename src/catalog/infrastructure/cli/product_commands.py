"""CLI commands for the Product entity."""

from __future__ import annotations

import asyncio
from decimal import Decimal, InvalidOperation

import click

from catalog.domain.exceptions import DomainException
from catalog.domain.model.product import Product
from catalog.infrastructure.bootstrap import product_repository


def _parse_price(ctx: click.Context, param: click.Parameter, value: str | None) -> Decimal | None:
    if value is None:
        return None
    try:
        price = Decimal(value)
    except InvalidOperation:
        raise click.BadParameter(f"'{value}' is not a valid price")
    if not price.is_finite():
        raise click.BadParameter(f"'{value}' is not a valid price")
    return price


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--category", required=True, help="Product category.")
@click.option("--price", required=True, callback=_parse_price, help="Unit price (e.g. 2.50).")
@click.option("--stock", default=0, show_default=True, help="Units in stock.")
@click.option("--discontinued", is_flag=True, help="Mark the product as discontinued.")
def product_add(
    name: str, category: str, price: Decimal, stock: int, discontinued: bool
) -> None:
    """Add a new product to the catalog."""
    product = Product(
        name=name,
        category=category,
        unit_price=price,
        units_in_stock=stock,
        discontinued=discontinued,
    )

    try:
        product_id = asyncio.run(product_repository().add_product(product))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} '{product.name}' added")


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_show(product_id: int) -> None:
    """Show a single product."""
    try:
        product = asyncio.run(product_repository().get_product(product_id))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{'ID':<14} {product.id}")
    click.echo(f"{'Name':<14} {product.name}")
    click.echo(f"{'Category':<14} {product.category}")
    click.echo(f"{'Unit price':<14} {product.unit_price}")
    click.echo(f"{'In stock':<14} {product.units_in_stock}")
    click.echo(f"{'Discontinued':<14} {'yes' if product.discontinued else 'no'}")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--category", default=None, help="New category.")
@click.option("--price", default=None, callback=_parse_price, help="New unit price.")
@click.option("--stock", default=None, type=int, help="New units in stock.")
@click.option(
    "--discontinued/--available",
    default=None,
    help="Mark the product as discontinued or available again.",
)
def product_update(
    product_id: int,
    name: str | None,
    category: str | None,
    price: Decimal | None,
    stock: int | None,
    discontinued: bool | None,
) -> None:
    """Change fields of an existing product."""

    async def _update() -> None:
        repo = product_repository()
        product = await repo.get_product(product_id)
        if name is not None:
            product.name = name
        if category is not None:
            product.category = category
        if price is not None:
            product.unit_price = price
        if stock is not None:
            product.units_in_stock = stock
        if discontinued is not None:
            product.discontinued = discontinued
        await repo.update_product(product)

    try:
        asyncio.run(_update())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} updated")


@click.command("remove")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_remove(product_id: int) -> None:
    """Remove a product from the catalog."""
    try:
        asyncio.run(product_repository().remove_product(product_id))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} removed")
