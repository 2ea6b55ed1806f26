"""``product-catalog products``: list, add and show catalog entries.

Each command opens one unit of work, builds a `ProductService` over its
repository and prints the result. Listings and records go to **stdout**
(plain text or ``--json``); notices go to **stderr**.
"""

from __future__ import annotations

import dataclasses
import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from sqlalchemy.exc import DBAPIError

from product_catalog.bootstrap import bootstrap, build_product_service
from product_catalog.domain.product import Product
from product_catalog.interfaces.product_repository import (
    InvalidProductError,
    RepositoryUnavailableError,
)

from .helpers import database_url_errors, error, success

if TYPE_CHECKING:
    from product_catalog.interfaces.unit_of_work import AbstractUnitOfWork
    from product_catalog.service_layer.product_service import ProductService

logger = logging.getLogger(__name__)

STORE_UNAVAILABLE_MSG = (
    "The product store is not available.\n"
    "Ensure the database is reachable and run 'product-catalog db upgrade'."
)

json_option = click.option(
    "--json", "as_json", is_flag=True, help="Print machine-readable JSON."
)


@contextmanager
def _service() -> Iterator[tuple[ProductService, AbstractUnitOfWork]]:
    """Yield a product service bound to a fresh unit of work.

    Configuration and storage failures are turned into `ClickException`s. The
    engine is disposed when the block ends, however it ends.
    """
    with database_url_errors():
        container = bootstrap()

    try:
        with container.uow as uow:
            yield build_product_service(uow), uow
    except (DBAPIError, RepositoryUnavailableError) as e:
        logger.debug("Product store failure", exc_info=True)
        raise click.ClickException(STORE_UNAVAILABLE_MSG) from e
    finally:
        container.dispose()


def _echo_product(product: Product, as_json: bool) -> None:
    if as_json:
        click.echo(json.dumps(dataclasses.asdict(product)))
    else:
        click.echo(
            f"#{product.id}  {product.name}  {product.price}  {product.description}"
        )


@click.group(cls=clickx.ExtraGroup)
def products() -> None:
    """Product catalog commands."""


@products.command(name="list")
@json_option
def list_products(as_json: bool) -> None:
    """List all products."""
    with _service() as (service, _):
        items = service.get_all_products()

    if as_json:
        click.echo(json.dumps([dataclasses.asdict(p) for p in items]))
        return
    for product in items:
        _echo_product(product, as_json=False)


@products.command()
@click.option("--name", required=True, help="Product name.")
@click.option("--description", default="", show_default=True, help="Description.")
@click.option("--price", type=float, required=True, help="Unit price.")
@click.option(
    "--id",
    "product_id",
    type=int,
    default=None,
    help="Explicit product id (replaces an existing product with that id).",
)
@json_option
def add(
    name: str, description: str, price: float, product_id: int | None, as_json: bool
) -> None:
    """Add a product to the catalog."""
    product = Product(id=product_id, name=name, description=description, price=price)
    with _service() as (service, uow):
        try:
            saved = service.add_product(product)
        except InvalidProductError as e:
            raise click.ClickException(str(e)) from e
        uow.commit()

    _echo_product(saved, as_json)
    success(f"Added product #{saved.id}")


@products.command()
@click.argument("product_id", type=int)
@json_option
def show(product_id: int, as_json: bool) -> None:
    """Show the product with PRODUCT_ID."""
    with _service() as (service, _):
        product = service.get_product(product_id)

    if product is None:
        error(f"Product #{product_id} not found")
        raise click.exceptions.Exit(1)
    _echo_product(product, as_json)
