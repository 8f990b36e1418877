"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from storefront.application.add_product import AddProductHandler
from storefront.application.delete_product import DeleteProductHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.show_product import ShowProductHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import category_repository, product_repository


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--category", "category_id", required=True, help="Category ID.")
@click.option("--description", default="", help="Product description.")
def product_add(name: str, price: str, category_id: str, description: str) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(
        product_repo=product_repository(),
        category_repo=category_repository(),
    )

    try:
        product = handler.handle(
            name=name, price=price, category_id=category_id, description=description
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("list")
@click.option("--category", "category_id", default=None, help="Only products in this category.")
def product_list(category_id: str | None) -> None:
    """List products in the catalog."""
    handler = ListProductsHandler(
        product_repo=product_repository(),
        category_repo=category_repository(),
    )

    try:
        products = handler.handle(category_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<26} {'Name':<20} {'Price':>10} {'Category':<26} Active")
    click.echo("-" * 92)
    for p in products:
        click.echo(
            f"{p.id:<26} {p.name:<20} {str(p.price):>10} {p.category_id:<26} "
            f"{'yes' if p.is_active else 'no'}"
        )


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--description", default=None, help="New description.")
@click.option("--active/--inactive", default=None, help="Toggle the active flag.")
def product_update(
    product_id: str,
    name: str | None,
    price: str | None,
    description: str | None,
    active: bool | None,
) -> None:
    """Update a product. Existing orders keep their snapshot."""
    handler = UpdateProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(
            product_id=product_id,
            name=name,
            price=price,
            description=description,
            active=active,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} updated: '{product.name}' at {product.price}")


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_show(product_id: str) -> None:
    """Show a single product."""
    handler = ShowProductHandler(product_repo=product_repository())

    try:
        p = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{p.id}")
    click.echo(f"  Name:     {p.name}")
    click.echo(f"  Price:    {p.price}")
    click.echo(f"  Category: {p.category_id}")
    click.echo(f"  Active:   {'yes' if p.is_active else 'no'}")
    if p.description:
        click.echo(f"  About:    {p.description}")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_delete(product_id: str) -> None:
    """Delete a product. Existing orders keep their snapshot."""
    handler = DeleteProductHandler(product_repo=product_repository())

    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted.")
