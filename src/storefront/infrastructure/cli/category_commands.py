"""CLI commands for the Category aggregate."""

from __future__ import annotations

import click

from storefront.application.add_category import AddCategoryHandler
from storefront.application.delete_category import DeleteCategoryHandler
from storefront.application.rename_category import RenameCategoryHandler
from storefront.application.show_category import ShowCategoryHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import category_repository, product_repository


@click.command("add")
@click.option("--name", required=True, help="Category name.")
def category_add(name: str) -> None:
    """Add a new category."""
    handler = AddCategoryHandler(category_repo=category_repository())

    try:
        category = handler.handle(name=name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category #{category.id} '{category.name}' added")


@click.command("list")
def category_list() -> None:
    """List all categories."""
    categories = category_repository().list_all()

    if not categories:
        click.echo("No categories found.")
        return

    click.echo(f"{'ID':<26} {'Name':<20}")
    click.echo("-" * 47)
    for c in categories:
        click.echo(f"{c.id:<26} {c.name:<20}")


@click.command("rename")
@click.option("--id", "category_id", required=True, help="Category ID.")
@click.option("--name", required=True, help="New category name.")
def category_rename(category_id: str, name: str) -> None:
    """Rename a category."""
    handler = RenameCategoryHandler(category_repo=category_repository())

    try:
        category = handler.handle(category_id=category_id, name=name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category #{category.id} renamed to '{category.name}'")


@click.command("delete")
@click.option("--id", "category_id", required=True, help="Category ID.")
def category_delete(category_id: str) -> None:
    """Delete a category that no product references."""
    handler = DeleteCategoryHandler(
        category_repo=category_repository(),
        product_repo=product_repository(),
    )

    try:
        handler.handle(category_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category #{category_id} deleted.")


@click.command("show")
@click.option("--id", "category_id", required=True, help="Category ID.")
def category_show(category_id: str) -> None:
    """Show a single category."""
    handler = ShowCategoryHandler(category_repo=category_repository())

    try:
        category = handler.handle(category_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category #{category.id} '{category.name}'")
