import logging

import click

from storefront.infrastructure.cli.category_commands import (
    category_add,
    category_delete,
    category_list,
    category_rename,
    category_show,
)
from storefront.infrastructure.cli.order_commands import (
    order_create,
    order_delete,
    order_list,
    order_show,
    order_update,
)
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_show,
    product_update,
)
from storefront.infrastructure.cli.user_commands import (
    user_add,
    user_delete,
    user_list,
    user_show,
    user_update,
)


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Storefront — catalog and order management"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def category() -> None:
    """Manage categories."""


@cli.group()
def user() -> None:
    """Manage users."""


# Register subcommands
order.add_command(order_create)
order.add_command(order_delete)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_update)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
category.add_command(category_add)
category.add_command(category_delete)
category.add_command(category_list)
category.add_command(category_rename)
category.add_command(category_show)
user.add_command(user_add)
user.add_command(user_delete)
user.add_command(user_list)
user.add_command(user_show)
user.add_command(user_update)
