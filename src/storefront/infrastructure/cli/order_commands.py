"""CLI commands for the Order aggregate."""

from __future__ import annotations

import json
from typing import IO

import click

from storefront.application.create_order import CreateOrderHandler
from storefront.application.delete_order import DeleteOrderHandler
from storefront.application.dto import OrderDTO, OrderRequest
from storefront.application.list_orders import ListOrdersHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.application.update_order import UpdateOrderHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import (
    order_repository,
    product_repository,
    user_repository,
)


def _parse_items(raw: str) -> list[dict]:
    """Parse 'productId:3,productId:5' into request item payloads."""
    specs: list[dict] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        specs.append({"productId": product_id.strip(), "quantity": qty})
    return specs


def _build_request(
    user_id: str | None,
    items: str | None,
    payload: IO[str] | None,
    status: str | None,
    note: str | None,
) -> OrderRequest:
    """Assemble a request from either --json or --user/--items."""
    if payload is not None:
        if user_id or items:
            raise click.UsageError("--json cannot be combined with --user/--items")
        try:
            body = json.load(payload)
        except json.JSONDecodeError as exc:
            raise click.BadParameter(f"Invalid JSON payload: {exc}")
        if isinstance(body, dict):
            # command-line flags win over the file
            if status is not None:
                body["status"] = status
            if note is not None:
                body["note"] = note
        return OrderRequest.from_payload(body)

    if not user_id or not items:
        raise click.UsageError("Either --json or both --user and --items are required")
    body = {"userId": user_id, "items": _parse_items(items)}
    if status is not None:
        body["status"] = status
    if note is not None:
        body["note"] = note
    return OrderRequest.from_payload(body)


_order_input_options = [
    click.option("--user", "user_id", default=None, help="User ID placing the order."),
    click.option("--items", default=None, help="Items as 'ProductId:Qty,ProductId:Qty'."),
    click.option(
        "--json", "payload", type=click.File("r"), default=None,
        help="Read the request body (userId, items, status, note) from a JSON file.",
    ),
    click.option("--status", default=None, help="pending, paid, shipped or cancelled."),
    click.option("--note", default=None, help="Free-text note (max 500 chars)."),
]


def _with_order_input(func):
    for option in reversed(_order_input_options):
        func = option(func)
    return func


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"User:     {dto.user_id}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo(f"Updated:  {dto.updated_at}")
    if dto.note:
        click.echo(f"Note:     {dto.note}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.title:<20} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total':<27} {dto.total:>20}")


@click.command("create")
@_with_order_input
def order_create(
    user_id: str | None,
    items: str | None,
    payload: IO[str] | None,
    status: str | None,
    note: str | None,
) -> None:
    """Create a new order from product references."""
    handler = CreateOrderHandler(
        order_repo=order_repository(),
        user_repo=user_repository(),
        product_repo=product_repository(),
    )

    try:
        request = _build_request(user_id, items, payload, status, note)
        dto = handler.handle(
            user_id=request.user_id,
            item_specs=request.items,
            status=request.status,
            note=request.note,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Order created.")
    _display_order(dto)


@click.command("update")
@click.option("--id", "order_id", required=True, help="Order ID to update.")
@_with_order_input
def order_update(
    order_id: str,
    user_id: str | None,
    items: str | None,
    payload: IO[str] | None,
    status: str | None,
    note: str | None,
) -> None:
    """Replace an order's user and items (re-snapshots current prices)."""
    handler = UpdateOrderHandler(
        order_repo=order_repository(),
        user_repo=user_repository(),
        product_repo=product_repository(),
    )

    try:
        request = _build_request(user_id, items, payload, status, note)
        dto = handler.handle(
            order_id=order_id,
            user_id=request.user_id,
            item_specs=request.items,
            status=request.status,
            note=request.note,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Order updated.")
    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
def order_show(order_id: str) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("list")
def order_list() -> None:
    """List all orders, newest first."""
    dtos = ListOrdersHandler(order_repo=order_repository()).handle()

    if not dtos:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<26} {'User':<26} {'Status':<10} {'Total':>12}")
    click.echo("-" * 77)
    for dto in dtos:
        click.echo(f"{dto.id:<26} {dto.user_id:<26} {dto.status:<10} {dto.total:>12}")


@click.command("delete")
@click.option("--id", "order_id", required=True, help="Order ID to delete.")
def order_delete(order_id: str) -> None:
    """Delete an order."""
    handler = DeleteOrderHandler(order_repo=order_repository())

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} deleted.")
