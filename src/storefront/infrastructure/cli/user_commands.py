"""CLI commands for the User aggregate."""

from __future__ import annotations

import click

from storefront.application.add_user import AddUserHandler
from storefront.application.delete_user import DeleteUserHandler
from storefront.application.show_user import ShowUserHandler
from storefront.application.update_user import UpdateUserHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import user_repository


@click.command("add")
@click.option("--first-name", required=True, help="First name.")
@click.option("--last-name", required=True, help="Last name.")
@click.option("--email", required=True, help="Email address (unique).")
def user_add(first_name: str, last_name: str, email: str) -> None:
    """Register a new user."""
    handler = AddUserHandler(user_repo=user_repository())

    try:
        user = handler.handle(first_name=first_name, last_name=last_name, email=email)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"User #{user.id} '{user.full_name}' added")


@click.command("list")
def user_list() -> None:
    """List all users."""
    users = user_repository().list_all()

    if not users:
        click.echo("No users found.")
        return

    click.echo(f"{'ID':<26} {'Name':<25} {'Email'}")
    click.echo("-" * 75)
    for u in users:
        click.echo(f"{u.id:<26} {u.full_name:<25} {u.email}")


@click.command("show")
@click.option("--id", "user_id", required=True, help="User ID.")
def user_show(user_id: str) -> None:
    """Show a single user."""
    handler = ShowUserHandler(user_repo=user_repository())

    try:
        u = handler.handle(user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"User #{u.id}")
    click.echo(f"  Name:   {u.full_name}")
    click.echo(f"  Email:  {u.email}")
    click.echo(f"  Active: {'yes' if u.is_active else 'no'}")


@click.command("update")
@click.option("--id", "user_id", required=True, help="User ID.")
@click.option("--first-name", default=None, help="New first name.")
@click.option("--last-name", default=None, help="New last name.")
@click.option("--email", default=None, help="New email address (unique).")
@click.option("--active/--inactive", default=None, help="Toggle the active flag.")
def user_update(
    user_id: str,
    first_name: str | None,
    last_name: str | None,
    email: str | None,
    active: bool | None,
) -> None:
    """Update a user."""
    handler = UpdateUserHandler(user_repo=user_repository())

    try:
        u = handler.handle(
            user_id=user_id,
            first_name=first_name,
            last_name=last_name,
            email=email,
            active=active,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"User #{u.id} updated: '{u.full_name}' <{u.email}>")


@click.command("delete")
@click.option("--id", "user_id", required=True, help="User ID.")
def user_delete(user_id: str) -> None:
    """Delete a user. Existing orders keep their user reference."""
    handler = DeleteUserHandler(user_repo=user_repository())

    try:
        handler.handle(user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"User #{user_id} deleted.")
