"""Owner management commands."""

import click
from tallybook.cli.error_handling import handle_domain_error
from tallybook.domain.errors import DomainError
from tallybook.domain.owner import OwnerService


def _owner_service_or_exit(ctx) -> OwnerService:
    repository = ctx.obj["repository"]
    if not repository.requires_owner:
        click.echo("Error: Owners are only supported by the sqlite backend", err=True)
        ctx.exit(1)
    return OwnerService(repository)


@click.group("owner")
def owner_group():
    """Manage owners (sqlite backend)."""
    pass


@owner_group.command("create")
@click.argument("name", metavar="OWNER_NAME")
@click.option(
    "--password-hash",
    help="Password hash produced by your authentication layer (stored as is)",
)
@click.pass_context
def create_owner(ctx, name: str, password_hash: str | None):
    """Create a new owner.

    Examples:
        tallybook --backend sqlite owner create alice
    """
    service = _owner_service_or_exit(ctx)
    try:
        owner = service.register(name, password_hash)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created owner '{owner.name}' (ID: {owner.id})")


@owner_group.command("show")
@click.argument("name", metavar="OWNER_NAME")
@click.pass_context
def show_owner(ctx, name: str):
    """Show an owner."""
    service = _owner_service_or_exit(ctx)
    try:
        owner = service.require_owner(name)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"ID: {owner.id} | {owner.name} | Created: {owner.created_at:%Y-%m-%d %H:%M}")


def register_commands(cli):
    """Register owner commands with main CLI."""
    cli.add_command(owner_group)
