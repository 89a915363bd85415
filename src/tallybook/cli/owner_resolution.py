"""CLI helpers for resolving the current owner and building the ledger."""

from __future__ import annotations

import click
from tallybook.domain.ledger import LedgerService
from tallybook.domain.owner import OwnerService
from tallybook.domain.session import OwnerSession
from tallybook.cli.error_handling import handle_domain_error
from tallybook.domain.errors import DomainError


def get_ledger_or_exit(ctx: click.Context) -> LedgerService:
    """Build a LedgerService for the selected backend and owner.

    The file backend has no owners. The sqlite backend requires --owner;
    without it the command exits instead of showing an empty ledger.
    """
    repository = ctx.obj["repository"]
    if not repository.requires_owner:
        return LedgerService(repository)

    owner_name = ctx.obj.get("owner_name")
    if not owner_name:
        click.echo("Error: --owner (or TALLYBOOK_OWNER) is required with the sqlite backend", err=True)
        ctx.exit(1)

    try:
        owner = OwnerService(repository).require_owner(owner_name)
    except DomainError as e:
        handle_domain_error(ctx, e)
    return LedgerService(repository, OwnerSession(owner))


def identity_label(ledger: LedgerService) -> str:
    """Column label for record identities on the selected backend."""
    return "ID" if ledger.repository.requires_owner else "#"
