"""Transaction removal command."""

import click
from tallybook.cli.owner_resolution import get_ledger_or_exit


@click.command("delete")
@click.argument("identity", type=int)
@click.pass_context
def delete_transaction(ctx, identity: int):
    """Delete a transaction.

    IDENTITY is the first column of `tallybook list`. With the file backend
    it is a position, so every later transaction moves up by one after a
    delete; list again before deleting another one.
    """
    ledger = get_ledger_or_exit(ctx)

    if ledger.remove_record(identity):
        click.echo(f"Deleted transaction {identity}")
    else:
        click.echo(f"Error: Transaction {identity} not found", err=True)
        ctx.exit(1)


def register_commands(cli: click.Group) -> None:
    """Register transaction commands with main CLI."""
    cli.add_command(delete_transaction)
