"""Add transaction command."""

import click
from tallybook.cli.error_handling import handle_domain_error
from tallybook.cli.output import format_amount
from tallybook.cli.owner_resolution import get_ledger_or_exit
from tallybook.domain.errors import DomainError
from tallybook.utils.date_parser import parse_date
from tallybook.utils.amount_parser import parse_amount


@click.command("add")
@click.option(
    "--date",
    "date_str",
    required=True,
    help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option(
    "--amount", required=True, help="Signed amount: positive for income, negative for expenses"
)
@click.option("--description", help="Transaction description (defaults to Income/Expense)")
@click.pass_context
def add_transaction(ctx, date_str: str, amount: str, description: str | None):
    """Add a transaction.

    Examples:
        tallybook add --date 2024-03-01 --amount 1000 --description Salary
        tallybook --backend sqlite --owner alice add --date today --amount -12.50
    """
    ledger = get_ledger_or_exit(ctx)

    try:
        txn_date = parse_date(date_str)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        txn_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        record = ledger.add_record(txn_date, txn_amount, description)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if record is None:
        click.echo("Error: Transaction was not saved", err=True)
        ctx.exit(1)

    click.echo("Added transaction" + (f" {record.id}" if record.id is not None else ""))
    click.echo(f"  Date: {record.date}")
    click.echo(f"  Amount: {format_amount(record.amount)}")
    click.echo(f"  Description: {record.description}")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
