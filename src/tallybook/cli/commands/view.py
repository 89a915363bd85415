"""Transaction listing command."""

import click
from tallybook.cli.date_filters import resolve_cli_date_range
from tallybook.cli.output import format_amount
from tallybook.cli.owner_resolution import get_ledger_or_exit, identity_label
from tallybook.domain.report import totals


@click.command("list")
@click.option("--start-date", help="Start date (YYYY-MM-DD)")
@click.option("--end-date", help="End date (YYYY-MM-DD)")
@click.option("--this-month", is_flag=True, help="Filter to current month")
@click.option("--this-year", is_flag=True, help="Filter to current year")
@click.option("--this-week", is_flag=True, help="Filter to current week (Monday to today)")
@click.option("--last-month", is_flag=True, help="Filter to last month")
@click.option("--last-year", is_flag=True, help="Filter to last year")
@click.option("--last-week", is_flag=True, help="Filter to last week (Monday to Sunday)")
@click.pass_context
def list_transactions(
    ctx,
    start_date: str | None,
    end_date: str | None,
    this_month: bool,
    this_year: bool,
    this_week: bool,
    last_month: bool,
    last_year: bool,
    last_week: bool,
):
    """List transactions in storage order.

    The first column is what `tallybook delete` expects: the position in
    the file for the file backend, the transaction ID for the sqlite backend.
    """
    ledger = get_ledger_or_exit(ctx)
    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags={
            "this-month": this_month,
            "this-year": this_year,
            "this-week": this_week,
            "last-month": last_month,
            "last-year": last_year,
            "last-week": last_week,
        },
    )

    by_id = ledger.repository.requires_owner
    rows = []
    for index, record in enumerate(ledger.list_records()):
        if start is not None and record.date < start:
            continue
        if end is not None and record.date > end:
            continue
        rows.append((record.id if by_id else index, record))

    if not rows:
        click.echo("No transactions found.")
        return

    click.echo(f"\nFound {len(rows)} transaction(s):")
    click.echo("-" * 70)
    click.echo(f"{identity_label(ledger):<6} {'Date':<12} {'Amount':>12}  {'Description'}")
    click.echo("-" * 70)
    for identity, record in rows:
        click.echo(
            f"{identity:<6} {str(record.date):<12} {format_amount(record.amount):>12}  {record.description}"
        )

    summary = totals(record for _, record in rows)
    click.echo("-" * 70)
    click.echo(
        f"Income: {format_amount(summary.income)}  "
        f"Expenses: {format_amount(summary.expenses)}  "
        f"Net: {format_amount(summary.net)}"
    )


def register_commands(cli):
    """Register list command with main CLI."""
    cli.add_command(list_transactions)
