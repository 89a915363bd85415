"""Report and balance commands."""

import click
from tallybook.cli.output import echo_totals, format_amount
from tallybook.cli.owner_resolution import get_ledger_or_exit
from tallybook.domain.report import MAX_WEEK, PERIOD_KINDS, Day, Month, Week, Year
from tallybook.utils.date_parser import parse_date


@click.group("report")
def report_group():
    """Income, expenses and net per period."""
    pass


@report_group.command("year")
@click.argument("year", type=int)
@click.pass_context
def year_report(ctx, year: int):
    """Totals for a calendar year."""
    ledger = get_ledger_or_exit(ctx)
    echo_totals(f"Year {year}", ledger.report(Year(year)))


@report_group.command("month")
@click.argument("year", type=int)
@click.argument("month", type=click.IntRange(1, 12))
@click.pass_context
def month_report(ctx, year: int, month: int):
    """Totals for a month (1-12) of a year."""
    ledger = get_ledger_or_exit(ctx)
    echo_totals(f"Month {year}-{month:02d}", ledger.report(Month(year, month)))


@report_group.command("week")
@click.argument("year", type=int)
@click.argument("week", type=click.IntRange(1, MAX_WEEK))
@click.pass_context
def week_report(ctx, year: int, week: int):
    """Totals for a week of a year.

    Weeks are 7-day blocks counted from January 1 (week 1 is January 1-7),
    not ISO weeks.
    """
    ledger = get_ledger_or_exit(ctx)
    period = Week(year, week)
    start, end = period.bounds()
    echo_totals(f"Week {week} of {year} ({start} to {end})", ledger.report(period))


@report_group.command("day")
@click.argument("day")
@click.pass_context
def day_report(ctx, day: str):
    """Totals for a single day (YYYY-MM-DD, 'today', 'yesterday')."""
    ledger = get_ledger_or_exit(ctx)
    try:
        parsed = parse_date(day)
    except ValueError as e:
        click.echo(f"Error: Invalid date: {e}", err=True)
        ctx.exit(1)
    echo_totals(f"Day {parsed}", ledger.report(Day(parsed)))


@report_group.command("breakdown")
@click.option(
    "--by",
    "kind",
    type=click.Choice(PERIOD_KINDS),
    default="month",
    show_default=True,
    help="Period to group by",
)
@click.pass_context
def breakdown_report(ctx, kind: str):
    """Totals for every period that has transactions."""
    ledger = get_ledger_or_exit(ctx)
    grouped = ledger.breakdown(kind)
    if not grouped:
        click.echo("No transactions found.")
        return

    click.echo(f"\n{'Period':<12} {'Income':>12} {'Expenses':>12} {'Net':>12}")
    click.echo("-" * 51)
    for key, totals in grouped.items():
        click.echo(
            f"{key:<12} {format_amount(totals.income):>12} "
            f"{format_amount(totals.expenses):>12} {format_amount(totals.net):>12}"
        )


@click.command("balance")
@click.pass_context
def show_balance(ctx):
    """Show the balance over all transactions."""
    ledger = get_ledger_or_exit(ctx)
    click.echo(f"Balance: {format_amount(ledger.balance())} ({ledger.count()} transactions)")


def register_commands(cli):
    """Register report commands with main CLI."""
    cli.add_command(report_group)
    cli.add_command(show_balance)
