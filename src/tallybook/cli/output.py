"""CLI output helpers."""

from decimal import Decimal

import click

from tallybook.domain.report import PeriodTotals


def format_amount(amount: Decimal) -> str:
    """Render an amount with two decimals."""
    return f"{amount:.2f}"


def echo_totals(title: str, totals: PeriodTotals) -> None:
    """Print income, expenses and net for a period."""
    click.echo(f"\n{title}")
    click.echo("-" * 40)
    click.echo(f"Income:   {format_amount(totals.income):>15}")
    click.echo(f"Expenses: {format_amount(totals.expenses):>15}")
    click.echo(f"Net:      {format_amount(totals.net):>15}")
