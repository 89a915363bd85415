"""Main CLI entry point."""

import logging

import click
from tallybook.database.factories import BACKENDS, create_repository

# Import and register all commands at module level
from tallybook.cli.commands import add, owner, report, transaction, view


@click.group()
@click.option(
    "--backend",
    type=click.Choice(BACKENDS, case_sensitive=False),
    default="file",
    show_default=True,
    help="Storage backend (overrides TALLYBOOK_BACKEND environment variable)",
    envvar="TALLYBOOK_BACKEND",
)
@click.option(
    "--data-file",
    type=click.Path(dir_okay=False),
    help="Path to the data file for the file backend (overrides TALLYBOOK_DATA_FILE)",
    envvar="TALLYBOOK_DATA_FILE",
)
@click.option(
    "--db-path",
    type=click.Path(dir_okay=False),
    help="Path to the database file for the sqlite backend (overrides TALLYBOOK_DB_PATH)",
    envvar="TALLYBOOK_DB_PATH",
)
@click.option(
    "--owner",
    help="Owner name to act as with the sqlite backend (overrides TALLYBOOK_OWNER)",
    envvar="TALLYBOOK_OWNER",
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def cli(
    ctx,
    backend: str,
    data_file: str | None,
    db_path: str | None,
    owner: str | None,
    verbose: bool,
):
    """Tallybook - Income and expense ledger.

    Record dated income and expenses in a flat file or a SQLite database
    and report totals per year, month, week or day.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Open the repository only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        try:
            ctx.obj["repository"] = create_repository(
                backend=backend, data_file=data_file, database_path=db_path
            )
        except ValueError as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)
        ctx.obj["backend"] = backend.lower()
        ctx.obj["owner_name"] = owner


# Register all commands
add.register_commands(cli)
view.register_commands(cli)
transaction.register_commands(cli)
report.register_commands(cli)
owner.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
