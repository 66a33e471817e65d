"""Main CLI entry point."""

import logging

import click
from fintrack.database.factories import create_sqlite_database

# Import and register all commands at module level
from fintrack.cli.commands import (
    add,
    category,
    recurrence,
    report,
    transaction,
)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    """Configure root logging once for the CLI process."""
    logging.basicConfig(level=getattr(logging, level.upper()), format=LOG_FORMAT)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides FINTRACK_DB_PATH environment variable)",
    envvar="FINTRACK_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="FINTRACK_LOG_LEVEL",
    help="Logging verbosity",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str):
    """Fintrack - personal finance tracking.

    Record revenues and expenses by category, let repeating transactions
    generate their own occurrences, and report on where the money went.
    """
    ctx.ensure_object(dict)
    configure_logging(log_level)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.obj["db_path"] = db_path
        ctx.call_on_close(db.disconnect)


# Register all commands
category.register_commands(cli)
add.register_commands(cli)
transaction.register_commands(cli)
recurrence.register_commands(cli)
report.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
