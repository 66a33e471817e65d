"""Recurrence commands."""

import click
from fintrack.cli.commands.transaction import print_transaction_table
from fintrack.cli.error_handling import handle_domain_error
from fintrack.domain.category import CategoryService
from fintrack.domain.errors import DomainError
from fintrack.domain.recurrence import RecurrenceService
from fintrack.utils.date_parser import parse_date


@click.group()
def recurrence_group():
    """Process and manage repeating transactions."""
    pass


@recurrence_group.command("process")
@click.option("--date", "run_date", help="Reference date for this run (defaults to today)")
@click.pass_context
def process_recurrences(ctx, run_date: str | None):
    """Generate the next occurrence of every active repeating transaction.

    Meant to be run once a day, e.g. from cron. Each run adds at most one
    occurrence per repeating transaction.
    """
    db = ctx.obj["db"]
    service = RecurrenceService(db)

    today = None
    if run_date is not None:
        try:
            today = parse_date(run_date)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    result = service.process_all_active_recurrences(today=today)
    click.echo(
        f"Processed {result.processed} recurrence(s): {result.generated} generated, "
        f"{result.skipped} skipped, {result.failed} failed"
    )


@recurrence_group.command("activate")
@click.argument("transaction_id", type=int)
@click.pass_context
def activate(ctx, transaction_id: int):
    """Resume generating occurrences for a transaction."""
    service = RecurrenceService(ctx.obj["db"])
    try:
        service.activate_recurrence(transaction_id)
        click.echo(f"Recurrence activated for transaction {transaction_id}")
    except DomainError as e:
        handle_domain_error(ctx, e)


@recurrence_group.command("deactivate")
@click.argument("transaction_id", type=int)
@click.pass_context
def deactivate(ctx, transaction_id: int):
    """Stop generating occurrences for a transaction."""
    service = RecurrenceService(ctx.obj["db"])
    try:
        service.deactivate_recurrence(transaction_id)
        click.echo(f"Recurrence deactivated for transaction {transaction_id}")
    except DomainError as e:
        handle_domain_error(ctx, e)


@recurrence_group.command("end-date")
@click.argument("transaction_id", type=int)
@click.argument("end_date", required=False)
@click.option("--clear", is_flag=True, help="Remove the end date so the transaction repeats forever")
@click.pass_context
def set_end_date(ctx, transaction_id: int, end_date: str | None, clear: bool):
    """Set the last date a transaction may repeat on.

    Examples:
        fintrack recurrence end-date 7 2026-12-31
        fintrack recurrence end-date 7 --clear
    """
    if clear == (end_date is not None):
        click.echo("Error: Provide either END_DATE or --clear.", err=True)
        ctx.exit(1)

    parsed = None
    if end_date is not None:
        try:
            parsed = parse_date(end_date)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    service = RecurrenceService(ctx.obj["db"])
    try:
        service.set_recurrence_end_date(transaction_id, parsed)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if parsed is None:
        click.echo(f"Recurrence end date cleared for transaction {transaction_id}")
    else:
        click.echo(f"Recurrence end date set to {parsed} for transaction {transaction_id}")


@recurrence_group.command("children")
@click.argument("transaction_id", type=int)
@click.pass_context
def list_children(ctx, transaction_id: int):
    """List the occurrences generated from a transaction."""
    db = ctx.obj["db"]
    children = RecurrenceService(db).find_child_transactions(transaction_id)
    if not children:
        click.echo(f"No occurrences generated from transaction {transaction_id}.")
        return

    category_names = {cat.id: cat.name for cat in CategoryService(db).list_categories()}
    click.echo(f"\n{len(children)} occurrence(s) of transaction {transaction_id}:")
    print_transaction_table(children, category_names)


@recurrence_group.command("count")
@click.argument("transaction_id", type=int)
@click.pass_context
def count_children(ctx, transaction_id: int):
    """Count the occurrences generated from a transaction."""
    count = RecurrenceService(ctx.obj["db"]).count_child_transactions(transaction_id)
    click.echo(f"Transaction {transaction_id} has {count} generated occurrence(s)")


@recurrence_group.command("schedule")
@click.option("--hour", type=click.IntRange(0, 23), default=1, show_default=True)
@click.option("--minute", type=click.IntRange(0, 59), default=0, show_default=True)
@click.pass_context
def schedule(ctx, hour: int, minute: int):
    """Run 'recurrence process' every day at HOUR:MINUTE until interrupted."""
    from fintrack.database.factories import create_sqlite_database
    from fintrack.scheduler import run_scheduler

    db_path = ctx.obj.get("db_path")
    click.echo(f"Processing recurrences daily at {hour:02d}:{minute:02d} (Ctrl+C to stop)")
    run_scheduler(lambda: create_sqlite_database(database_path=db_path), hour=hour, minute=minute)


def register_commands(cli):
    """Register recurrence commands with main CLI."""
    cli.add_command(recurrence_group, name="recurrence")
