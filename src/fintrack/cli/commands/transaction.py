"""Transaction management commands."""

import click
from fintrack.cli.date_filters import collect_period_flags, period_options, resolve_cli_date_range
from fintrack.cli.error_handling import EXIT_NOT_FOUND, handle_domain_error
from fintrack.domain.category import CategoryService
from fintrack.domain.entities import Transaction, TransactionType
from fintrack.domain.errors import DomainError
from fintrack.domain.transaction import TransactionService


def print_transaction_table(transactions: list[Transaction], category_names: dict[int, str]) -> None:
    """Print transactions as a compact table with totals."""
    click.echo("-" * 100)
    click.echo(
        f"{'ID':<6} {'Date':<12} {'Type':<8} {'Amount':>12}  {'Category':<20} {'Recurrence':<11} {'Description':<25}"
    )
    click.echo("-" * 100)

    for txn in transactions:
        recurrence = txn.recurrence.value.title()
        if txn.is_child:
            recurrence = f"#{txn.parent_id}"
        click.echo(
            f"{txn.id:<6} {str(txn.occurrence_date):<12} {txn.type.value.title():<8} "
            f"{f'${txn.amount:,.2f}':>12}  {category_names.get(txn.category_id, 'Unknown')[:20]:<20} "
            f"{recurrence:<11} {txn.description[:25]:<25}"
        )

    revenues = sum((t.amount for t in transactions if t.type == TransactionType.REVENUE), start=0)
    expenses = sum((t.amount for t in transactions if t.type == TransactionType.EXPENSE), start=0)
    click.echo("-" * 100)
    click.echo(
        f"{'TOTAL':<6} Revenues: ${revenues:,.2f} | Expenses: ${expenses:,.2f} | Count: {len(transactions)}"
    )


@click.group()
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("list")
@period_options
@click.option(
    "--type",
    "type_",
    type=click.Choice([t.value.lower() for t in TransactionType], case_sensitive=False),
    help="Only revenues or only expenses",
)
@click.option("--category", help="Category name or ID")
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
    type_: str | None,
    category: str | None,
):
    """View transactions with optional filters."""
    db = ctx.obj["db"]
    service = TransactionService(db)
    category_service = CategoryService(db)

    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags=collect_period_flags(
            this_month=this_month,
            this_year=this_year,
            this_week=this_week,
            last_month=last_month,
            last_year=last_year,
            last_week=last_week,
        ),
    )

    try:
        category_id = category_service.resolve_category(category).id if category else None
        transactions = service.list_transactions(
            start_date=start,
            end_date=end,
            transaction_type=TransactionType(type_.upper()) if type_ else None,
            category_id=category_id,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if not transactions:
        click.echo("No transactions found.")
        return

    category_names = {cat.id: cat.name for cat in category_service.list_categories()}
    click.echo(f"\nFound {len(transactions)} transaction(s):")
    print_transaction_table(transactions, category_names)


@transaction_group.command("show")
@click.argument("transaction_id", type=int)
@click.pass_context
def show_transaction(ctx, transaction_id: int) -> None:
    """Show every field of a transaction."""
    db = ctx.obj["db"]
    service = TransactionService(db)
    category_service = CategoryService(db)

    try:
        txn = service.require_transaction(transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    category = category_service.get_category(txn.category_id)
    click.echo(f"Transaction ID: {txn.id}")
    click.echo(f"  Type: {txn.type.value.title()}")
    click.echo(f"  Date: {txn.occurrence_date}")
    click.echo(f"  Amount: ${txn.amount:,.2f}")
    click.echo(f"  Description: {txn.description}")
    click.echo(f"  Category: {category.name if category else 'Unknown'}")
    click.echo(f"  Recurrence: {txn.recurrence.value.title()}")
    if txn.is_child:
        click.echo(f"  Generated from: {txn.parent_id}")
    elif txn.recurrence.is_recurring:
        click.echo(f"  Recurrence active: {'yes' if txn.recurrence_active else 'no'}")
        click.echo(f"  Recurrence ends: {txn.recurrence_end_date or 'never'}")


@transaction_group.command("delete")
@click.argument("transaction_id", type=int)
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_transaction(ctx, transaction_id: int, yes: bool) -> None:
    """Delete a transaction.

    Occurrences already generated from a deleted transaction are kept.

    Examples:
        fintrack transaction delete 1
    """
    db = ctx.obj["db"]
    service = TransactionService(db)

    txn = service.get_transaction(transaction_id)
    if txn is None:
        click.echo(f"Error: Transaction {transaction_id} not found", err=True)
        ctx.exit(EXIT_NOT_FOUND)

    if not yes and not click.confirm(f"Are you sure you want to delete transaction {transaction_id}?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_transaction(transaction_id)
        click.echo(f"Deleted transaction {transaction_id}")
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli: click.Group) -> None:
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
