"""Add transaction command."""

import click
from fintrack.cli.error_handling import handle_domain_error
from fintrack.domain.category import CategoryService
from fintrack.domain.entities import RecurrenceType, TransactionType
from fintrack.domain.errors import DomainError
from fintrack.domain.transaction import TransactionService
from fintrack.utils.date_parser import parse_date
from fintrack.utils.amount_parser import parse_amount

TYPE_CHOICES = [t.value.lower() for t in TransactionType]
RECURRENCE_CHOICES = [r.value.lower() for r in RecurrenceType]


@click.command("add")
@click.option(
    "--type",
    "type_",
    required=True,
    type=click.Choice(TYPE_CHOICES, case_sensitive=False),
    help="Revenue or expense",
)
@click.option("--amount", required=True, help="Transaction amount (e.g., 123.45)")
@click.option("--description", required=True, help="Transaction description")
@click.option("--category", required=True, help="Category name or ID")
@click.option(
    "--date",
    help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday'); defaults to today",
)
@click.option(
    "--recurrence",
    type=click.Choice(RECURRENCE_CHOICES, case_sensitive=False),
    default="unique",
    show_default=True,
    help="How often the transaction repeats",
)
@click.pass_context
def add_transaction(
    ctx,
    type_: str,
    amount: str,
    description: str,
    category: str,
    date: str | None,
    recurrence: str,
):
    """Register a transaction.

    Repeating transactions keep generating one occurrence per run of
    'recurrence process' until deactivated or past their end date.

    Examples:
        fintrack add --type expense --amount 50.00 --description "Groceries" --category Food
        fintrack add --type revenue --amount 3000 --description Salary --category Income --recurrence monthly
    """
    db = ctx.obj["db"]
    transaction_service = TransactionService(db)
    category_service = CategoryService(db)

    txn_date = None
    if date is not None:
        try:
            txn_date = parse_date(date)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    try:
        txn_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        category_obj = category_service.resolve_category(category)
        transaction_id = transaction_service.register_transaction(
            transaction_type=TransactionType(type_.upper()),
            amount=txn_amount,
            description=description,
            category_id=category_obj.id,
            recurrence=RecurrenceType(recurrence.upper()),
            occurrence_date=txn_date,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    txn = transaction_service.require_transaction(transaction_id)
    click.echo(f"Created transaction {transaction_id}")
    click.echo(f"  Type: {txn.type.value.title()}")
    click.echo(f"  Date: {txn.occurrence_date}")
    click.echo(f"  Amount: ${txn.amount:,.2f}")
    click.echo(f"  Description: {txn.description}")
    click.echo(f"  Category: {category_obj.name}")
    if txn.recurrence.is_recurring:
        click.echo(f"  Recurrence: {txn.recurrence.value.title()}")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
