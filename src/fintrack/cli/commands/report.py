"""Report commands."""

from datetime import date

import click
from fintrack.cli.date_filters import collect_period_flags, period_options, resolve_cli_date_range
from fintrack.cli.error_handling import handle_domain_error
from fintrack.domain.errors import DomainError
from fintrack.domain.report import ReportService
from fintrack.utils.date_parser import get_date_range

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def _resolve_period(ctx, start_date, end_date, **flags) -> tuple[date, date]:
    default_start, default_end = get_date_range("this-month")
    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags=collect_period_flags(**flags),
        default_range=(default_start, default_end),
    )
    # A single open end falls back to the current month's bounds
    return start or default_start, end or default_end


@click.group()
def report_group():
    """Financial reports."""
    pass


@report_group.command("balance")
@period_options
@click.pass_context
def balance(ctx, start_date, end_date, **flags):
    """Show total revenues, expenses and the balance for a period.

    Defaults to the current month.
    """
    start, end = _resolve_period(ctx, start_date, end_date, **flags)
    try:
        report = ReportService(ctx.obj["db"]).calculate_balance(start, end)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"\nBalance from {start} to {end}:")
    click.echo("-" * 40)
    click.echo(f"{'Revenues':<20} {f'${report.revenues:,.2f}':>19}")
    click.echo(f"{'Expenses':<20} {f'${report.expenses:,.2f}':>19}")
    click.echo("-" * 40)
    click.echo(f"{'Balance':<20} {f'${report.balance:,.2f}':>19}")


@report_group.command("distribution")
@period_options
@click.pass_context
def distribution(ctx, start_date, end_date, **flags):
    """Show totals per category for a period, largest first.

    Defaults to the current month.
    """
    start, end = _resolve_period(ctx, start_date, end_date, **flags)
    try:
        rows = ReportService(ctx.obj["db"]).distribution_by_category(start, end)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if not rows:
        click.echo(f"No transactions between {start} and {end}.")
        return

    click.echo(f"\nDistribution by category from {start} to {end}:")
    click.echo("-" * 50)
    for row in rows:
        click.echo(f"{row.category_name:<30} {f'${row.total:,.2f}':>19}")


@report_group.command("monthly")
@click.argument("year", type=int, required=False)
@click.pass_context
def monthly(ctx, year: int | None):
    """Show revenues and expenses month by month for YEAR (default: this year)."""
    year = year or date.today().year
    try:
        rows = ReportService(ctx.obj["db"]).monthly_evolution(year)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if not rows:
        click.echo(f"No transactions in {year}.")
        return

    click.echo(f"\nMonthly evolution for {year}:")
    click.echo("-" * 70)
    click.echo(f"{'Month':<12} {'Revenues':>18} {'Expenses':>18} {'Balance':>18}")
    click.echo("-" * 70)
    for row in rows:
        click.echo(
            f"{MONTH_NAMES[row.month - 1]:<12} {f'${row.revenues:,.2f}':>18} "
            f"{f'${row.expenses:,.2f}':>18} {f'${row.balance:,.2f}':>18}"
        )


def register_commands(cli):
    """Register report commands with main CLI."""
    cli.add_command(report_group, name="report")
