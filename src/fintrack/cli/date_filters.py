"""CLI helpers for date range resolution."""

from datetime import date

import click

from fintrack.utils.date_parser import get_date_range, parse_date


def period_options(command):
    """Attach --start-date/--end-date and the named period flags to a command."""
    options = [
        click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'last month')"),
        click.option("--end-date", help="End date (YYYY-MM-DD or relative like 'today')"),
        click.option("--this-month", is_flag=True, help="Filter to current month"),
        click.option("--this-year", is_flag=True, help="Filter to current year"),
        click.option("--this-week", is_flag=True, help="Filter to current week"),
        click.option("--last-month", is_flag=True, help="Filter to previous month"),
        click.option("--last-year", is_flag=True, help="Filter to previous year"),
        click.option("--last-week", is_flag=True, help="Filter to previous week"),
    ]
    for option in reversed(options):
        command = option(command)
    return command


def collect_period_flags(**flags: bool) -> dict[str, bool]:
    """Turn keyword flags like this_month=True into {'this-month': True}."""
    return {name.replace("_", "-"): bool(value) for name, value in flags.items()}


def resolve_cli_date_range(
    ctx,
    *,
    start_date: str | None,
    end_date: str | None,
    period_flags: dict[str, bool],
    default_range: tuple[date, date] | None = None,
) -> tuple[date | None, date | None]:
    """Resolve CLI date range from period flags or explicit dates."""
    selected = [period for period, is_set in period_flags.items() if is_set]

    if len(selected) > 1:
        click.echo(
            "Error: Only one period option (--this-month, --this-year, --this-week, "
            "--last-month, --last-year, --last-week) can be specified at a time.",
            err=True,
        )
        ctx.exit(1)

    if selected and (start_date or end_date):
        click.echo(
            "Error: Period options (--this-month, --this-year, etc.) cannot be combined "
            "with --start-date or --end-date.",
            err=True,
        )
        ctx.exit(1)

    if selected:
        return get_date_range(selected[0])

    start = None
    end = None
    if start_date:
        try:
            start = parse_date(start_date)
        except ValueError as e:
            click.echo(f"Error: Invalid start date: {e}", err=True)
            ctx.exit(1)

    if end_date:
        try:
            end = parse_date(end_date)
        except ValueError as e:
            click.echo(f"Error: Invalid end date: {e}", err=True)
            ctx.exit(1)

    if start is None and end is None and default_range is not None:
        start, end = default_range

    return start, end
