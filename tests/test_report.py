"""Tests for report commands."""

from datetime import date
from decimal import Decimal

from fintrack.cli.main import cli
from fintrack.domain.entities import TransactionType


def test_report_balance(cli_runner, temp_db, make_original):
    """Test balance for an explicit period."""
    make_original(description="Rent", occurrence_date=date(2025, 10, 11))
    make_original(
        description="Salary",
        amount=Decimal("3000"),
        transaction_type=TransactionType.REVENUE,
        occurrence_date=date(2025, 10, 5),
    )

    result = cli_runner.invoke(
        cli,
        [
            "--db-path",
            temp_db.database_path,
            "report",
            "balance",
            "--start-date",
            "2025-10-01",
            "--end-date",
            "2025-10-31",
        ],
    )

    assert result.exit_code == 0
    assert "Balance from 2025-10-01 to 2025-10-31:" in result.output
    assert "$3,000.00" in result.output
    assert "$1,200.00" in result.output
    assert "$1,800.00" in result.output


def test_report_balance_defaults_to_this_month(cli_runner, temp_db):
    """Test that balance covers the current month without options."""
    today = date.today()

    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "report", "balance"])

    assert result.exit_code == 0
    assert f"Balance from {today.replace(day=1)} to {today}:" in result.output


def test_report_balance_inverted_period(cli_runner, temp_db):
    """Test rejecting a start date after the end date."""
    result = cli_runner.invoke(
        cli,
        [
            "--db-path",
            temp_db.database_path,
            "report",
            "balance",
            "--start-date",
            "2025-10-31",
            "--end-date",
            "2025-10-01",
        ],
    )

    assert result.exit_code == 1
    assert "is after end date" in result.output


def test_report_balance_rejects_two_periods(cli_runner, temp_db):
    """Test that only one period flag is accepted."""
    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "report", "balance", "--this-month", "--last-month"],
    )

    assert result.exit_code == 1
    assert "Only one period option" in result.output


def test_report_distribution(cli_runner, temp_db, make_original):
    """Test distribution by category."""
    make_original(description="Rent", occurrence_date=date(2025, 10, 11))

    result = cli_runner.invoke(
        cli,
        [
            "--db-path",
            temp_db.database_path,
            "report",
            "distribution",
            "--start-date",
            "2025-10-01",
            "--end-date",
            "2025-10-31",
        ],
    )

    assert result.exit_code == 0
    assert "Housing" in result.output
    assert "$1,200.00" in result.output


def test_report_distribution_empty(cli_runner, temp_db):
    """Test distribution for a period without transactions."""
    result = cli_runner.invoke(
        cli,
        [
            "--db-path",
            temp_db.database_path,
            "report",
            "distribution",
            "--start-date",
            "2020-01-01",
            "--end-date",
            "2020-01-31",
        ],
    )

    assert result.exit_code == 0
    assert "No transactions between 2020-01-01 and 2020-01-31." in result.output


def test_report_monthly(cli_runner, temp_db, make_original):
    """Test month-by-month evolution."""
    make_original(description="Rent", occurrence_date=date(2025, 10, 11))
    make_original(description="Rent", occurrence_date=date(2025, 12, 11))

    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "report", "monthly", "2025"])

    assert result.exit_code == 0
    assert "Monthly evolution for 2025:" in result.output
    assert "October" in result.output
    assert "December" in result.output
    assert "November" not in result.output
    assert "$-1,200.00" in result.output


def test_report_monthly_empty(cli_runner, temp_db):
    """Test a year without transactions."""
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "report", "monthly", "1999"])

    assert result.exit_code == 0
    assert "No transactions in 1999." in result.output
