"""Report domain service.

Read-only aggregations over transactions: balance for a period, where the
money went by category, and month-by-month totals for a year.
"""

from datetime import date

from fintrack.database.base import Database
from fintrack.domain.entities import BalanceReport, CategoryTotal, MonthlyTotals
from fintrack.domain.errors import ValidationError, invalid_period


class ReportService:
    """Service for building financial reports."""

    def __init__(self, db: Database):
        """Initialize report service.

        Args:
            db: Database instance
        """
        self.db = db

    def calculate_balance(self, start_date: date, end_date: date) -> BalanceReport:
        """Total revenues, expenses and their difference within a period.

        Raises:
            ValidationError: If start_date is after end_date
        """
        self._validate_period(start_date, end_date)
        return self.db.get_balance(start_date, end_date)

    def distribution_by_category(self, start_date: date, end_date: date) -> list[CategoryTotal]:
        """Totals per category within a period, largest first.

        Raises:
            ValidationError: If start_date is after end_date
        """
        self._validate_period(start_date, end_date)
        return self.db.get_category_distribution(start_date, end_date)

    def monthly_evolution(self, year: int) -> list[MonthlyTotals]:
        """Revenue and expense totals per month for ``year``."""
        if not 1 <= year <= 9999:
            raise ValidationError(f"Invalid year: {year}")
        return self.db.get_monthly_totals(year)

    @staticmethod
    def _validate_period(start_date: date, end_date: date) -> None:
        if start_date > end_date:
            raise ValidationError(invalid_period(start_date, end_date))
