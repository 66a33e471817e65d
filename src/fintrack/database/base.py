"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date

# Import entities directly to avoid circular import through domain/__init__.py
from fintrack.domain.entities import (
    BalanceReport,
    Category,
    CategoryTotal,
    MonthlyTotals,
    NewTransaction,
    Transaction,
    TransactionType,
)


class Database(ABC):
    """Abstract database interface for fintrack."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Category operations
    @abstractmethod
    def create_category(self, name: str) -> int:
        """Create a category. Returns category ID."""
        pass

    @abstractmethod
    def get_category(self, category_id: int) -> Optional[Category]:
        """Get category by ID."""
        pass

    @abstractmethod
    def get_category_by_name(self, name: str) -> Optional[Category]:
        """Get category by exact name."""
        pass

    @abstractmethod
    def list_categories(self) -> list[Category]:
        """List all categories ordered by name."""
        pass

    @abstractmethod
    def get_category_transaction_count(self, category_id: int) -> int:
        """Count transactions referencing a category."""
        pass

    @abstractmethod
    def delete_category(self, category_id: int) -> None:
        """Delete a category."""
        pass

    # Transaction operations
    @abstractmethod
    def create_transaction(self, new_transaction: NewTransaction) -> int:
        """Insert a transaction. Returns transaction ID."""
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def transaction_exists(self, transaction_id: int) -> bool:
        """Check if a transaction with the given ID exists."""
        pass

    @abstractmethod
    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction. Generated children are left in place."""
        pass

    @abstractmethod
    def list_transactions(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        transaction_type: Optional[TransactionType] = None,
        category_id: Optional[int] = None,
    ) -> list[Transaction]:
        """List transactions with optional filters, newest first.

        Args:
            start_date: Optional inclusive start date filter
            end_date: Optional inclusive end date filter
            transaction_type: Optional revenue/expense filter
            category_id: Optional category ID filter
        """
        pass

    @abstractmethod
    def update_recurrence(
        self,
        transaction_id: int,
        recurrence_active: bool,
        recurrence_end_date: Optional[date],
    ) -> None:
        """Persist the recurrence flag and end date of an original transaction."""
        pass

    # Recurrence queries
    @abstractmethod
    def find_active_recurring_originals(self) -> list[Transaction]:
        """Originals with an active, non-unique recurrence."""
        pass

    @abstractmethod
    def find_last_child_transaction(self, parent_id: int) -> Optional[Transaction]:
        """Most recently created transaction generated from ``parent_id``."""
        pass

    @abstractmethod
    def list_child_transactions(self, parent_id: int) -> list[Transaction]:
        """All transactions generated from ``parent_id``, oldest occurrence first."""
        pass

    @abstractmethod
    def count_child_transactions(self, parent_id: int) -> int:
        """Number of transactions generated from ``parent_id``."""
        pass

    @abstractmethod
    def count_children_since(self, parent_id: int, since: date) -> int:
        """Number of children of ``parent_id`` dated on or after ``since``."""
        pass

    # Report queries
    @abstractmethod
    def get_balance(self, start_date: date, end_date: date) -> BalanceReport:
        """Sum revenues and expenses dated within the inclusive period."""
        pass

    @abstractmethod
    def get_category_distribution(self, start_date: date, end_date: date) -> list[CategoryTotal]:
        """Sum amounts per category within the inclusive period."""
        pass

    @abstractmethod
    def get_monthly_totals(self, year: int) -> list[MonthlyTotals]:
        """Revenue and expense totals for each month of ``year`` with activity."""
        pass
