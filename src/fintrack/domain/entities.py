"""Domain model entities for fintrack.

These are pure data classes representing business concepts, independent of
database schema. Services pass these around; only the database layer knows
about ORM models.
"""

from dataclasses import dataclass
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional


class TransactionType(str, Enum):
    """Whether a transaction brings money in or takes it out."""

    REVENUE = "REVENUE"
    EXPENSE = "EXPENSE"


class RecurrenceType(str, Enum):
    """How often a transaction repeats."""

    UNIQUE = "UNIQUE"
    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"
    QUARTERLY = "QUARTERLY"
    ANNUAL = "ANNUAL"

    @property
    def is_recurring(self) -> bool:
        return self is not RecurrenceType.UNIQUE


@dataclass(frozen=True)
class Category:
    """Category domain entity."""

    id: int
    name: str
    created_at: datetime


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity.

    A transaction with no parent is an *original*. Transactions generated by
    the recurrence engine carry the id of the original that spawned them in
    ``parent_id``; the recurrence flag and end date only mean something on
    originals.
    """

    id: int
    type: TransactionType
    amount: Decimal
    description: str
    category_id: int
    recurrence: RecurrenceType
    occurrence_date: date
    parent_id: Optional[int] = None
    recurrence_active: bool = False
    recurrence_end_date: Optional[date] = None
    created_at: Optional[datetime] = None

    @property
    def is_original(self) -> bool:
        return self.parent_id is None

    @property
    def is_child(self) -> bool:
        return self.parent_id is not None

    def can_generate_recurrence(self) -> bool:
        """Return True if the engine may spawn occurrences from this transaction."""
        return self.is_original and self.recurrence_active and self.recurrence.is_recurring

    def should_continue_recurrence(self, reference_date: date) -> bool:
        """Return True if an occurrence dated ``reference_date`` respects the end date."""
        if self.recurrence_end_date is None:
            return True
        return reference_date <= self.recurrence_end_date


@dataclass(frozen=True)
class NewTransaction:
    """Field values for a transaction that has not been persisted yet."""

    type: TransactionType
    amount: Decimal
    description: str
    category_id: int
    recurrence: RecurrenceType
    occurrence_date: date
    parent_id: Optional[int] = None
    recurrence_active: bool = False
    recurrence_end_date: Optional[date] = None


@dataclass(frozen=True)
class BalanceReport:
    """Revenue, expense and net balance over a period."""

    revenues: Decimal
    expenses: Decimal
    balance: Decimal


@dataclass(frozen=True)
class CategoryTotal:
    """Total amount recorded against one category."""

    category_id: int
    category_name: str
    total: Decimal


@dataclass(frozen=True)
class MonthlyTotals:
    """Revenue and expense totals for one calendar month."""

    year: int
    month: int
    revenues: Decimal
    expenses: Decimal

    @property
    def balance(self) -> Decimal:
        return self.revenues - self.expenses
