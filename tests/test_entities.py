"""Tests for domain entities."""

import pytest
from datetime import datetime, date, UTC
from decimal import Decimal

from fintrack.domain.entities import (
    Category,
    MonthlyTotals,
    RecurrenceType,
    Transaction,
    TransactionType,
)


def _transaction(**overrides):
    fields = dict(
        id=1,
        type=TransactionType.EXPENSE,
        amount=Decimal("100.00"),
        description="Internet",
        category_id=1,
        recurrence=RecurrenceType.MONTHLY,
        occurrence_date=date(2025, 10, 11),
        parent_id=None,
        recurrence_active=True,
    )
    fields.update(overrides)
    return Transaction(**fields)


class TestCategory:
    """Tests for Category entity."""

    def test_category_immutability(self):
        """Test that Category entities are immutable."""
        category = Category(id=1, name="Food", created_at=datetime.now(UTC))
        with pytest.raises(Exception):  # dataclass frozen raises FrozenInstanceError
            category.name = "New Name"


class TestRecurrenceType:
    """Tests for RecurrenceType."""

    def test_only_unique_is_not_recurring(self):
        assert RecurrenceType.UNIQUE.is_recurring is False
        assert all(kind.is_recurring for kind in RecurrenceType if kind is not RecurrenceType.UNIQUE)


class TestTransaction:
    """Tests for Transaction entity."""

    def test_original_and_child(self):
        original = _transaction()
        child = _transaction(id=2, parent_id=1, recurrence_active=False)

        assert original.is_original and not original.is_child
        assert child.is_child and not child.is_original

    def test_defaults(self):
        txn = Transaction(
            id=1,
            type=TransactionType.REVENUE,
            amount=Decimal("1.00"),
            description="Tip",
            category_id=1,
            recurrence=RecurrenceType.UNIQUE,
            occurrence_date=date(2025, 1, 1),
        )

        assert txn.parent_id is None
        assert txn.recurrence_active is False
        assert txn.recurrence_end_date is None

    def test_can_generate_recurrence(self):
        assert _transaction().can_generate_recurrence() is True
        assert _transaction(recurrence_active=False).can_generate_recurrence() is False
        assert _transaction(recurrence=RecurrenceType.UNIQUE).can_generate_recurrence() is False
        assert _transaction(parent_id=7).can_generate_recurrence() is False

    def test_should_continue_recurrence(self):
        open_ended = _transaction()
        bounded = _transaction(recurrence_end_date=date(2025, 12, 31))

        assert open_ended.should_continue_recurrence(date(2099, 1, 1)) is True
        assert bounded.should_continue_recurrence(date(2025, 12, 31)) is True
        assert bounded.should_continue_recurrence(date(2026, 1, 1)) is False

    def test_transaction_immutability(self):
        """Test that Transaction entities are immutable."""
        with pytest.raises(Exception):
            _transaction().recurrence_active = False


class TestMonthlyTotals:
    """Tests for MonthlyTotals."""

    def test_balance(self):
        totals = MonthlyTotals(year=2025, month=3, revenues=Decimal("10.00"), expenses=Decimal("12.50"))

        assert totals.balance == Decimal("-2.50")
