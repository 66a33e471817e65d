"""Transaction domain service."""

from typing import Optional
from datetime import date
from decimal import Decimal, InvalidOperation
from fintrack.database.base import Database
from fintrack.domain.entities import (
    NewTransaction,
    RecurrenceType,
    Transaction as TransactionEntity,
    TransactionType,
)
from fintrack.domain.errors import (
    NotFoundError,
    ValidationError,
    category_not_found,
    invalid_period,
    transaction_not_found,
)

CENTS = Decimal("0.01")


class TransactionService:
    """Service for registering and querying transactions."""

    def __init__(self, db: Database):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db

    def register_transaction(
        self,
        transaction_type: TransactionType,
        amount: Decimal,
        description: str,
        category_id: int,
        recurrence: RecurrenceType = RecurrenceType.UNIQUE,
        occurrence_date: Optional[date] = None,
    ) -> int:
        """Register a new original transaction.

        Repeating transactions start with their recurrence active; the
        recurrence engine generates their occurrences on later runs.

        Args:
            transaction_type: Revenue or expense
            amount: Positive amount, rounded to cents
            description: Non-empty description
            category_id: Category ID
            recurrence: How often the transaction repeats
            occurrence_date: Transaction date (defaults to today)

        Returns:
            Transaction ID

        Raises:
            ValidationError: If amount or description is invalid
            NotFoundError: If the category doesn't exist
        """
        if not isinstance(transaction_type, TransactionType):
            raise ValidationError("Transaction type is required")
        if not isinstance(recurrence, RecurrenceType):
            raise ValidationError("Recurrence type is required")

        amount = self._normalize_amount(amount)

        description = (description or "").strip()
        if not description:
            raise ValidationError("Description is required")

        if self.db.get_category(category_id) is None:
            raise NotFoundError(category_not_found(category_id))

        return self.db.create_transaction(
            NewTransaction(
                type=transaction_type,
                amount=amount,
                description=description,
                category_id=category_id,
                recurrence=recurrence,
                occurrence_date=occurrence_date or date.today(),
                parent_id=None,
                recurrence_active=True,
                recurrence_end_date=None,
            )
        )

    @staticmethod
    def _normalize_amount(amount: Decimal) -> Decimal:
        try:
            amount = Decimal(amount).quantize(CENTS)
        except (InvalidOperation, TypeError, ValueError):
            raise ValidationError(f"Invalid amount: {amount!r}")
        if amount <= 0:
            raise ValidationError("Amount must be positive")
        return amount

    def get_transaction(self, transaction_id: int) -> Optional[TransactionEntity]:
        """Get transaction by ID.

        Args:
            transaction_id: Transaction ID

        Returns:
            Transaction entity or None if not found
        """
        return self.db.get_transaction(transaction_id)

    def require_transaction(self, transaction_id: int) -> TransactionEntity:
        """Get transaction by ID or raise.

        Raises:
            NotFoundError: If the transaction doesn't exist
        """
        transaction = self.db.get_transaction(transaction_id)
        if transaction is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        return transaction

    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction.

        Children generated from a deleted original are kept.

        Args:
            transaction_id: Transaction ID to delete

        Raises:
            NotFoundError: If the transaction doesn't exist
        """
        if not self.db.transaction_exists(transaction_id):
            raise NotFoundError(transaction_not_found(transaction_id))

        self.db.delete_transaction(transaction_id)

    def list_transactions(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        transaction_type: Optional[TransactionType] = None,
        category_id: Optional[int] = None,
    ) -> list[TransactionEntity]:
        """List transactions with filters.

        Args:
            start_date: Optional inclusive start date filter
            end_date: Optional inclusive end date filter
            transaction_type: Optional revenue/expense filter
            category_id: Optional category ID filter

        Returns:
            List of transaction entities, newest first

        Raises:
            ValidationError: If start_date is after end_date
            NotFoundError: If the category doesn't exist
        """
        if start_date is not None and end_date is not None and start_date > end_date:
            raise ValidationError(invalid_period(start_date, end_date))

        if category_id is not None and self.db.get_category(category_id) is None:
            raise NotFoundError(category_not_found(category_id))

        return self.db.list_transactions(
            start_date=start_date,
            end_date=end_date,
            transaction_type=transaction_type,
            category_id=category_id,
        )
