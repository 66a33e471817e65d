"""Recurrence domain service.

Generates the occurrences of repeating transactions. Each run looks at every
original transaction with an active recurrence and creates at most one new
child for it, dated one period after the most recent point in its chain.
"""

import logging
from dataclasses import dataclass, replace
from datetime import date, timedelta
from typing import Optional

from dateutil.relativedelta import relativedelta

from fintrack.database.base import Database
from fintrack.domain.entities import (
    NewTransaction,
    RecurrenceType,
    Transaction as TransactionEntity,
)
from fintrack.domain.errors import (
    InvalidOperationError,
    NotFoundError,
    end_date_before_start,
    not_an_original,
    nothing_to_activate,
    transaction_not_found,
)

logger = logging.getLogger(__name__)

# Children already dated today or later before a chain stops advancing
DEFAULT_MAX_CHILDREN_AHEAD = 2

MONTHS_PER_QUARTER = 3

_PERIODS = {
    RecurrenceType.DAILY: timedelta(days=1),
    RecurrenceType.WEEKLY: timedelta(weeks=1),
    RecurrenceType.MONTHLY: relativedelta(months=1),
    RecurrenceType.QUARTERLY: relativedelta(months=MONTHS_PER_QUARTER),
    RecurrenceType.ANNUAL: relativedelta(years=1),
}


def next_occurrence_date(source_date: date, recurrence: RecurrenceType) -> date:
    """Return the date one recurrence period after ``source_date``.

    Month and year steps clamp the day to the end of the target month, so
    Jan 31 + 1 month is Feb 28 (or 29) and Feb 29 + 1 year is Feb 28.

    Raises:
        ValueError: If ``recurrence`` is UNIQUE
    """
    try:
        period = _PERIODS[recurrence]
    except KeyError:
        raise ValueError(f"Recurrence {recurrence.value} has no period") from None
    return source_date + period


def build_child_transaction(
    original: TransactionEntity, source: TransactionEntity, occurrence_date: date
) -> NewTransaction:
    """Build the next occurrence of ``original``.

    Values are copied from ``source`` (the original or its latest child) while
    the parent always points at the root original, keeping chains one level deep.
    """
    root_id = original.id if original.is_original else original.parent_id
    return NewTransaction(
        type=source.type,
        amount=source.amount,
        description=source.description,
        category_id=source.category_id,
        recurrence=source.recurrence,
        occurrence_date=occurrence_date,
        parent_id=root_id,
        recurrence_active=False,
        recurrence_end_date=None,
    )


@dataclass
class RecurrenceRunResult:
    """Counters for one batch run."""

    processed: int = 0
    generated: int = 0
    skipped: int = 0
    failed: int = 0


class RecurrenceService:
    """Service for processing and managing recurring transactions."""

    def __init__(self, db: Database, max_children_ahead: int = DEFAULT_MAX_CHILDREN_AHEAD):
        """Initialize recurrence service.

        Args:
            db: Database instance
            max_children_ahead: Number of children dated today or later at
                which a chain stops advancing
        """
        self.db = db
        self.max_children_ahead = max_children_ahead

    def process_all_active_recurrences(self, today: Optional[date] = None) -> RecurrenceRunResult:
        """Generate the next occurrence for every active recurring original.

        A failure while processing one original is logged and does not stop
        the others; it is retried naturally on the next run.

        Args:
            today: Reference date for the lookahead cap (defaults to today)

        Returns:
            Counters describing what the run did
        """
        today = today or date.today()
        originals = self.db.find_active_recurring_originals()
        logger.info("Processing %d transaction(s) with an active recurrence", len(originals))

        result = RecurrenceRunResult()
        for original in originals:
            result.processed += 1
            try:
                child_id = self.process_recurrence(original, today)
            except Exception:
                result.failed += 1
                logger.exception("Failed to process recurrence for transaction %s", original.id)
                continue
            if child_id is None:
                result.skipped += 1
            else:
                result.generated += 1

        logger.info(
            "Recurrence processing finished: %d generated, %d skipped, %d failed",
            result.generated,
            result.skipped,
            result.failed,
        )
        return result

    def process_recurrence(self, original: TransactionEntity, today: date) -> Optional[int]:
        """Generate at most one child for ``original``.

        Returns:
            ID of the generated child, or None if nothing was due
        """
        if not original.can_generate_recurrence():
            logger.debug("Transaction %s cannot generate recurrences", original.id)
            return None

        ahead = self.db.count_children_since(original.id, today)
        if ahead >= self.max_children_ahead:
            logger.debug(
                "Transaction %s already has %d occurrence(s) from %s on", original.id, ahead, today
            )
            return None

        source = self._get_source(original)
        next_date = next_occurrence_date(source.occurrence_date, original.recurrence)

        if not original.should_continue_recurrence(next_date):
            logger.debug(
                "Next date %s for transaction %s is after the end date %s",
                next_date,
                original.id,
                original.recurrence_end_date,
            )
            return None

        child_id = self.db.create_transaction(build_child_transaction(original, source, next_date))
        logger.info(
            "Generated transaction %s from recurrence %s for %s", child_id, original.id, next_date
        )
        return child_id

    def _get_source(self, original: TransactionEntity) -> TransactionEntity:
        """Latest child of ``original``, or the original itself when it has none."""
        last_child = self.db.find_last_child_transaction(original.id)
        return last_child if last_child is not None else original

    def deactivate_recurrence(self, transaction_id: int) -> TransactionEntity:
        """Stop generating occurrences from an original transaction.

        Already generated children are left untouched.

        Raises:
            NotFoundError: If the transaction doesn't exist
            InvalidOperationError: If the transaction is a generated child
        """
        transaction = self._require_original(transaction_id)
        updated = replace(transaction, recurrence_active=False)
        self._save_recurrence(updated)
        logger.info("Recurrence deactivated for transaction %s", transaction_id)
        return updated

    def activate_recurrence(self, transaction_id: int) -> TransactionEntity:
        """Resume generating occurrences from an original transaction.

        Raises:
            NotFoundError: If the transaction doesn't exist
            InvalidOperationError: If the transaction is a generated child or
                doesn't repeat
        """
        transaction = self._require_original(transaction_id)
        if not transaction.recurrence.is_recurring:
            raise InvalidOperationError(nothing_to_activate(transaction_id))
        updated = replace(transaction, recurrence_active=True)
        self._save_recurrence(updated)
        logger.info("Recurrence activated for transaction %s", transaction_id)
        return updated

    def set_recurrence_end_date(
        self, transaction_id: int, end_date: Optional[date]
    ) -> TransactionEntity:
        """Set or clear the last date an original may repeat on.

        Args:
            transaction_id: Original transaction ID
            end_date: Last allowed occurrence date, or None to repeat forever

        Raises:
            NotFoundError: If the transaction doesn't exist
            InvalidOperationError: If the transaction is a generated child or
                the end date is before the transaction date
        """
        transaction = self._require_original(transaction_id)
        if end_date is not None and end_date < transaction.occurrence_date:
            raise InvalidOperationError(end_date_before_start(end_date, transaction.occurrence_date))
        updated = replace(transaction, recurrence_end_date=end_date)
        self._save_recurrence(updated)
        logger.info("Recurrence end date set to %s for transaction %s", end_date, transaction_id)
        return updated

    def find_child_transactions(self, parent_id: int) -> list[TransactionEntity]:
        """List the occurrences generated from an original."""
        return self.db.list_child_transactions(parent_id)

    def count_child_transactions(self, parent_id: int) -> int:
        """Count the occurrences generated from an original."""
        return self.db.count_child_transactions(parent_id)

    def _require_original(self, transaction_id: int) -> TransactionEntity:
        transaction = self.db.get_transaction(transaction_id)
        if transaction is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        if not transaction.is_original:
            raise InvalidOperationError(not_an_original(transaction_id))
        return transaction

    def _save_recurrence(self, transaction: TransactionEntity) -> None:
        self.db.update_recurrence(
            transaction_id=transaction.id,
            recurrence_active=transaction.recurrence_active,
            recurrence_end_date=transaction.recurrence_end_date,
        )
