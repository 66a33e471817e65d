"""Shared pytest fixtures for fintrack tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal
import pytest

from fintrack.database.factories import create_sqlite_database
from fintrack.domain.category import CategoryService
from fintrack.domain.entities import NewTransaction, RecurrenceType, TransactionType
from fintrack.domain.recurrence import RecurrenceService
from fintrack.domain.report import ReportService
from fintrack.domain.transaction import TransactionService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def category_service(temp_db):
    """Create a CategoryService with a temporary database."""
    return CategoryService(temp_db)


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def recurrence_service(temp_db):
    """Create a RecurrenceService with a temporary database."""
    return RecurrenceService(temp_db)


@pytest.fixture
def report_service(temp_db):
    """Create a ReportService with a temporary database."""
    return ReportService(temp_db)


@pytest.fixture
def sample_category(category_service):
    """Create a sample category for testing."""
    category_id = category_service.create_category(name="Housing")
    return category_service.get_category(category_id)


@pytest.fixture
def make_original(transaction_service, sample_category):
    """Factory registering an original transaction and returning the entity."""

    def _make(
        recurrence=RecurrenceType.MONTHLY,
        occurrence_date=date(2025, 10, 11),
        amount=Decimal("1200.00"),
        description="Rent",
        transaction_type=TransactionType.EXPENSE,
        category_id=None,
    ):
        transaction_id = transaction_service.register_transaction(
            transaction_type=transaction_type,
            amount=amount,
            description=description,
            category_id=category_id or sample_category.id,
            recurrence=recurrence,
            occurrence_date=occurrence_date,
        )
        return transaction_service.require_transaction(transaction_id)

    return _make


@pytest.fixture
def make_child(temp_db):
    """Factory inserting a generated child of an original directly into storage."""

    def _make(original, occurrence_date):
        child_id = temp_db.create_transaction(
            NewTransaction(
                type=original.type,
                amount=original.amount,
                description=original.description,
                category_id=original.category_id,
                recurrence=original.recurrence,
                occurrence_date=occurrence_date,
                parent_id=original.id,
                recurrence_active=False,
                recurrence_end_date=None,
            )
        )
        return temp_db.get_transaction(child_id)

    return _make


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
