"""SQLAlchemy models for fintrack database."""

from datetime import datetime, UTC
from decimal import Decimal
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    Boolean,
    Enum,
    Index,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session
from sqlalchemy.types import TypeDecorator

from fintrack.domain.entities import TransactionType, RecurrenceType

Base = declarative_base()

CENTS = Decimal("0.01")


class CentsAmount(TypeDecorator):
    """Decimal amount stored as an integer number of cents.

    SQLite has no exact decimal type, so amounts are kept as integers and
    converted back to two-place Decimals when loaded.
    """

    impl = Integer
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return int(Decimal(value).quantize(CENTS).scaleb(2))

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return Decimal(value).scaleb(-2).quantize(CENTS)


class Category(Base):
    """Category model."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True)
    name = Column(String(100), unique=True, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    transactions = relationship("Transaction", back_populates="category")


class Transaction(Base):
    """Transaction model.

    Rows with a parent_id were generated by the recurrence engine from the
    original transaction the id points to.
    """

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    type = Column(Enum(TransactionType, native_enum=False, length=20), nullable=False)
    amount = Column(CentsAmount, nullable=False)
    description = Column(String(255), nullable=False)
    recurrence = Column(
        Enum(RecurrenceType, native_enum=False, length=11),
        default=RecurrenceType.UNIQUE,
        nullable=False,
    )
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False)
    occurrence_date = Column(Date, nullable=False)
    parent_id = Column(Integer, ForeignKey("transactions.id"), nullable=True)
    recurrence_active = Column(Boolean, default=False, nullable=False)
    recurrence_end_date = Column(Date, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (Index("ix_transactions_parent_id", "parent_id"),)

    # Relationships
    category = relationship("Category", back_populates="transactions")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
