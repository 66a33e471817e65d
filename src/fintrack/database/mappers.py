"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic so the domain entities stay free of
ORM state.
"""

from decimal import Decimal

from fintrack.domain import entities as domain
from fintrack.database.models import (
    Category as ORMCategory,
    Transaction as ORMTransaction,
)

_CENTS = Decimal("0.01")


def category_to_domain(orm_category: ORMCategory) -> domain.Category:
    """Convert SQLAlchemy Category model to domain Category entity."""
    return domain.Category(
        id=orm_category.id,
        name=orm_category.name,
        created_at=orm_category.created_at,
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        type=orm_transaction.type,
        amount=Decimal(orm_transaction.amount).quantize(_CENTS),
        description=orm_transaction.description,
        category_id=orm_transaction.category_id,
        recurrence=orm_transaction.recurrence,
        occurrence_date=orm_transaction.occurrence_date,
        parent_id=orm_transaction.parent_id,
        recurrence_active=bool(orm_transaction.recurrence_active),
        recurrence_end_date=orm_transaction.recurrence_end_date,
        created_at=orm_transaction.created_at,
    )


def new_transaction_to_orm(new_transaction: domain.NewTransaction) -> ORMTransaction:
    """Build an unsaved SQLAlchemy Transaction from a domain NewTransaction."""
    return ORMTransaction(
        type=new_transaction.type,
        amount=new_transaction.amount,
        description=new_transaction.description,
        category_id=new_transaction.category_id,
        recurrence=new_transaction.recurrence,
        occurrence_date=new_transaction.occurrence_date,
        parent_id=new_transaction.parent_id,
        recurrence_active=new_transaction.recurrence_active,
        recurrence_end_date=new_transaction.recurrence_end_date,
    )
