"""Shared domain error messages and error types."""

from datetime import date


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class InvalidOperationError(DomainError):
    """Operation not allowed for the entity in its current state."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class DependencyError(DomainError):
    """Operation blocked due to dependent domain data."""


def category_not_found(category_id: int) -> str:
    """Return message for missing category by ID."""
    return f"Category {category_id} not found"


def category_name_not_found(name: str) -> str:
    """Return message for missing category by name."""
    return f"Category '{name}' not found"


def duplicate_category_name(name: str) -> str:
    """Return message for a category name that is already taken."""
    return f"Category with name '{name}' already exists"


def category_delete_blocked(category_id: int, transaction_count: int) -> str:
    """Return message when a category still has transactions."""
    return (
        f"Cannot delete category {category_id}: it has {transaction_count} "
        f"transaction{'s' if transaction_count != 1 else ''}. "
        "Please delete them first."
    )


def transaction_not_found(transaction_id: int) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def not_an_original(transaction_id: int) -> str:
    """Return message when a recurrence operation targets a generated transaction."""
    return (
        f"Transaction {transaction_id} was generated by a recurrence; "
        "only original transactions can be changed"
    )


def nothing_to_activate(transaction_id: int) -> str:
    """Return message when activating a one-off transaction."""
    return f"Transaction {transaction_id} does not repeat, there is no recurrence to activate"


def end_date_before_start(end_date: date, occurrence_date: date) -> str:
    """Return message when a recurrence end date precedes the original."""
    return f"End date {end_date} cannot be before the transaction date {occurrence_date}"


def invalid_period(start_date: date, end_date: date) -> str:
    """Return message for an inverted date range."""
    return f"Start date {start_date} is after end date {end_date}"
