"""Category domain service."""

from typing import Optional
from fintrack.database.base import Database
from fintrack.domain.entities import Category as CategoryEntity
from fintrack.domain.errors import (
    ConflictError,
    DependencyError,
    NotFoundError,
    ValidationError,
    category_delete_blocked,
    category_name_not_found,
    category_not_found,
    duplicate_category_name,
)


class CategoryService:
    """Service for managing categories."""

    def __init__(self, db: Database):
        """Initialize category service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_category(self, name: str) -> int:
        """Create a category.

        Args:
            name: Category name (surrounding whitespace is stripped)

        Returns:
            Category ID

        Raises:
            ValidationError: If the name is empty
            ConflictError: If a category with the same name exists
        """
        name = (name or "").strip()
        if not name:
            raise ValidationError("Category name is required")

        if self.db.get_category_by_name(name) is not None:
            raise ConflictError(duplicate_category_name(name))

        return self.db.create_category(name=name)

    def get_category(self, category_id: int) -> Optional[CategoryEntity]:
        """Get category by ID.

        Args:
            category_id: Category ID

        Returns:
            Category entity or None if not found
        """
        return self.db.get_category(category_id)

    def require_category(self, category_id: int) -> CategoryEntity:
        """Get category by ID or raise.

        Raises:
            NotFoundError: If the category doesn't exist
        """
        category = self.db.get_category(category_id)
        if category is None:
            raise NotFoundError(category_not_found(category_id))
        return category

    def resolve_category(self, identifier: str) -> CategoryEntity:
        """Resolve a category from a name or a numeric ID string.

        Names take precedence, so a category literally named "2024" is found
        by name before ID 2024 is tried.

        Raises:
            NotFoundError: If no category matches
        """
        identifier = identifier.strip()
        category = self.db.get_category_by_name(identifier)
        if category is not None:
            return category
        if identifier.isdigit():
            category = self.db.get_category(int(identifier))
            if category is not None:
                return category
        raise NotFoundError(category_name_not_found(identifier))

    def list_categories(self) -> list[CategoryEntity]:
        """List all categories.

        Returns:
            List of category entities ordered by name
        """
        return self.db.list_categories()

    def delete_category(self, category_id: int) -> None:
        """Delete a category.

        Args:
            category_id: Category ID to delete

        Raises:
            NotFoundError: If the category doesn't exist
            DependencyError: If transactions still reference the category
        """
        self.require_category(category_id)

        transaction_count = self.db.get_category_transaction_count(category_id)
        if transaction_count > 0:
            raise DependencyError(category_delete_blocked(category_id, transaction_count))

        self.db.delete_category(category_id)
