"""
Category repository interface.
"""
from abc import abstractmethod
from typing import Optional
from uuid import UUID

from shared.application.cancellation import CancellationToken
from shared.domain import GenericRepository, SearchableRepository, SearchInput, SearchOutput
from ..entities.category import Category


class CategoryRepository(GenericRepository[Category], SearchableRepository[Category]):
    """Abstract repository for the Category aggregate."""

    @abstractmethod
    def save(self, category: Category, cancellation_token: Optional[CancellationToken] = None) -> Category:
        """Save a category."""
        pass

    @abstractmethod
    def get(self, category_id: UUID, cancellation_token: Optional[CancellationToken] = None) -> Category:
        """Get a category by ID, raising CategoryNotFoundError when absent."""
        pass

    @abstractmethod
    def delete(self, category_id: UUID, cancellation_token: Optional[CancellationToken] = None) -> None:
        """Delete a category."""
        pass

    @abstractmethod
    def search(
        self,
        search_input: SearchInput,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> SearchOutput[Category]:
        """Search categories by name, paginated and sorted."""
        pass
