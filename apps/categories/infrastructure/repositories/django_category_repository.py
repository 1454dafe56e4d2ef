"""
Django ORM implementation of CategoryRepository.
"""
import logging
from typing import Optional
from uuid import UUID

from django.db import transaction

from shared.application.cancellation import CancellationToken, raise_if_cancelled
from shared.domain import SearchInput, SearchOrder, SearchOutput
from ...domain.entities.category import Category
from ...domain.exceptions import CategoryNotFoundError
from ...domain.repositories.category_repository import CategoryRepository
from ..models.category_model import CategoryModel

logger = logging.getLogger(__name__)

# Lower-cased sort keys accepted from callers, mapped to model fields
SORTABLE_FIELDS = {
    'name': 'name',
    'id': 'id',
    'created_at': 'created_at',
    'createdat': 'created_at',
}
DEFAULT_SORT_FIELD = 'name'


class DjangoCategoryRepository(CategoryRepository):
    """Django ORM based category repository implementation."""

    def save(self, category: Category, cancellation_token: Optional[CancellationToken] = None) -> Category:
        """Save a category entity."""
        raise_if_cancelled(cancellation_token)
        with transaction.atomic():
            model, _ = CategoryModel.objects.update_or_create(
                id=category.id,
                defaults={
                    'name': category.name,
                    'description': category.description,
                    'is_active': category.is_active,
                    'created_at': category.created_at,
                }
            )
            return self._to_entity(model)

    def get(self, category_id: UUID, cancellation_token: Optional[CancellationToken] = None) -> Category:
        """Get a category by ID."""
        raise_if_cancelled(cancellation_token)
        try:
            model = CategoryModel.objects.get(id=category_id)
        except CategoryModel.DoesNotExist:
            raise CategoryNotFoundError(category_id)
        return self._to_entity(model)

    def delete(self, category_id: UUID, cancellation_token: Optional[CancellationToken] = None) -> None:
        """Delete a category."""
        raise_if_cancelled(cancellation_token)
        deleted, _ = CategoryModel.objects.filter(id=category_id).delete()
        if not deleted:
            raise CategoryNotFoundError(category_id)

    def search(
        self,
        search_input: SearchInput,
        cancellation_token: Optional[CancellationToken] = None,
    ) -> SearchOutput[Category]:
        """Search categories by name, paginated and sorted."""
        raise_if_cancelled(cancellation_token)

        queryset = CategoryModel.objects.all()
        if search_input.search:
            queryset = queryset.filter(name__icontains=search_input.search)

        total = queryset.count()
        offset = search_input.offset
        models = queryset.order_by(*self._ordering(search_input))[offset:offset + search_input.per_page]

        logger.debug(
            "Category search %r page=%s per_page=%s matched %s",
            search_input.search, search_input.page, search_input.per_page, total,
        )
        return SearchOutput(
            current_page=search_input.page,
            per_page=search_input.per_page,
            total=total,
            items=[self._to_entity(model) for model in models],
        )

    def _ordering(self, search_input: SearchInput) -> list:
        field = SORTABLE_FIELDS.get(search_input.order_by.lower())
        if field is None:
            return [DEFAULT_SORT_FIELD, 'id']
        prefix = '-' if search_input.order == SearchOrder.DESC else ''
        if field == 'id':
            return [f'{prefix}id']
        # Secondary key keeps pages stable when the primary key ties
        return [f'{prefix}{field}', 'id']

    def _to_entity(self, model: CategoryModel) -> Category:
        """Convert Django model to domain entity."""
        return Category(
            id=model.id,
            name=model.name,
            description=model.description,
            is_active=model.is_active,
            created_at=model.created_at,
        )
