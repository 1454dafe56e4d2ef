"""
Pytest configuration and fixtures.
"""
import pytest

from apps.categories.domain.entities.category import Category


@pytest.fixture
def api_client():
    """Create an API client for testing."""
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def valid_category_data():
    """Name and description that satisfy every category invariant."""
    return {
        'name': 'Category name',
        'description': 'Category description',
    }


@pytest.fixture
def category(valid_category_data):
    """A freshly created, active category."""
    return Category.create(**valid_category_data)


@pytest.fixture
def category_repository():
    """Django-backed category repository."""
    from apps.categories.infrastructure.repositories import DjangoCategoryRepository
    return DjangoCategoryRepository()


@pytest.fixture
def stored_categories(db, category_repository):
    """Persist twenty categories named 'Category 01' to 'Category 20'."""
    return [
        category_repository.save(Category.create(f"Category {i:02d}", f"Description {i}"))
        for i in range(1, 21)
    ]
