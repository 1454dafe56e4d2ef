"""
Category DTOs.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from shared.domain import SearchOrder
from shared.domain.repository import DEFAULT_PAGE, DEFAULT_PER_PAGE
from ...domain.entities.category import Category


@dataclass
class CategoryOutput:
    """DTO for category output."""
    id: UUID
    name: str
    description: str
    is_active: bool
    created_at: datetime

    @classmethod
    def from_entity(cls, category: Category) -> 'CategoryOutput':
        """Create DTO from entity."""
        return cls(
            id=category.id,
            name=category.name,
            description=category.description,
            is_active=category.is_active,
            created_at=category.created_at,
        )


@dataclass
class GetCategoryInput:
    """DTO for fetching a single category."""
    id: UUID


@dataclass
class ListCategoriesInput:
    """DTO for listing categories."""
    page: int = DEFAULT_PAGE
    per_page: int = DEFAULT_PER_PAGE
    search: str = ""
    sort: str = ""
    dir: SearchOrder = SearchOrder.ASC


@dataclass
class ListCategoriesOutput:
    """DTO for a page of categories."""
    current_page: int
    per_page: int
    total: int
    items: List[CategoryOutput] = field(default_factory=list)


@dataclass
class CreateCategoryInput:
    """DTO for creating a category."""
    name: str
    description: str = ""
    is_active: bool = True


@dataclass
class UpdateCategoryInput:
    """DTO for updating a category."""
    id: UUID
    name: str
    description: Optional[str] = None
    is_active: Optional[bool] = None


@dataclass
class DeleteCategoryInput:
    """DTO for deleting a category."""
    id: UUID
